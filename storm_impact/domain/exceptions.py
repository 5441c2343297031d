"""Domain errors raised by the cleaning pipeline."""

from typing import Optional


class StormDataError(ValueError):
    """Base class for structural problems in the storm catalog."""


class FormatError(StormDataError):
    """A required column is missing or holds values that cannot be coerced."""

    def __init__(self, message: str, column: Optional[str] = None, row: Optional[int] = None):
        super().__init__(message)
        self.column = column
        self.row = row


class DateParseError(StormDataError):
    """A begin-date does not split into at least three tokens with an integer year."""

    def __init__(self, value: str, row: Optional[int] = None):
        location = f" at row {row}" if row is not None else ""
        super().__init__(f"Cannot extract year from begin date {value!r}{location}")
        self.value = value
        self.row = row


class NormalizationWarning(UserWarning):
    """Unrecognized exponent codes were resolved to exponent 0."""
