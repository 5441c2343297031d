"""Exponent code entity."""

from dataclasses import dataclass
from enum import Enum


class ExponentKind(str, Enum):
    """How an exponent token was interpreted."""

    NUMERIC = "numeric"
    LETTER = "letter"
    EMPTY = "empty"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ExponentCode:
    """Resolved damage exponent token."""

    token: str
    kind: ExponentKind
    exponent: int  # power of ten

    @property
    def is_recognized(self) -> bool:
        return self.kind != ExponentKind.UNKNOWN
