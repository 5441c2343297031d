"""Damage magnitude normalization."""

import logging
import math
import warnings
from collections import Counter
from typing import Dict, Tuple
from ..entities.exponent_code import ExponentCode, ExponentKind
from ..entities.raw_record import RawRecord
from ..exceptions import NormalizationWarning

logger = logging.getLogger(__name__)

# Letter codes and the power of ten they stand for
EXPONENT_LETTERS: Dict[str, int] = {
    "h": 2,  # hundreds
    "k": 3,  # thousands
    "m": 6,  # millions
    "b": 9,  # billions
}

# Normalized damages are in millions
UNIT_EXPONENT = 6


def resolve_exponent(token: str) -> ExponentCode:
    """
    Interpret a PROPDMGEXP / CROPDMGEXP token.

    Digits give their own value, h/k/m/b (any case) give 2/3/6/9, and
    anything else, blank included, gives 0.
    """
    text = str(token).strip()
    if not text:
        return ExponentCode(token=text, kind=ExponentKind.EMPTY, exponent=0)
    if text.isascii() and text.isdigit():
        return ExponentCode(token=text, kind=ExponentKind.NUMERIC, exponent=int(text))
    letter = text.lower()
    if letter in EXPONENT_LETTERS:
        return ExponentCode(
            token=text, kind=ExponentKind.LETTER, exponent=EXPONENT_LETTERS[letter]
        )
    return ExponentCode(token=text, kind=ExponentKind.UNKNOWN, exponent=0)


def apply_exponent(base: float, code: ExponentCode) -> float:
    """
    Scale ``base`` by ``code`` and express it in millions.

    A power of ten beyond the float range gives ``inf`` for a positive base
    and 0.0 for a zero base.
    """
    try:
        return base * 10.0 ** (code.exponent - UNIT_EXPONENT)
    except OverflowError:
        return math.inf if base > 0 else 0.0


def normalize_magnitude(base: float, token: str) -> float:
    """Return ``base * 10 ** (exponent - 6)`` for an exponent token."""
    return apply_exponent(base, resolve_exponent(token))


class NormalizeDamageUseCase:
    """Normalize property and crop damage, counting unrecognized exponent codes."""

    def __init__(self):
        self.unknown_tokens: Counter = Counter()

    @property
    def warning_count(self) -> int:
        return sum(self.unknown_tokens.values())

    def reset(self) -> None:
        self.unknown_tokens.clear()

    def _normalize(self, base: float, token: str) -> float:
        code = resolve_exponent(token)
        value = apply_exponent(base, code)
        if not code.is_recognized or math.isinf(value):
            # powers of ten past the float range are read like unknown codes
            self.unknown_tokens[code.token] += 1
            value = base * 10.0 ** -UNIT_EXPONENT
        return value

    def execute(self, record: RawRecord) -> Tuple[float, float]:
        """
        Normalize one record's damages.

        Args:
            record: Raw record

        Returns:
            Tuple of (property_damage, crop_damage) in millions
        """
        return (
            self._normalize(record.property_damage, record.property_damage_exp),
            self._normalize(record.crop_damage, record.crop_damage_exp),
        )

    def report(self) -> None:
        """Log and warn about the unrecognized tokens seen since the last reset."""
        if not self.unknown_tokens:
            return
        details = ", ".join(f"{t!r}: {n}" for t, n in self.unknown_tokens.most_common())
        message = (
            f"{self.warning_count} damage values had unrecognized exponent codes "
            f"and were read with exponent 0 ({details})"
        )
        logger.warning(message)
        warnings.warn(message, NormalizationWarning, stacklevel=2)
