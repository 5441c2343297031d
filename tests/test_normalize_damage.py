"""Tests for damage magnitude normalization."""

import math
import warnings
import pytest
from storm_impact.domain.entities.exponent_code import ExponentKind
from storm_impact.domain.entities.raw_record import RawRecord
from storm_impact.domain.exceptions import NormalizationWarning
from storm_impact.domain.use_cases.normalize_damage import (
    NormalizeDamageUseCase,
    normalize_magnitude,
    resolve_exponent,
)


@pytest.mark.parametrize(
    "token, exponent",
    [("h", 2), ("H", 2), ("k", 3), ("K", 3), ("m", 6), ("M", 6), ("b", 9), ("B", 9)],
)
def test_letter_exponents(token, exponent):
    """Test letter codes in either case."""
    code = resolve_exponent(token)
    assert code.kind == ExponentKind.LETTER
    assert code.exponent == exponent
    assert normalize_magnitude(5.0, token) == pytest.approx(5.0 * 10 ** (exponent - 6))


@pytest.mark.parametrize("token", ["0", "3", "5", "8", "10", "012"])
def test_numeric_exponents(token):
    """Test digit tokens are used as the exponent directly."""
    code = resolve_exponent(token)
    assert code.kind == ExponentKind.NUMERIC
    assert code.exponent == int(token)
    assert normalize_magnitude(2.0, token) == pytest.approx(2.0 * 10 ** (int(token) - 6))


@pytest.mark.parametrize("token", ["", "?", "x", "+", "-", "kk"])
def test_other_tokens_use_exponent_zero(token):
    """Test unrecognized and blank tokens fall back to exponent 0."""
    assert resolve_exponent(token).exponent == 0
    assert normalize_magnitude(1.0, token) == pytest.approx(1e-6)


def test_blank_token_is_not_unknown():
    """Test blank tokens are expected, not unknown."""
    assert resolve_exponent("").kind == ExponentKind.EMPTY
    assert resolve_exponent("  ").kind == ExponentKind.EMPTY
    assert resolve_exponent("?").kind == ExponentKind.UNKNOWN


def test_exponent_past_float_range():
    """Test a huge numeric exponent gives inf instead of raising."""
    code = resolve_exponent("400")
    assert code.kind == ExponentKind.NUMERIC
    assert code.exponent == 400
    assert normalize_magnitude(1.0, "400") == math.inf
    assert normalize_magnitude(0.0, "400") == 0.0


def test_use_case_reads_huge_exponent_as_unknown():
    """Test an exponent past the float range is counted and read as exponent 0."""
    use_case = NormalizeDamageUseCase()
    record = RawRecord("HAIL", 0, 1, 1.0, "400", 2.0, "999", "1/1/2000 0:00:00")
    property_damage, crop_damage = use_case.execute(record)
    assert property_damage == pytest.approx(1e-6)
    assert crop_damage == pytest.approx(2e-6)
    assert use_case.unknown_tokens == {"400": 1, "999": 1}


def test_thousands_to_millions():
    """Test 10K is 0.01 million."""
    assert normalize_magnitude(10, "K") == pytest.approx(0.01)


def test_use_case_normalizes_both_fields():
    """Test property and crop damage use their own codes."""
    use_case = NormalizeDamageUseCase()
    record = RawRecord("FLOOD", 0, 0, 2.0, "B", 300.0, "k", "1/1/2006 0:00:00")
    property_damage, crop_damage = use_case.execute(record)
    assert property_damage == pytest.approx(2000.0)
    assert crop_damage == pytest.approx(0.3)
    assert use_case.warning_count == 0


def test_use_case_counts_and_warns_on_unknown_tokens():
    """Test unknown tokens are counted and reported once."""
    use_case = NormalizeDamageUseCase()
    use_case.execute(RawRecord("HAIL", 0, 0, 1.0, "?", 1.0, "?", "1/1/2000"))
    use_case.execute(RawRecord("HAIL", 0, 0, 1.0, "+", 0.0, "", "1/1/2000"))
    assert use_case.warning_count == 3
    assert use_case.unknown_tokens["?"] == 2

    with pytest.warns(NormalizationWarning, match="3 damage values"):
        use_case.report()

    use_case.reset()
    assert use_case.warning_count == 0


def test_report_is_silent_without_unknown_tokens():
    """Test no warning is emitted when every token was recognized."""
    use_case = NormalizeDamageUseCase()
    use_case.execute(RawRecord("HAIL", 0, 0, 1.0, "K", 0.0, "", "1/1/2000"))
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        use_case.report()
