"""Tests for year extraction."""

import pytest
from storm_impact.domain.exceptions import DateParseError
from storm_impact.domain.use_cases.extract_year import extract_year


def test_extract_year_from_catalog_date():
    """Test the catalog date layout."""
    assert extract_year("6/1/2005 0:00:00") == 2005
    assert extract_year("4/18/1950 0:00:00") == 1950


def test_extract_year_without_time():
    """Test a date without a time part still has three tokens."""
    assert extract_year("12/31/1999") == 1999


@pytest.mark.parametrize("value", ["", "2005", "6/2005", "6/1"])
def test_extract_year_too_few_tokens(value):
    """Test dates with fewer than three tokens are rejected."""
    with pytest.raises(DateParseError):
        extract_year(value)


def test_extract_year_non_integer_year():
    """Test a non-integer third token is rejected."""
    with pytest.raises(DateParseError) as exc_info:
        extract_year("6/1/20x5 0:00:00", row=7)
    assert exc_info.value.row == 7
    assert exc_info.value.value == "6/1/20x5 0:00:00"
    assert "row 7" in str(exc_info.value)


def test_date_parse_error_is_value_error():
    """Test DateParseError can be handled as ValueError."""
    with pytest.raises(ValueError):
        extract_year("garbage")


def test_extract_year_keeps_empty_tokens():
    """Test adjacent delimiters leave an empty token between them."""
    assert extract_year("6//2005 0:00:00") == 2005
    with pytest.raises(DateParseError):
        extract_year("6/1//2005")


@pytest.mark.parametrize(
    "value", ["6/1/2_005 0:00:00", "6/1/+2005 0:00:00", "6/1/-2005", "6/1/٢٠٠٥"]
)
def test_extract_year_requires_plain_digits(value):
    """Test the year token must be ASCII digits only."""
    with pytest.raises(DateParseError):
        extract_year(value)
