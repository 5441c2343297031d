"""Year extraction from catalog begin dates."""

import re
from typing import Optional
from ..exceptions import DateParseError

# BGN_DATE looks like 'MM/DD/YYYY HH:MM:SS'
_DATE_DELIMITER = re.compile(r"[/\s]")
_YEAR = re.compile(r"[0-9]+")


def extract_year(begin_date: str, row: Optional[int] = None) -> int:
    """
    Return the year from a catalog begin date.

    The value is split on each slash or whitespace character and the third
    token is read as the year, so '6/1/2005 0:00:00' gives 2005. Adjacent
    delimiters leave an empty token between them. Only this layout is
    supported.

    Args:
        begin_date: BGN_DATE text
        row: Source row, reported in the error

    Raises:
        DateParseError: If there are fewer than three tokens or the third is
            not an integer
    """
    tokens = _DATE_DELIMITER.split(str(begin_date).strip())
    if len(tokens) < 3 or not _YEAR.fullmatch(tokens[2]):
        raise DateParseError(begin_date, row=row)
    return int(tokens[2])
