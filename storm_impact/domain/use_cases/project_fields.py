"""Use case for keeping only the columns the pipeline needs."""

import logging
from typing import Any, Dict, Mapping, Sequence
import pandas as pd

logger = logging.getLogger(__name__)

# Source columns used downstream, by name
REQUIRED_COLUMNS = (
    "EVTYPE",
    "FATALITIES",
    "INJURIES",
    "PROPDMG",
    "PROPDMGEXP",
    "CROPDMG",
    "CROPDMGEXP",
    "BGN_DATE",
)


def project_columns(
    df: pd.DataFrame, columns: Sequence[str] = REQUIRED_COLUMNS
) -> pd.DataFrame:
    """Return a copy of ``df`` holding only ``columns``, in that order."""
    return df.loc[:, list(columns)].copy()


def project_row(
    row: Mapping[str, Any], columns: Sequence[str] = REQUIRED_COLUMNS
) -> Dict[str, Any]:
    """Return the subset of ``row`` named by ``columns``."""
    return {column: row[column] for column in columns if column in row}


class ProjectFieldsUseCase:
    """Use case to discard every column the pipeline does not use."""

    def __init__(self, columns: Sequence[str] = REQUIRED_COLUMNS):
        """
        Initialize use case.

        Args:
            columns: Columns to retain
        """
        self.columns = list(columns)

    def execute(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Execute the projection.

        Args:
            df: Raw storm table

        Returns:
            DataFrame restricted to the retained columns
        """
        dropped = [c for c in df.columns if c not in self.columns]
        projected = project_columns(df, self.columns)
        logger.info(
            f"Projected storm table onto {len(self.columns)} columns "
            f"({len(dropped)} dropped)"
        )
        return projected
