"""Use case for loading raw storm records."""

import logging
from typing import List, Optional
import numpy as np
import pandas as pd
from ..entities.raw_record import RawRecord
from ..exceptions import FormatError
from ..repositories.storm_data_repository import StormDataRepository
from .project_fields import REQUIRED_COLUMNS, ProjectFieldsUseCase

logger = logging.getLogger(__name__)

INTEGER_COLUMNS = ("FATALITIES", "INJURIES")
REAL_COLUMNS = ("PROPDMG", "CROPDMG")


def _first_bad_row(df: pd.DataFrame, column: str, bad: pd.Series) -> FormatError:
    row = bad[bad].index[0]
    value = df.at[row, column]
    return FormatError(
        f"Column {column!r} has invalid value {value!r} at row {row}",
        column=column,
        row=int(row),
    )


def coerce_numeric(df: pd.DataFrame, column: str, integer: bool = False) -> pd.Series:
    """
    Convert a text column to numbers.

    Args:
        df: Table holding the column
        column: Column name
        integer: Require whole numbers

    Returns:
        Numeric series with the same index

    Raises:
        FormatError: On the first value that is blank, non-numeric, infinite,
            negative, or (for integer columns) fractional
    """
    values = pd.to_numeric(df[column].astype(str).str.strip(), errors="coerce").astype(float)
    bad = ~np.isfinite(values) | (values < 0)
    if integer:
        bad |= values.notna() & (values % 1 != 0)
    if bad.any():
        raise _first_bad_row(df, column, bad)
    if integer:
        return values.astype("int64")
    return values


class LoadStormDataUseCase:
    """Use case to load and type raw storm records from a repository."""

    def __init__(
        self,
        repository: StormDataRepository,
        projector: Optional[ProjectFieldsUseCase] = None,
    ):
        """
        Initialize use case.

        Args:
            repository: Repository for the raw storm table
            projector: Column projection step (default: required columns)
        """
        self.repository = repository
        self.projector = projector or ProjectFieldsUseCase()

    def validate_columns(self, df: pd.DataFrame) -> None:
        """Raise FormatError if a required column is absent."""
        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise FormatError(
                f"Missing required columns: {missing}. Available={list(df.columns)}",
                column=missing[0],
            )

    def execute(self) -> List[RawRecord]:
        """
        Execute the use case.

        Returns:
            List of RawRecord entities in source order

        Raises:
            FormatError: If a required column is absent or malformed
        """
        logger.info("Loading raw storm records")
        df = self.repository.get_raw_table()
        df = df.rename(columns={c: str(c).strip() for c in df.columns})

        self.validate_columns(df)
        df = self.projector.execute(df)

        for column in INTEGER_COLUMNS:
            df[column] = coerce_numeric(df, column, integer=True)
        for column in REAL_COLUMNS:
            df[column] = coerce_numeric(df, column)
        for column in ("EVTYPE", "PROPDMGEXP", "CROPDMGEXP", "BGN_DATE"):
            df[column] = df[column].fillna("").astype(str).str.strip()

        records = [
            RawRecord(
                event_type=row.EVTYPE,
                fatalities=int(row.FATALITIES),
                injuries=int(row.INJURIES),
                property_damage=float(row.PROPDMG),
                property_damage_exp=row.PROPDMGEXP,
                crop_damage=float(row.CROPDMG),
                crop_damage_exp=row.CROPDMGEXP,
                begin_date=row.BGN_DATE,
            )
            for row in df.itertuples(index=False)
        ]

        logger.info(f"Loaded {len(records)} raw storm records")
        return records
