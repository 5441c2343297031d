"""NOAA storm catalog repository backed by a compressed CSV file."""

import logging
from pathlib import Path
import pandas as pd
from ...domain.repositories.storm_data_repository import StormDataRepository

logger = logging.getLogger(__name__)


class CsvStormDataRepository(StormDataRepository):
    """Repository for the storm catalog stored as (bzip2-compressed) CSV."""

    def __init__(self, data_file: str, compression: str = "infer"):
        """
        Initialize repository.

        Args:
            data_file: Path to the CSV file, usually ``.csv.bz2``
            compression: pandas compression argument (inferred from suffix)
        """
        self.data_file = Path(data_file)
        self.compression = compression
        if not self.data_file.exists():
            raise FileNotFoundError(f"Storm data file not found: {data_file}")

    def get_raw_table(self) -> pd.DataFrame:
        """Read every column as text; blanks become empty strings."""
        logger.info(f"Loading storm data from {self.data_file}")

        try:
            df = pd.read_csv(
                self.data_file,
                compression=self.compression,
                dtype=str,
                keep_default_na=False,
                low_memory=False,
            )
        except Exception as e:
            logger.error(f"Error reading CSV file: {e}")
            raise

        logger.info(f"Read {len(df)} rows with {len(df.columns)} columns")
        return df
