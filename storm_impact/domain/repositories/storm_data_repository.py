"""Storm data repository interface."""

from abc import ABC, abstractmethod
import pandas as pd


class StormDataRepository(ABC):
    """Abstract repository for the raw storm event table."""

    @abstractmethod
    def get_raw_table(self) -> pd.DataFrame:
        """
        Read the storm event table as stored.

        Returns:
            DataFrame with one row per source row, in source order, and every
            column read as text (blank cells as empty strings)
        """
        pass
