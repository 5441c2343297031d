"""Dataset acquisition interface."""

from abc import ABC, abstractmethod
from pathlib import Path


class DatasetRepository(ABC):
    """Abstract repository that makes a remote dataset available locally."""

    @abstractmethod
    def ensure_local(self, url: str, path: Path) -> Path:
        """
        Make sure the dataset exists at ``path``, fetching it only if absent.

        Args:
            url: Remote location of the dataset
            path: Local cache path

        Returns:
            The local path
        """
        pass
