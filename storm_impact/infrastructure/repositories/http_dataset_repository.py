"""HTTP download of the storm catalog with a local cache."""

import logging
from pathlib import Path
import requests
from ...domain.repositories.dataset_repository import DatasetRepository

logger = logging.getLogger(__name__)


class HttpDatasetRepository(DatasetRepository):
    """Download a dataset over HTTP unless a cached copy already exists."""

    def __init__(self, timeout: int = 120, chunk_size: int = 8192):
        """
        Initialize repository.

        Args:
            timeout: Request timeout in seconds
            chunk_size: Streaming chunk size in bytes
        """
        self.timeout = timeout
        self.chunk_size = chunk_size

    def ensure_local(self, url: str, path: Path) -> Path:
        """Return ``path``, downloading ``url`` into it first if it is missing."""
        path = Path(path)
        if path.exists():
            logger.info(f"Using cached dataset {path}")
            return path

        path.parent.mkdir(parents=True, exist_ok=True)
        partial = path.with_name(path.name + ".part")
        logger.info(f"Downloading {url} to {path}")

        try:
            response = requests.get(url, timeout=self.timeout, stream=True)
            response.raise_for_status()

            downloaded = 0
            with open(partial, "wb") as f:
                for chunk in response.iter_content(chunk_size=self.chunk_size):
                    if chunk:
                        f.write(chunk)
                        downloaded += len(chunk)
        except (requests.RequestException, OSError) as e:
            logger.error(f"Error downloading dataset: {e}")
            partial.unlink(missing_ok=True)
            raise

        partial.replace(path)
        logger.info(f"Downloaded {downloaded / (1024 * 1024):.1f} MB to {path}")
        return path
