"""Concrete repository implementations."""

from .csv_storm_data_repository import CsvStormDataRepository
from .http_dataset_repository import HttpDatasetRepository
from .matplotlib_report_repository import MatplotlibReportRepository

__all__ = [
    "CsvStormDataRepository",
    "HttpDatasetRepository",
    "MatplotlibReportRepository",
]
