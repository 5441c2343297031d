"""Repository interfaces."""

from .storm_data_repository import StormDataRepository
from .dataset_repository import DatasetRepository
from .impact_report_repository import ImpactReportRepository

__all__ = [
    "StormDataRepository",
    "DatasetRepository",
    "ImpactReportRepository",
]
