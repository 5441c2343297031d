"""Main service orchestrating the storm impact pipeline."""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ...domain.entities.clean_record import CleanRecord
from ...domain.entities.impact_aggregate import ImpactSummary
from ...domain.repositories.dataset_repository import DatasetRepository
from ...domain.repositories.impact_report_repository import ImpactReportRepository
from ...domain.repositories.storm_data_repository import StormDataRepository

# Use cases
from ...domain.use_cases.load_storm_data import LoadStormDataUseCase
from ...domain.use_cases.project_fields import ProjectFieldsUseCase
from ...domain.use_cases.clean_storm_data import CleanStormDataUseCase
from ...domain.use_cases.classify_events import ClassifyEventsUseCase
from ...domain.use_cases.aggregate_impact import AggregateImpactUseCase, count_by_year

logger = logging.getLogger(__name__)


class StormImpactService:
    """Orchestrates load -> project -> clean -> classify -> aggregate."""

    def __init__(
        self,
        storm_data_repo: StormDataRepository,
        event_group_definitions: Sequence[Tuple[str, Sequence[str]]],
        report_repo: Optional[ImpactReportRepository] = None,
        dataset_repo: Optional[DatasetRepository] = None,
        data_url: Optional[str] = None,
        data_file: Optional[Path] = None,
        min_year: Optional[int] = None,
    ):
        self.storm_data_repo = storm_data_repo
        self.report_repo = report_repo
        self.dataset_repo = dataset_repo
        self.data_url = data_url
        self.data_file = data_file

        # Use cases
        self.load_uc = LoadStormDataUseCase(storm_data_repo, ProjectFieldsUseCase())
        self.clean_uc = CleanStormDataUseCase()
        self.classify_uc = ClassifyEventsUseCase(event_group_definitions)
        self.aggregate_uc = AggregateImpactUseCase(min_year=min_year)

        # Runtime state
        self.clean_records: Optional[List[CleanRecord]] = None
        self.summary: Optional[ImpactSummary] = None

    def acquire_dataset(self) -> Path:
        """Download the catalog if it is not cached yet."""
        if self.dataset_repo is None or not self.data_url or self.data_file is None:
            raise RuntimeError("No dataset source configured")
        return self.dataset_repo.ensure_local(self.data_url, self.data_file)

    def prepare_clean_records(self) -> List[CleanRecord]:
        """Load, project and clean the catalog."""
        logger.info("=== Preparing clean storm records ===")
        raw_records = self.load_uc.execute()
        clean_records = self.clean_uc.execute(raw_records)
        logger.info("=== Clean storm records ready ===")
        return clean_records

    def classify(self, records: List[CleanRecord]) -> List[CleanRecord]:
        return self.classify_uc.execute(records)

    def analyze(self) -> ImpactSummary:
        """Run the full pipeline and return health and economic aggregates."""
        logger.info("=== Starting storm impact analysis ===")

        records = self.classify(self.prepare_clean_records())
        summary = self.aggregate_uc.execute(
            records, normalization_warnings=self.clean_uc.warning_count
        )

        self.clean_records = records
        self.summary = summary

        logger.info(
            f"=== Analysis completed: {summary.records} records in "
            f"{len(summary.health)} event groups ==="
        )
        return summary

    def export_report(self, summary: Optional[ImpactSummary] = None) -> List[Path]:
        """Write tables and charts for the last (or given) summary."""
        if self.report_repo is None:
            raise RuntimeError("No report repository configured")
        if summary is None:
            summary = self.summary if self.summary is not None else self.analyze()

        year_counts = count_by_year(self.clean_records or [])
        return self.report_repo.save_report(summary, year_counts)
