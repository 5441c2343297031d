"""Impact report repository interface."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List
from ..entities.impact_aggregate import ImpactSummary


class ImpactReportRepository(ABC):
    """Abstract repository for rendering impact aggregates."""

    @abstractmethod
    def save_report(
        self,
        summary: ImpactSummary,
        year_counts: Dict[int, int],
    ) -> List[Path]:
        """
        Render tables and charts for an impact summary.

        Args:
            summary: Health and economic aggregates
            year_counts: Number of clean records per year

        Returns:
            Paths of the files written
        """
        pass
