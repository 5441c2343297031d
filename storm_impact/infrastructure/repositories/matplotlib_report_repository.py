"""Impact report written as CSV tables and matplotlib charts."""

import logging
from pathlib import Path
from typing import Dict, List
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd
from ...domain.entities.impact_aggregate import ImpactSummary
from ...domain.repositories.impact_report_repository import ImpactReportRepository

logger = logging.getLogger(__name__)


class MatplotlibReportRepository(ImpactReportRepository):
    """Repository that saves impact tables and bar charts to a directory."""

    def __init__(self, output_dir: str = "output/latest_run"):
        """
        Initialize repository.

        Args:
            output_dir: Directory for the report files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def health_frame(self, summary: ImpactSummary) -> pd.DataFrame:
        return pd.DataFrame([a.to_health_dict() for a in summary.health])

    def economic_frame(self, summary: ImpactSummary) -> pd.DataFrame:
        return pd.DataFrame([a.to_economic_dict() for a in summary.economic])

    def _bar_chart(
        self, df: pd.DataFrame, columns: List[str], title: str, ylabel: str, path: Path
    ) -> Path:
        fig, ax = plt.subplots(figsize=(10, 6))
        if not df.empty:
            df.set_index("event_group")[columns].plot(kind="bar", stacked=True, ax=ax)
        ax.set_title(title)
        ax.set_xlabel("Event group")
        ax.set_ylabel(ylabel)
        fig.tight_layout()
        fig.savefig(path)
        plt.close(fig)
        return path

    def _year_chart(self, year_counts: Dict[int, int], path: Path) -> Path:
        fig, ax = plt.subplots(figsize=(10, 4))
        ax.bar(list(year_counts.keys()), list(year_counts.values()))
        ax.set_title("Events with impact per year")
        ax.set_xlabel("Year")
        ax.set_ylabel("Events")
        fig.tight_layout()
        fig.savefig(path)
        plt.close(fig)
        return path

    def save_report(
        self,
        summary: ImpactSummary,
        year_counts: Dict[int, int],
    ) -> List[Path]:
        """Write the health and economic tables and their charts."""
        logger.info(f"Saving impact report to {self.output_dir}")

        health_df = self.health_frame(summary)
        economic_df = self.economic_frame(summary)

        written = []
        health_csv = self.output_dir / "health_impact.csv"
        health_df.to_csv(health_csv, index=False)
        written.append(health_csv)

        economic_csv = self.output_dir / "economic_impact.csv"
        economic_df.to_csv(economic_csv, index=False)
        written.append(economic_csv)

        written.append(
            self._bar_chart(
                health_df,
                ["fatalities", "injuries"],
                "Population health impact by event group",
                "People",
                self.output_dir / "health_impact.png",
            )
        )
        written.append(
            self._bar_chart(
                economic_df,
                ["property_damage", "crop_damage"],
                "Economic impact by event group",
                "Damage (millions of USD)",
                self.output_dir / "economic_impact.png",
            )
        )
        written.append(self._year_chart(year_counts, self.output_dir / "events_per_year.png"))

        logger.info(f"Impact report saved: {len(written)} files")
        return written
