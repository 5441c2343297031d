"""CLI interface for storm impact analysis."""

import argparse
import logging
import sys

import pandas as pd
import requests

from ...application.services.storm_impact_service import StormImpactService
from ...domain.entities.impact_aggregate import ImpactSummary
from ...domain.exceptions import StormDataError
from ...infrastructure.repositories.csv_storm_data_repository import CsvStormDataRepository
from ...infrastructure.repositories.http_dataset_repository import HttpDatasetRepository
from ...infrastructure.repositories.matplotlib_report_repository import (
    MatplotlibReportRepository,
)

from ...config.settings import (
    DATA_URL,
    DATA_FILE,
    EXPORT_DIR,
    EVENT_GROUP_DEFINITIONS,
    DOWNLOAD_SETTINGS,
    ANALYSIS_SETTINGS,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def download() -> None:
    """Fetch the storm catalog into the local cache."""
    dataset_repo = HttpDatasetRepository(**DOWNLOAD_SETTINGS)
    path = dataset_repo.ensure_local(DATA_URL, DATA_FILE)
    print(f"\nStorm data available at: {path}")


def build_service(with_report: bool = False) -> StormImpactService:
    dataset_repo = HttpDatasetRepository(**DOWNLOAD_SETTINGS)
    dataset_repo.ensure_local(DATA_URL, DATA_FILE)

    return StormImpactService(
        storm_data_repo=CsvStormDataRepository(str(DATA_FILE)),
        event_group_definitions=EVENT_GROUP_DEFINITIONS,
        report_repo=MatplotlibReportRepository(str(EXPORT_DIR)) if with_report else None,
        dataset_repo=dataset_repo,
        data_url=DATA_URL,
        data_file=DATA_FILE,
        min_year=ANALYSIS_SETTINGS["min_year"],
    )


def print_summary(summary: ImpactSummary) -> None:
    """Print the health and economic tables."""
    top_n = ANALYSIS_SETTINGS["top_n"]
    health = pd.DataFrame([a.to_health_dict() for a in summary.health[:top_n]])
    economic = pd.DataFrame([a.to_economic_dict() for a in summary.economic[:top_n]])

    print("\n" + "=" * 70)
    print(" POPULATION HEALTH IMPACT BY EVENT GROUP ")
    print("=" * 70)
    print(health.to_string(index=False) if not health.empty else "(no events)")
    print("\n" + "=" * 70)
    print(" ECONOMIC IMPACT BY EVENT GROUP (millions of USD) ")
    print("=" * 70)
    print(economic.to_string(index=False) if not economic.empty else "(no events)")
    print("-" * 70)
    print(f" Events with impact: {summary.records}")
    if summary.normalization_warnings:
        print(f" Unrecognized exponent codes: {summary.normalization_warnings}")
    print("=" * 70)


def main():
    parser = argparse.ArgumentParser(description="Storm Event Impact Analysis")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("download", help="Download the storm catalog if not cached")
    subparsers.add_parser(
        "analyze",
        help="Run the pipeline: load -> clean -> classify -> aggregate, and print tables",
    )
    subparsers.add_parser("report", help="Analyze and save impact tables and charts")

    args = parser.parse_args()

    try:
        # === Command: download ===
        if args.command == "download":
            download()

        # === Command: analyze ===
        elif args.command == "analyze":
            service = build_service()
            print_summary(service.analyze())

        # === Command: report ===
        elif args.command == "report":
            service = build_service(with_report=True)
            summary = service.analyze()
            print_summary(summary)
            written = service.export_report(summary)
            print(f"\nReport saved to: {EXPORT_DIR}")
            for path in written:
                print(f"  → {path.name}")

    except StormDataError as e:
        logger.error(f"Malformed storm data: {e}")
        sys.exit(1)
    except (FileNotFoundError, requests.RequestException) as e:
        logger.error(f"Storm data unavailable: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
