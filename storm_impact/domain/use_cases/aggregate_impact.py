"""Use case for aggregating health and economic impact by event group."""

import logging
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence
import pandas as pd
from ..entities.clean_record import CleanRecord
from ..entities.event_group import EventGroup
from ..entities.impact_aggregate import ImpactAggregate, ImpactSummary

logger = logging.getLogger(__name__)


def aggregate_partial(records: Iterable[CleanRecord]) -> Dict[EventGroup, ImpactAggregate]:
    """Sum one batch of records per group, for merging with other batches."""
    partial: Dict[EventGroup, ImpactAggregate] = {}
    for r in records:
        current = partial.get(r.event_group) or ImpactAggregate(event_group=r.event_group)
        partial[r.event_group] = current.merge(
            ImpactAggregate(
                event_group=r.event_group,
                count=1,
                injuries=r.injuries,
                fatalities=r.fatalities,
                property_damage=r.property_damage,
                crop_damage=r.crop_damage,
            )
        )
    return partial


def merge_partials(
    partials: Iterable[Dict[EventGroup, ImpactAggregate]],
) -> Dict[EventGroup, ImpactAggregate]:
    """Merge partial aggregates produced by ``aggregate_partial``."""
    merged: Dict[EventGroup, ImpactAggregate] = {}
    for partial in partials:
        for group, aggregate in partial.items():
            merged[group] = merged[group].merge(aggregate) if group in merged else aggregate
    return merged


def count_by_year(records: Iterable[CleanRecord]) -> Dict[int, int]:
    """Number of records per year, in year order."""
    counts = Counter(r.year for r in records)
    return dict(sorted(counts.items()))


def build_summary(
    aggregates: Iterable[ImpactAggregate],
    records: int = 0,
    normalization_warnings: int = 0,
) -> ImpactSummary:
    """Order aggregates by health and by economic totals, largest first."""
    order = {g: i for i, g in enumerate(EventGroup)}
    aggregates = sorted(aggregates, key=lambda a: order[a.event_group])
    return ImpactSummary(
        health=sorted(aggregates, key=lambda a: a.health_total, reverse=True),
        economic=sorted(aggregates, key=lambda a: a.economic_total, reverse=True),
        records=records,
        normalization_warnings=normalization_warnings,
    )


class AggregateImpactUseCase:
    """Use case to compute per-group impact totals and means."""

    def __init__(self, min_year: Optional[int] = None):
        """
        Initialize use case.

        Args:
            min_year: Only aggregate records from this year on (default: all)
        """
        self.min_year = min_year

    def to_frame(self, records: Sequence[CleanRecord]) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {
                    "year": r.year,
                    "event_group": r.event_group.value,
                    "injuries": r.injuries,
                    "fatalities": r.fatalities,
                    "property_damage": r.property_damage,
                    "crop_damage": r.crop_damage,
                }
                for r in records
            ],
            columns=[
                "year",
                "event_group",
                "injuries",
                "fatalities",
                "property_damage",
                "crop_damage",
            ],
        )

    def execute(
        self,
        records: Sequence[CleanRecord],
        normalization_warnings: int = 0,
    ) -> ImpactSummary:
        """
        Execute the aggregation.

        Args:
            records: Classified clean records
            normalization_warnings: Unrecognized exponent codes seen while cleaning

        Returns:
            ImpactSummary with one aggregate per non-empty group
        """
        logger.info(f"Aggregating impact over {len(records)} records")

        df = self.to_frame(records)
        if self.min_year is not None:
            df = df[df["year"] >= self.min_year]
            logger.info(f"Restricted to {len(df)} records from {self.min_year} on")

        grouped = df.groupby("event_group", sort=False).agg(
            count=("injuries", "size"),
            injuries=("injuries", "sum"),
            fatalities=("fatalities", "sum"),
            property_damage=("property_damage", "sum"),
            crop_damage=("crop_damage", "sum"),
        )

        aggregates: List[ImpactAggregate] = [
            ImpactAggregate(
                event_group=EventGroup(group),
                count=int(row["count"]),
                injuries=int(row["injuries"]),
                fatalities=int(row["fatalities"]),
                property_damage=float(row["property_damage"]),
                crop_damage=float(row["crop_damage"]),
            )
            for group, row in grouped.iterrows()
        ]

        summary = build_summary(
            aggregates,
            records=len(df),
            normalization_warnings=normalization_warnings,
        )
        logger.info(f"Aggregated impact for {len(aggregates)} event groups")
        return summary
