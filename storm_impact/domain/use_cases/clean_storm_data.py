"""Use case for turning raw storm records into clean records."""

import logging
from typing import List, Optional, Sequence
from ..entities.clean_record import CleanRecord
from ..entities.event_group import EventGroup
from ..entities.raw_record import RawRecord
from .extract_year import extract_year
from .filter_impact import has_impact
from .normalize_damage import NormalizeDamageUseCase

logger = logging.getLogger(__name__)


class CleanStormDataUseCase:
    """Use case to filter, date and normalize raw storm records."""

    def __init__(self, normalizer: Optional[NormalizeDamageUseCase] = None):
        """
        Initialize use case.

        Args:
            normalizer: Damage normalizer (default: a fresh one)
        """
        self.normalizer = normalizer or NormalizeDamageUseCase()

    @property
    def warning_count(self) -> int:
        """Unrecognized exponent codes seen in the last run."""
        return self.normalizer.warning_count

    def clean_record(self, record: RawRecord, row: Optional[int] = None) -> CleanRecord:
        """
        Build a clean record from a raw record that has impact.

        Raises:
            DateParseError: If the begin date has no readable year
        """
        year = extract_year(record.begin_date, row=row)
        property_damage, crop_damage = self.normalizer.execute(record)
        return CleanRecord(
            year=year,
            event_type=record.event_type.strip().lower(),
            fatalities=record.fatalities,
            injuries=record.injuries,
            property_damage=property_damage,
            crop_damage=crop_damage,
            event_group=EventGroup.OTHERS,
        )

    def execute(self, records: Sequence[RawRecord]) -> List[CleanRecord]:
        """
        Execute the cleaning.

        Args:
            records: Raw records in source order

        Returns:
            Clean records for every raw record with impact, in source order

        Raises:
            DateParseError: On the first unreadable begin date; the row is the
                record's position in ``records``
        """
        logger.info(f"Cleaning {len(records)} raw storm records")
        self.normalizer.reset()

        result = []
        for row, record in enumerate(records):
            # filter on raw bases, before any exponent is applied
            if not has_impact(record):
                continue
            result.append(self.clean_record(record, row=row))

        self.normalizer.report()
        logger.info(
            f"Cleaned {len(result)} records "
            f"({len(records) - len(result)} without impact dropped)"
        )
        return result
