"""Use case for grouping free-text event types into event groups."""

import logging
import re
from collections import Counter
from typing import Dict, Iterable, List, Pattern, Sequence, Tuple
from ..entities.clean_record import CleanRecord
from ..entities.event_group import EventGroup

logger = logging.getLogger(__name__)

GroupRule = Tuple[EventGroup, Pattern]


def build_rules(definitions: Sequence[Tuple[str, Sequence[str]]]) -> List[GroupRule]:
    """
    Compile ``(group, fragments)`` definitions into ordered rules.

    Each fragment is a regular expression searched anywhere in the event
    type. Order is preserved.
    """
    rules = []
    for name, fragments in definitions:
        group = EventGroup(name)
        if group == EventGroup.OTHERS:
            raise ValueError("'others' is the default group and takes no fragments")
        pattern = re.compile("|".join(f"(?:{f})" for f in fragments))
        rules.append((group, pattern))
    return rules


def classify_event_type(event_type: str, rules: Sequence[GroupRule]) -> EventGroup:
    """
    Return the event group for a lowercased event type.

    Starts from ``others`` and walks the rules in order; every matching rule
    replaces the current label, so the last match wins.
    """
    label = EventGroup.OTHERS
    text = event_type.lower()
    for group, pattern in rules:
        if pattern.search(text):
            label = group
    return label


class ClassifyEventsUseCase:
    """Use case to label clean records with their event group."""

    def __init__(self, definitions: Sequence[Tuple[str, Sequence[str]]]):
        """
        Initialize use case.

        Args:
            definitions: Ordered ``(group name, fragments)`` pairs, lowest
                precedence first
        """
        self.rules = build_rules(definitions)

    def classify(self, event_type: str) -> EventGroup:
        return classify_event_type(event_type, self.rules)

    def execute(self, records: Iterable[CleanRecord]) -> List[CleanRecord]:
        """
        Execute classification.

        Args:
            records: Clean records

        Returns:
            The same records with ``event_group`` assigned
        """
        records = list(records)
        logger.info(f"Classifying {len(records)} records")

        # the catalog repeats a small vocabulary of event types
        cache: Dict[str, EventGroup] = {}
        for record in records:
            group = cache.get(record.event_type)
            if group is None:
                group = cache[record.event_type] = self.classify(record.event_type)
            record.event_group = group

        counts = Counter(r.event_group for r in records)
        logger.info(
            f"Classified {len(cache)} distinct event types: "
            + ", ".join(f"{g.value}={counts[g]}" for g in EventGroup if counts[g])
        )
        return records
