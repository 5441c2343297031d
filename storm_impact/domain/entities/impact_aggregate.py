"""Impact aggregate entities."""

from dataclasses import dataclass, field
from typing import Any, Dict, List
from .event_group import EventGroup


@dataclass
class ImpactAggregate:
    """Health and economic totals for one event group.

    Only sums and the record count are stored; means are derived from them so
    that partial aggregates can be merged.
    """

    event_group: EventGroup
    count: int = 0
    injuries: int = 0
    fatalities: int = 0
    property_damage: float = 0.0  # millions
    crop_damage: float = 0.0  # millions

    def _mean(self, total: float) -> float:
        return total / self.count if self.count else 0.0

    @property
    def injuries_mean(self) -> float:
        return self._mean(self.injuries)

    @property
    def fatalities_mean(self) -> float:
        return self._mean(self.fatalities)

    @property
    def property_damage_mean(self) -> float:
        return self._mean(self.property_damage)

    @property
    def crop_damage_mean(self) -> float:
        return self._mean(self.crop_damage)

    @property
    def health_total(self) -> int:
        return self.injuries + self.fatalities

    @property
    def economic_total(self) -> float:
        return self.property_damage + self.crop_damage

    def merge(self, other: "ImpactAggregate") -> "ImpactAggregate":
        """Combine two partial aggregates of the same group."""
        if other.event_group != self.event_group:
            raise ValueError(
                f"Cannot merge aggregates of {self.event_group} and {other.event_group}"
            )
        return ImpactAggregate(
            event_group=self.event_group,
            count=self.count + other.count,
            injuries=self.injuries + other.injuries,
            fatalities=self.fatalities + other.fatalities,
            property_damage=self.property_damage + other.property_damage,
            crop_damage=self.crop_damage + other.crop_damage,
        )

    def to_health_dict(self) -> Dict[str, Any]:
        """Row for the health impact table."""
        return {
            "event_group": self.event_group.value,
            "count": self.count,
            "fatalities": self.fatalities,
            "fatalities_mean": self.fatalities_mean,
            "injuries": self.injuries,
            "injuries_mean": self.injuries_mean,
        }

    def to_economic_dict(self) -> Dict[str, Any]:
        """Row for the economic impact table."""
        return {
            "event_group": self.event_group.value,
            "count": self.count,
            "property_damage": self.property_damage,
            "property_damage_mean": self.property_damage_mean,
            "crop_damage": self.crop_damage,
            "crop_damage_mean": self.crop_damage_mean,
        }


@dataclass
class ImpactSummary:
    """Health and economic aggregates handed to reporting."""

    health: List[ImpactAggregate] = field(default_factory=list)
    economic: List[ImpactAggregate] = field(default_factory=list)
    records: int = 0
    normalization_warnings: int = 0

    def get(self, event_group: EventGroup) -> ImpactAggregate:
        """Aggregate for one group; raises KeyError if the group had no records."""
        for aggregate in self.health:
            if aggregate.event_group == event_group:
                return aggregate
        raise KeyError(event_group)
