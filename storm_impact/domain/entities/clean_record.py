"""Clean storm record entity."""

from dataclasses import dataclass
from .event_group import EventGroup


@dataclass
class CleanRecord:
    """Normalized storm record with damages expressed in millions."""

    year: int
    event_type: str  # lowercased EVTYPE
    fatalities: int
    injuries: int
    property_damage: float  # millions
    crop_damage: float  # millions
    event_group: EventGroup = EventGroup.OTHERS

    @property
    def health_impact(self) -> int:
        """Fatalities plus injuries."""
        return self.fatalities + self.injuries

    @property
    def economic_impact(self) -> float:
        """Property plus crop damage, in millions."""
        return self.property_damage + self.crop_damage

    def __str__(self) -> str:
        return f"{self.year}_{self.event_type}_{self.event_group}"
