"""Event group enumeration."""

from enum import Enum


class EventGroup(str, Enum):
    """Semantic category assigned to a storm event.

    Members are declared in classification order; ``OTHERS`` is the default
    label when no group matches.
    """

    RAIN_STORMS = "rain/storms"
    TORNADO_HAIL = "tornado/hail"
    FLOOD = "flood"
    WINTER = "winter"
    SUMMER_HEAT = "summer/heat"
    FOG = "fog"
    OTHERS = "others"

    def __str__(self) -> str:
        return self.value
