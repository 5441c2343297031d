"""Raw storm record entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RawRecord:
    """One weather event as recorded in the source catalog."""

    event_type: str  # EVTYPE, free text
    fatalities: int
    injuries: int
    property_damage: float  # PROPDMG base, exponent not applied
    property_damage_exp: str  # PROPDMGEXP token
    crop_damage: float  # CROPDMG base, exponent not applied
    crop_damage_exp: str  # CROPDMGEXP token
    begin_date: str  # BGN_DATE, e.g. '4/18/1950 0:00:00'
