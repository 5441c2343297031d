"""Domain entities."""

from .event_group import EventGroup
from .raw_record import RawRecord
from .clean_record import CleanRecord
from .exponent_code import ExponentCode, ExponentKind
from .impact_aggregate import ImpactAggregate, ImpactSummary

__all__ = [
    "EventGroup",
    "RawRecord",
    "CleanRecord",
    "ExponentCode",
    "ExponentKind",
    "ImpactAggregate",
    "ImpactSummary",
]
