"""Use cases - core business operations."""

from .load_storm_data import LoadStormDataUseCase
from .project_fields import ProjectFieldsUseCase
from .normalize_damage import NormalizeDamageUseCase
from .clean_storm_data import CleanStormDataUseCase
from .classify_events import ClassifyEventsUseCase
from .aggregate_impact import AggregateImpactUseCase

__all__ = [
    "LoadStormDataUseCase",
    "ProjectFieldsUseCase",
    "NormalizeDamageUseCase",
    "CleanStormDataUseCase",
    "ClassifyEventsUseCase",
    "AggregateImpactUseCase",
]
