"""FastAPI main application."""

import logging
import threading
from typing import List, Optional
from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field
from ...application.services.storm_impact_service import StormImpactService
from ...domain.entities.event_group import EventGroup
from ...domain.entities.impact_aggregate import ImpactAggregate, ImpactSummary
from ...domain.exceptions import StormDataError
from ...infrastructure.repositories.csv_storm_data_repository import CsvStormDataRepository
from ...infrastructure.repositories.http_dataset_repository import HttpDatasetRepository
from ...config.settings import (
    DATA_URL,
    DATA_FILE,
    EVENT_GROUP_DEFINITIONS,
    DOWNLOAD_SETTINGS,
    ANALYSIS_SETTINGS,
    API_SETTINGS,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=API_SETTINGS["title"],
    description=API_SETTINGS["description"],
    version=API_SETTINGS["version"],
)

_service: Optional[StormImpactService] = None
_service_lock = threading.Lock()
_analysis_lock = threading.Lock()


def get_service() -> StormImpactService:
    """Build the service on first use, fetching the catalog if needed."""
    global _service
    with _service_lock:
        if _service is None:
            dataset_repo = HttpDatasetRepository(**DOWNLOAD_SETTINGS)
            dataset_repo.ensure_local(DATA_URL, DATA_FILE)
            _service = StormImpactService(
                storm_data_repo=CsvStormDataRepository(str(DATA_FILE)),
                event_group_definitions=EVENT_GROUP_DEFINITIONS,
                dataset_repo=dataset_repo,
                data_url=DATA_URL,
                data_file=DATA_FILE,
                min_year=ANALYSIS_SETTINGS["min_year"],
            )
        return _service


# Response models
class HealthImpactResponse(BaseModel):
    """Population health impact of one event group."""

    event_group: str
    count: int
    fatalities: int
    fatalities_mean: float
    injuries: int
    injuries_mean: float


class EconomicImpactResponse(BaseModel):
    """Economic impact of one event group, in millions of USD."""

    event_group: str
    count: int
    property_damage: float
    property_damage_mean: float
    crop_damage: float
    crop_damage_mean: float


class GroupImpactResponse(BaseModel):
    """Both impacts of one event group."""

    health: HealthImpactResponse
    economic: EconomicImpactResponse


class ImpactTableResponse(BaseModel):
    """Counts shared by the impact tables."""

    records: int = Field(..., description="Events with impact")
    normalization_warnings: int = Field(
        0, description="Damage values with unrecognized exponent codes"
    )


class HealthTableResponse(ImpactTableResponse):
    """Health impact, one row per non-empty event group."""

    rows: List[HealthImpactResponse]


class EconomicTableResponse(ImpactTableResponse):
    """Economic impact, one row per non-empty event group."""

    rows: List[EconomicImpactResponse]


def _summary(service: StormImpactService) -> ImpactSummary:
    with _analysis_lock:
        if service.summary is not None:
            return service.summary
        try:
            return service.analyze()
        except StormDataError as e:
            logger.error(f"Analysis error: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=str(e))


def _health(aggregate: ImpactAggregate) -> HealthImpactResponse:
    return HealthImpactResponse(**aggregate.to_health_dict())


def _economic(aggregate: ImpactAggregate) -> EconomicImpactResponse:
    return EconomicImpactResponse(**aggregate.to_economic_dict())


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Storm Impact API",
        "version": API_SETTINGS["version"],
        "endpoints": {
            "health_impact": "/impact/health",
            "economic_impact": "/impact/economic",
            "group": "/impact/groups/{group}",
            "health": "/health",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/impact/health", response_model=HealthTableResponse)
def health_impact(service: StormImpactService = Depends(get_service)) -> HealthTableResponse:
    """Fatalities and injuries per event group, most harmful first."""
    summary = _summary(service)
    return HealthTableResponse(
        records=summary.records,
        normalization_warnings=summary.normalization_warnings,
        rows=[_health(a) for a in summary.health],
    )


@app.get("/impact/economic", response_model=EconomicTableResponse)
def economic_impact(
    service: StormImpactService = Depends(get_service),
) -> EconomicTableResponse:
    """Property and crop damage per event group, most costly first."""
    summary = _summary(service)
    return EconomicTableResponse(
        records=summary.records,
        normalization_warnings=summary.normalization_warnings,
        rows=[_economic(a) for a in summary.economic],
    )


@app.get("/impact/groups/{group:path}", response_model=GroupImpactResponse)
def group_impact(
    group: str, service: StormImpactService = Depends(get_service)
) -> GroupImpactResponse:
    """
    Impact of a single event group.

    Args:
        group: Event group label, e.g. 'flood' or 'rain/storms'
    """
    try:
        event_group = EventGroup(group)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown event group: {group}")

    summary = _summary(service)
    try:
        aggregate = summary.get(event_group)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"No events in group: {group}")

    return GroupImpactResponse(health=_health(aggregate), economic=_economic(aggregate))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
