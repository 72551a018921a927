"""
Water map endpoints: zone markers and the state/city selectors.
"""

from typing import Any

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from waterwise.api import deps
from waterwise.core.constants import ALL, DEFAULT_TIME_RANGE
from waterwise.core.database import get_db
from waterwise.schemas.map import (
    CityList,
    StateList,
    TimeRange,
    WaterZoneCreate,
    ZoneMapResponse,
    ZoneMarker,
)
from waterwise.services.geo import zone_to_marker
from waterwise.services.water_zone_service import WaterZoneService

router = APIRouter()


@router.get("/zones", response_model=ZoneMapResponse)
def get_zone_markers(
    state: str = Query(ALL),
    city: str = Query(ALL, description="Matches the zone location"),
    time_range: TimeRange = Query(TimeRange(DEFAULT_TIME_RANGE)),
    database: Session = Depends(get_db),
) -> Any:
    """
    Map markers for zones updated within the time range.
    Zones whose stored position cannot be read are left off the map.
    """
    return WaterZoneService.get_markers(
        database, state=state, city=city, time_range=time_range.value
    )


@router.post(
    "/zones",
    response_model=ZoneMarker,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(deps.require_content_editor)],
)
def create_zone(zone_in: WaterZoneCreate, database: Session = Depends(get_db)) -> Any:
    zone = WaterZoneService.create_zone(database, zone_in)
    return zone_to_marker(zone)


@router.get("/states", response_model=StateList)
def list_states() -> Any:
    return {"states": WaterZoneService.list_states()}


@router.get("/states/{state}/cities", response_model=CityList)
def list_cities(state: str) -> Any:
    return {"state": state, "cities": WaterZoneService.list_cities(state)}
