"""
Water map service: zone queries and marker preparation.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from waterwise.core.constants import ALL, INDIAN_CITIES, INDIAN_STATES, TIME_RANGES
from waterwise.core.exceptions import (
    DatabaseException,
    ResourceNotFoundException,
    ValidationException,
)
from waterwise.models.water_zone import WaterZone
from waterwise.schemas.map import WaterZoneCreate
from waterwise.services.geo import normalize_position, zones_to_markers

logger = logging.getLogger(__name__)


class WaterZoneService:
    @staticmethod
    def list_states() -> List[str]:
        return list(INDIAN_STATES)

    @staticmethod
    def list_cities(state: str) -> List[str]:
        if state not in INDIAN_STATES:
            raise ResourceNotFoundException(
                message="Unknown state", details={"state": state}
            )
        return list(INDIAN_CITIES.get(state, []))

    @staticmethod
    def cutoff_for(time_range: str, now: Optional[datetime] = None) -> Optional[datetime]:
        """Earliest last_updated kept by a time range, or None for all time."""
        if time_range not in TIME_RANGES:
            raise ValidationException(
                message="Unknown time range", details={"time_range": time_range}
            )
        days = TIME_RANGES[time_range]
        if days is None:
            return None
        return (now or datetime.now(timezone.utc)) - timedelta(days=days)

    @staticmethod
    def query_zones(
        db: Session,
        state: str = ALL,
        city: str = ALL,
        time_range: str = "7days",
    ) -> List[WaterZone]:
        cutoff = WaterZoneService.cutoff_for(time_range)
        logger.debug(
            f"Fetching zones with filters: state={state}, city={city}, "
            f"time_range={time_range}"
        )

        query = db.query(WaterZone)
        if state != ALL:
            query = query.filter(WaterZone.state == state)
        if city != ALL:
            query = query.filter(WaterZone.location == city)
        if cutoff is not None:
            query = query.filter(WaterZone.last_updated >= cutoff)

        try:
            return query.order_by(WaterZone.id).all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching water zones: {e}")
            raise DatabaseException("Failed to fetch water zones")

    @staticmethod
    def get_markers(
        db: Session,
        state: str = ALL,
        city: str = ALL,
        time_range: str = "7days",
    ) -> Dict[str, Any]:
        """Markers for the map page plus the count of zones dropped for bad positions."""
        zones = WaterZoneService.query_zones(db, state, city, time_range)
        markers = zones_to_markers(zones)
        dropped = len(zones) - len(markers)
        if dropped:
            logger.warning(f"Dropped {dropped} of {len(zones)} zones with invalid positions")
        return {
            "state": state,
            "city": city,
            "time_range": time_range,
            "markers": markers,
            "dropped": dropped,
        }

    @staticmethod
    def create_zone(db: Session, zone_in: WaterZoneCreate) -> WaterZone:
        if normalize_position(zone_in.position) is None:
            raise ValidationException(
                message="Position must be a latitude/longitude pair",
                details={"position": repr(zone_in.position)},
            )
        data = zone_in.model_dump(exclude_none=True)
        data["severity"] = zone_in.severity.value
        zone = WaterZone(**data)
        try:
            db.add(zone)
            db.commit()
            db.refresh(zone)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to create water zone: {e}")
            raise DatabaseException("Failed to create water zone")
        logger.info(f"Created water zone {zone.id}: {zone.location}, {zone.state}")
        return zone
