"""
Water scarcity zones shown on the map.
"""

from sqlalchemy import Column, DateTime, Float, Index, String

from waterwise.core.database import Base
from waterwise.models.base import BaseModel, JSONType, utcnow


class WaterZone(Base, BaseModel):
    """Water monitoring zone."""

    __tablename__ = "water_zones"

    location = Column(String(100), nullable=False)  # city
    sub_city = Column(String(100), nullable=True)
    state = Column(String(100), nullable=False)

    # Raw position as stored by importers: a JSON string, a [lat, lon] array or
    # a {"0": lat, "1": lon} object. Normalized on read.
    position = Column(JSONType, nullable=True)

    severity = Column(String(10), nullable=False, default="low")  # high | medium | low
    water_level = Column(Float, nullable=True)  # meters
    rainfall_data = Column(Float, nullable=True)  # millimeters
    groundwater_level = Column(Float, nullable=True)  # meters
    last_updated = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (
        Index("idx_zone_state", "state"),
        Index("idx_zone_location", "location"),
        Index("idx_zone_last_updated", "last_updated"),
    )
