"""
Pydantic schemas for the water map and weather.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from waterwise.core.constants import MAP_CENTER, MAP_ZOOM


class Severity(str, Enum):
    """Water scarcity levels."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TimeRange(str, Enum):
    """Map time period filter."""

    LAST_7_DAYS = "7days"
    LAST_30_DAYS = "30days"
    LAST_90_DAYS = "90days"
    ALL = "all"


class WaterZoneCreate(BaseModel):
    location: str = Field(..., min_length=1, max_length=100, description="City")
    sub_city: Optional[str] = None
    state: str = Field(..., min_length=1, max_length=100)
    position: Any = Field(
        ..., description="[lat, lon] array, JSON string or {0: lat, 1: lon} object"
    )
    severity: Severity = Severity.LOW
    water_level: Optional[float] = Field(None, description="Water level (m)")
    rainfall_data: Optional[float] = Field(None, description="Rainfall (mm)")
    groundwater_level: Optional[float] = Field(None, description="Groundwater (m)")
    last_updated: Optional[datetime] = None


class ZoneMarker(BaseModel):
    id: int
    location: str
    sub_city: Optional[str] = None
    state: str
    position: Tuple[float, float]
    severity: str
    color: str
    water_level: Optional[float] = None
    rainfall_data: Optional[float] = None
    groundwater_level: Optional[float] = None
    last_updated: datetime


class ZoneMapResponse(BaseModel):
    center: Tuple[float, float] = MAP_CENTER
    zoom: int = MAP_ZOOM
    state: str
    city: str
    time_range: TimeRange
    markers: List[ZoneMarker]
    dropped: int = Field(0, description="Zones left off the map for bad positions")


class StateList(BaseModel):
    states: List[str]


class CityList(BaseModel):
    state: str
    cities: List[str]


class WeatherResponse(BaseModel):
    latitude: float
    longitude: float
    location: Optional[str] = None
    temperature: Optional[float] = Field(None, description="Celsius")
    feels_like: Optional[float] = None
    humidity: Optional[float] = Field(None, description="Percent")
    pressure: Optional[float] = Field(None, description="hPa")
    wind_speed: Optional[float] = Field(None, description="m/s")
    conditions: Optional[str] = None
    description: Optional[str] = None
    rain_1h: Optional[float] = Field(None, description="Rain volume last hour (mm)")
    raw: Dict[str, Any] = Field(default_factory=dict)
