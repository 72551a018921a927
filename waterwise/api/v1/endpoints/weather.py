from typing import Any

from fastapi import APIRouter, Depends, Query

from waterwise.schemas.map import WeatherResponse
from waterwise.services.weather_service import WeatherService, get_weather_service

router = APIRouter()


@router.get("", response_model=WeatherResponse)
async def get_current_weather(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    weather_service: WeatherService = Depends(get_weather_service),
) -> Any:
    """Current conditions for a map location."""
    return await weather_service.current_conditions(lat, lon)
