"""
Current weather lookup for map zones (OpenWeatherMap compatible API).
"""

import logging
from typing import Any, Dict, Optional

import httpx

from waterwise.core.config import settings
from waterwise.core.exceptions import ExternalServiceException

logger = logging.getLogger(__name__)


class WeatherService:
    """Thin async client for the weather endpoint."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        self.base_url = base_url or settings.weather_api_url
        self.api_key = api_key if api_key is not None else settings.weather_api_key
        self.timeout = timeout or settings.weather_timeout

    async def fetch_current(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """Raw current-conditions document for a coordinate pair."""
        if not self.api_key:
            raise ExternalServiceException(
                message="Weather service is not configured",
                details={"setting": "WEATHER_API_KEY"},
            )

        params = {
            "lat": latitude,
            "lon": longitude,
            "appid": self.api_key,
            "units": "metric",
        }
        try:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout)) as client:
                response = await client.get(self.base_url, params=params)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as error:
            logger.error(
                f"Weather API returned {error.response.status_code} for "
                f"({latitude}, {longitude})"
            )
            raise ExternalServiceException(
                message="Failed to fetch weather data",
                details={"status_code": error.response.status_code},
            )
        except httpx.RequestError as error:
            logger.error(f"Error fetching weather data: {error}")
            raise ExternalServiceException(message="Weather service unavailable")

    @staticmethod
    def summarize(latitude: float, longitude: float, data: Dict[str, Any]) -> Dict[str, Any]:
        """Flatten the fields the map popup shows."""
        main = data.get("main") or {}
        wind = data.get("wind") or {}
        weather = (data.get("weather") or [{}])[0]
        rain = data.get("rain") or {}
        return {
            "latitude": latitude,
            "longitude": longitude,
            "location": data.get("name") or None,
            "temperature": main.get("temp"),
            "feels_like": main.get("feels_like"),
            "humidity": main.get("humidity"),
            "pressure": main.get("pressure"),
            "wind_speed": wind.get("speed"),
            "conditions": weather.get("main"),
            "description": weather.get("description"),
            "rain_1h": rain.get("1h"),
            "raw": data,
        }

    async def current_conditions(self, latitude: float, longitude: float) -> Dict[str, Any]:
        data = await self.fetch_current(latitude, longitude)
        return self.summarize(latitude, longitude, data)


def get_weather_service() -> WeatherService:
    return WeatherService()
