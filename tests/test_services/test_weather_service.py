from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from waterwise.core.exceptions import ExternalServiceException
from waterwise.services.weather_service import WeatherService

SAMPLE = {
    "name": "Chennai",
    "main": {"temp": 31.2, "feels_like": 36.0, "humidity": 70, "pressure": 1008},
    "wind": {"speed": 4.1},
    "weather": [{"main": "Rain", "description": "light rain"}],
    "rain": {"1h": 0.6},
}


def mock_client(response=None, side_effect=None):
    client = MagicMock()
    client.get = AsyncMock(return_value=response, side_effect=side_effect)
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=None)
    return client


def test_summarize_flattens_fields():
    summary = WeatherService.summarize(13.08, 80.27, SAMPLE)

    assert summary["location"] == "Chennai"
    assert summary["temperature"] == 31.2
    assert summary["conditions"] == "Rain"
    assert summary["rain_1h"] == 0.6
    assert summary["raw"] == SAMPLE


def test_summarize_tolerates_missing_sections():
    summary = WeatherService.summarize(1.0, 2.0, {})
    assert summary["temperature"] is None
    assert summary["conditions"] is None


@pytest.mark.asyncio
async def test_fetch_current_without_key():
    service = WeatherService(base_url="http://weather.test", api_key="")
    with pytest.raises(ExternalServiceException) as exc:
        await service.fetch_current(13.08, 80.27)
    assert exc.value.message == "Weather service is not configured"


@pytest.mark.asyncio
async def test_current_conditions_success():
    response = MagicMock()
    response.json.return_value = SAMPLE
    response.raise_for_status.return_value = None
    client = mock_client(response=response)

    with patch("waterwise.services.weather_service.httpx.AsyncClient", return_value=client):
        service = WeatherService(base_url="http://weather.test", api_key="key")
        result = await service.current_conditions(13.08, 80.27)

    assert result["humidity"] == 70
    params = client.get.call_args.kwargs["params"]
    assert params == {"lat": 13.08, "lon": 80.27, "appid": "key", "units": "metric"}


@pytest.mark.asyncio
async def test_fetch_current_http_error():
    request = httpx.Request("GET", "http://weather.test")
    error_response = httpx.Response(401, request=request)
    response = MagicMock()
    response.raise_for_status.side_effect = httpx.HTTPStatusError(
        "unauthorized", request=request, response=error_response
    )
    client = mock_client(response=response)

    with patch("waterwise.services.weather_service.httpx.AsyncClient", return_value=client):
        service = WeatherService(base_url="http://weather.test", api_key="key")
        with pytest.raises(ExternalServiceException) as exc:
            await service.fetch_current(13.08, 80.27)

    assert exc.value.message == "Failed to fetch weather data"
    assert exc.value.details == {"status_code": 401}


@pytest.mark.asyncio
async def test_fetch_current_unreachable():
    client = mock_client(side_effect=httpx.ConnectError("refused"))

    with patch("waterwise.services.weather_service.httpx.AsyncClient", return_value=client):
        service = WeatherService(base_url="http://weather.test", api_key="key")
        with pytest.raises(ExternalServiceException) as exc:
            await service.fetch_current(13.08, 80.27)

    assert exc.value.message == "Weather service unavailable"
