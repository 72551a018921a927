from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch

from waterwise.core.exceptions import ExternalServiceException
from waterwise.main import app
from waterwise.services.weather_service import get_weather_service

MARKER = {
    "id": 1,
    "location": "Pune",
    "sub_city": None,
    "state": "Maharashtra",
    "position": (18.5, 73.8),
    "severity": "medium",
    "color": "#f59e0b",
    "water_level": None,
    "rainfall_data": None,
    "groundwater_level": None,
    "last_updated": datetime(2026, 5, 1, tzinfo=timezone.utc),
}


@patch("waterwise.api.v1.endpoints.water_map.WaterZoneService")
def test_zone_markers(mock_service, client):
    mock_service.get_markers.return_value = {
        "state": "Maharashtra",
        "city": "all",
        "time_range": "30days",
        "markers": [MARKER],
        "dropped": 2,
    }

    response = client.get(
        "/api/v1/map/zones", params={"state": "Maharashtra", "time_range": "30days"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["center"] == [20.5937, 78.9629]
    assert data["zoom"] == 5
    assert data["markers"][0]["position"] == [18.5, 73.8]
    assert data["dropped"] == 2
    assert mock_service.get_markers.call_args.kwargs["time_range"] == "30days"


def test_zone_markers_default_time_range(client):
    with patch("waterwise.api.v1.endpoints.water_map.WaterZoneService") as mock_service:
        mock_service.get_markers.return_value = {
            "state": "all", "city": "all", "time_range": "7days", "markers": [], "dropped": 0,
        }
        client.get("/api/v1/map/zones")
        assert mock_service.get_markers.call_args.kwargs["time_range"] == "7days"


def test_zone_markers_bad_time_range(client):
    response = client.get("/api/v1/map/zones", params={"time_range": "1year"})
    assert response.status_code == 422


def test_states(client):
    response = client.get("/api/v1/map/states")
    assert response.status_code == 200
    assert "Karnataka" in response.json()["states"]


def test_cities(client):
    response = client.get("/api/v1/map/states/Tamil Nadu/cities")
    assert response.status_code == 200
    assert "Chennai" in response.json()["cities"]


def test_cities_unknown_state(client):
    response = client.get("/api/v1/map/states/Atlantis/cities")
    assert response.status_code == 404


def test_create_zone(client, mock_db_session):
    def refresh(zone):
        zone.id = 9
        zone.last_updated = datetime(2026, 5, 1, tzinfo=timezone.utc)

    mock_db_session.refresh.side_effect = refresh

    response = client.post(
        "/api/v1/map/zones",
        json={
            "location": "Chennai",
            "state": "Tamil Nadu",
            "position": "[13.08, 80.27]",
            "severity": "high",
        },
    )

    assert response.status_code == 201
    assert response.json()["position"] == [13.08, 80.27]
    assert response.json()["color"] == "#ef4444"
    mock_db_session.add.assert_called_once()


def test_create_zone_bad_position(client):
    response = client.post(
        "/api/v1/map/zones",
        json={"location": "Chennai", "state": "Tamil Nadu", "position": [13.08]},
    )
    assert response.status_code == 422


def test_weather(client):
    service = MagicMock()
    service.current_conditions = AsyncMock(
        return_value={"latitude": 13.08, "longitude": 80.27, "temperature": 31.2, "raw": {}}
    )
    app.dependency_overrides[get_weather_service] = lambda: service

    response = client.get("/api/v1/weather", params={"lat": 13.08, "lon": 80.27})

    assert response.status_code == 200
    assert response.json()["temperature"] == 31.2
    service.current_conditions.assert_awaited_once_with(13.08, 80.27)


def test_weather_unavailable(client):
    service = MagicMock()
    service.current_conditions = AsyncMock(
        side_effect=ExternalServiceException("Weather service unavailable")
    )
    app.dependency_overrides[get_weather_service] = lambda: service

    response = client.get("/api/v1/weather", params={"lat": 13.08, "lon": 80.27})

    assert response.status_code == 503


def test_weather_rejects_bad_latitude(client):
    response = client.get("/api/v1/weather", params={"lat": 123, "lon": 80.27})
    assert response.status_code == 422
