import math
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from waterwise.services.geo import normalize_position, severity_color, zones_to_markers


@pytest.mark.parametrize(
    "raw",
    [
        "[12.9,77.6]",
        [12.9, 77.6],
        (12.9, 77.6),
        {0: 12.9, 1: 77.6},
        {"0": 12.9, "1": 77.6},
        {0: 12.9, 1: 77.6, 2: 1.0},
        {"0": 12.9, "1": 77.6, "lat": 12.9},
    ],
)
def test_supported_encodings_normalize(raw):
    assert normalize_position(raw) == (12.9, 77.6)


def test_integers_become_floats():
    position = normalize_position([12, 77])
    assert position == (12.0, 77.0)
    assert all(isinstance(value, float) for value in position)


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "",
        "not json",
        "12.9",
        '["12.9", "77.6"]',
        ["12.9", "77.6"],
        [True, 77.6],
        [12.9],
        [12.9, 77.6, 3.0],
        [float("nan"), 77.6],
        [12.9, math.inf],
        {0: 12.9},
        {"lat": 12.9, "lon": 77.6},
        {0: None, 1: 77.6},
    ],
)
def test_invalid_positions_are_rejected(raw):
    assert normalize_position(raw) is None


def test_severity_colors():
    assert severity_color("high") == "#ef4444"
    assert severity_color("MEDIUM") == "#f59e0b"
    assert severity_color("low") == "#10b981"
    assert severity_color(None) == "#10b981"


def make_zone(zone_id, position, severity="high"):
    return SimpleNamespace(
        id=zone_id,
        location="Chennai",
        sub_city=None,
        state="Tamil Nadu",
        position=position,
        severity=severity,
        water_level=2.0,
        rainfall_data=10.0,
        groundwater_level=12.0,
        last_updated=datetime(2026, 5, 1, tzinfo=timezone.utc),
    )


def test_zones_with_bad_positions_are_dropped():
    zones = [
        make_zone(1, "[13.08, 80.27]"),
        make_zone(2, "garbage"),
        make_zone(3, {"0": 12.97, "1": 77.59}, severity="medium"),
    ]

    markers = zones_to_markers(zones)

    assert [m["id"] for m in markers] == [1, 3]
    assert markers[0]["position"] == (13.08, 80.27)
    assert markers[1]["color"] == "#f59e0b"
