"""
Map marker preparation.

Zone positions reach the database in several shapes depending on who wrote
them: a JSON string such as ``"[12.9, 77.6]"``, a ``[lat, lon]`` array, or a
keyed object ``{"0": lat, "1": lon}``. Everything is reduced to a pair of
finite floats here; zones that cannot be reduced are logged and left off the map.
"""

import json
import logging
import math
from numbers import Real
from typing import Any, Dict, Iterable, List, Optional, Tuple

from waterwise.core.constants import SEVERITY_COLORS

logger = logging.getLogger(__name__)

Coordinates = Tuple[float, float]


def _is_finite_number(value: Any) -> bool:
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _keyed_pair(raw: Dict[Any, Any]) -> Optional[List[Any]]:
    first = raw.get(0, raw.get("0"))
    second = raw.get(1, raw.get("1"))
    if first is None or second is None:
        return None
    return [first, second]


def normalize_position(raw: Any) -> Optional[Coordinates]:
    """
    Reduce a stored position to ``(lat, lon)``.
    Returns None when the value is not exactly two finite numbers.
    """
    candidate = raw
    if isinstance(candidate, str):
        try:
            candidate = json.loads(candidate)
        except ValueError:
            return None

    if isinstance(candidate, dict):
        candidate = _keyed_pair(candidate)

    if not isinstance(candidate, (list, tuple)) or len(candidate) != 2:
        return None

    if not all(_is_finite_number(value) for value in candidate):
        return None

    return float(candidate[0]), float(candidate[1])


def severity_color(severity: Optional[str]) -> str:
    return SEVERITY_COLORS.get((severity or "").lower(), SEVERITY_COLORS["low"])


def zone_to_marker(zone: Any) -> Optional[Dict[str, Any]]:
    position = normalize_position(zone.position)
    if position is None:
        logger.error(
            f"Invalid position format for zone {zone.id} ({zone.location}): "
            f"{zone.position!r}"
        )
        return None

    return {
        "id": zone.id,
        "location": zone.location,
        "sub_city": zone.sub_city,
        "state": zone.state,
        "position": position,
        "severity": zone.severity,
        "color": severity_color(zone.severity),
        "water_level": zone.water_level,
        "rainfall_data": zone.rainfall_data,
        "groundwater_level": zone.groundwater_level,
        "last_updated": zone.last_updated,
    }


def zones_to_markers(zones: Iterable[Any]) -> List[Dict[str, Any]]:
    """Markers for every zone with a usable position, in input order."""
    markers = []
    for zone in zones:
        marker = zone_to_marker(zone)
        if marker is not None:
            markers.append(marker)
    return markers
