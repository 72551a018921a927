"""
Rainwater harvesting arithmetic.

Units are whatever the caller supplies (the calculator page uses square feet
and inches and labels the result in gallons); no conversion happens here.
"""

import math
from typing import Any, Dict, List

from waterwise.core.constants import RUNOFF_SURFACES, SAVINGS_PER_GALLON


def coerce_measurement(value: Any) -> float:
    """
    Input-layer coercion for area and rainfall.
    Anything that is not a finite, non-negative number becomes 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def calculate_harvest(area: float, rainfall: float, runoff_coefficient: float) -> float:
    """
    harvestable water = area x rainfall x runoff coefficient.
    A product too large to represent counts as no result, like any other unusable input.
    """
    volume = area * rainfall * runoff_coefficient
    if not math.isfinite(volume):
        return 0.0
    return volume


def annual_savings(harvestable_water: float) -> float:
    return harvestable_water * SAVINGS_PER_GALLON


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_gallons(harvestable_water: float) -> str:
    return f"{round_half_up(harvestable_water)} gallons"


def format_savings(savings: float) -> str:
    return f"${round_half_up(savings)}"


def runoff_surfaces() -> List[Dict[str, Any]]:
    """Selectable catchment surfaces, highest coefficient first."""
    return [
        {"coefficient": coefficient, "label": f"{label} ({coefficient})"}
        for coefficient, label in sorted(RUNOFF_SURFACES.items(), reverse=True)
    ]
