GOOD = "Good"
NEEDS_ATTENTION = "Needs Attention"

PH_RANGE = (6.5, 8.5)
MAX_TDS = 500  # mg/L
MAX_TURBIDITY = 5  # NTU


def assess_water_quality(ph: float, tds: float, turbidity: float) -> str:
    """Simplified potability check used by the calculator page."""
    if PH_RANGE[0] <= ph <= PH_RANGE[1] and tds < MAX_TDS and turbidity < MAX_TURBIDITY:
        return GOOD
    return NEEDS_ATTENTION
