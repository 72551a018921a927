"""
Pydantic schemas for the calculator page.
"""

from typing import Any, List

from pydantic import BaseModel, Field, field_validator

from waterwise.core.constants import DEFAULT_RUNOFF_COEFFICIENT, RUNOFF_SURFACES
from waterwise.services.harvest import coerce_measurement


class HarvestRequest(BaseModel):
    area: float = Field(
        default=0, description="Catchment area (square feet). Invalid input counts as 0."
    )
    rainfall: float = Field(
        default=0, description="Average rainfall (inches). Invalid input counts as 0."
    )
    runoff_coefficient: float = Field(
        default=DEFAULT_RUNOFF_COEFFICIENT,
        description="One of 0.8 (pitched roof), 0.6 (flat roof), 0.4 (unpaved area)",
    )

    @field_validator("area", "rainfall", mode="before")
    @classmethod
    def coerce_to_zero(cls, value: Any) -> float:
        return coerce_measurement(value)

    @field_validator("runoff_coefficient")
    @classmethod
    def check_coefficient(cls, value: float) -> float:
        if value not in RUNOFF_SURFACES:
            allowed = ", ".join(str(c) for c in sorted(RUNOFF_SURFACES, reverse=True))
            raise ValueError(f"runoff_coefficient must be one of {allowed}")
        return value


class HarvestResponse(BaseModel):
    area: float
    rainfall: float
    runoff_coefficient: float
    harvestable_water: float
    annual_savings: float
    harvestable_water_display: str
    annual_savings_display: str
    has_result: bool


class RunoffSurface(BaseModel):
    coefficient: float
    label: str


class RunoffSurfaceList(BaseModel):
    surfaces: List[RunoffSurface]
    default: float = DEFAULT_RUNOFF_COEFFICIENT


class WaterQualityRequest(BaseModel):
    ph: float = Field(..., ge=0, le=14)
    tds: float = Field(..., ge=0, description="Total dissolved solids (mg/L)")
    turbidity: float = Field(..., ge=0, description="Turbidity (NTU)")


class WaterQualityResponse(WaterQualityRequest):
    status: str
