"""
Calculator page: rainwater harvesting and water quality.
"""

from typing import Any

from fastapi import APIRouter

from waterwise.schemas.calculator import (
    HarvestRequest,
    HarvestResponse,
    RunoffSurfaceList,
    WaterQualityRequest,
    WaterQualityResponse,
)
from waterwise.services import harvest
from waterwise.services.water_quality import assess_water_quality

router = APIRouter()


@router.post("/harvest", response_model=HarvestResponse)
def calculate_harvest(body: HarvestRequest) -> Any:
    """
    Harvestable water = area x rainfall x runoff coefficient.
    Negative or non-numeric area and rainfall count as zero.
    """
    volume = harvest.calculate_harvest(body.area, body.rainfall, body.runoff_coefficient)
    savings = harvest.annual_savings(volume)
    return {
        "area": body.area,
        "rainfall": body.rainfall,
        "runoff_coefficient": body.runoff_coefficient,
        "harvestable_water": volume,
        "annual_savings": savings,
        "harvestable_water_display": harvest.format_gallons(volume),
        "annual_savings_display": harvest.format_savings(savings),
        "has_result": volume > 0,
    }


@router.get("/surfaces", response_model=RunoffSurfaceList)
def list_surfaces() -> Any:
    return {"surfaces": harvest.runoff_surfaces()}


@router.post("/water-quality", response_model=WaterQualityResponse)
def check_water_quality(body: WaterQualityRequest) -> Any:
    return {
        **body.model_dump(),
        "status": assess_water_quality(body.ph, body.tds, body.turbidity),
    }
