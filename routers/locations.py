from fastapi import APIRouter, Depends, Query
from typing import List, Optional
import structlog

from utils.dependencies import get_location_service, resolve_location
from models.base import RiskLevel
from models.model import Location
from services.location_service import LocationService

logger = structlog.get_logger(__name__)

router = APIRouter(
    prefix="/api/v1/locations",
    tags=["Locations"]
)


@router.get("", summary="List monitored locations", response_model=List[Location])
async def list_locations(
    risk_level: Optional[RiskLevel] = Query(None, description="Filter by static risk label"),
    locations: LocationService = Depends(get_location_service)
):
    """All monitored locations, optionally filtered by risk label"""
    return [
        loc for loc in locations.list_locations()
        if risk_level is None or loc.risk_level == risk_level
    ]


@router.get("/{location_name}", summary="Get location by name", response_model=Location)
async def get_location(location: Location = Depends(resolve_location)):
    """Get location details by name"""
    return location
