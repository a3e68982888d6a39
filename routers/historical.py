from fastapi import APIRouter, Depends, Query
from typing import List, Optional
import structlog

from utils.dependencies import get_historical_service
from models.historical_models import HistoricalDisaster, HistoricalSummary, PreventionAnalysis
from services.historical_service import HistoricalDataService

logger = structlog.get_logger(__name__)

router = APIRouter(
    prefix="/api/v1/historical",
    tags=["Historical Data"]
)


@router.get("/disasters", summary="List historical disasters", response_model=List[HistoricalDisaster])
async def list_disasters(
    disaster_type: Optional[str] = Query(None, description="Filter by disaster type"),
    service: HistoricalDataService = Depends(get_historical_service)
):
    return service.list_disasters(disaster_type)


@router.get("/summary", summary="Historical disaster summary", response_model=HistoricalSummary)
async def get_summary(service: HistoricalDataService = Depends(get_historical_service)):
    """Event counts and casualties by disaster type and location"""
    return service.summarize()


@router.get("/kedarnath-2013", summary="2013 Kedarnath retrospective", response_model=PreventionAnalysis)
async def analyze_kedarnath(service: HistoricalDataService = Depends(get_historical_service)):
    """Score the 16 June 2013 conditions and compare with the recorded outcome"""
    return service.analyze_kedarnath_2013()
