from fastapi import APIRouter, Body, Depends, HTTPException, Query
from typing import List, Optional
import structlog

from utils.dependencies import get_engine, resolve_location, verify_api_key
from models.base import HazardType
from models.model import CurrentConditions, Location, Prediction
from services.predict import PredictionEngine

logger = structlog.get_logger(__name__)

router = APIRouter(
    prefix="/api/v1/predictions",
    tags=["Predictions"]
)


@router.get("", summary="List current predictions", response_model=List[Prediction])
async def list_predictions(
    primary_threat: Optional[HazardType] = Query(None, description="Filter by primary threat"),
    min_risk: int = Query(0, ge=0, le=100, description="Minimum overall risk"),
    engine: PredictionEngine = Depends(get_engine)
):
    """Latest prediction for every scored location, highest overall risk first"""
    predictions = [
        p for p in engine.get_current_predictions()
        if p.predictions.ensemble.overall_risk >= min_risk
        and (primary_threat is None or p.predictions.ensemble.primary_threat == primary_threat)
    ]
    return sorted(predictions, key=lambda p: p.predictions.ensemble.overall_risk, reverse=True)


@router.get("/{location_name}", summary="Get prediction for a location", response_model=Prediction)
async def get_prediction(
    location: Location = Depends(resolve_location),
    engine: PredictionEngine = Depends(get_engine)
):
    """Stored prediction, or the static default while none has been computed"""
    return engine.get_prediction(location)


@router.post("/{location_name}", summary="Score a location", response_model=Prediction)
async def predict_location(
    conditions: Optional[CurrentConditions] = Body(None, description="Live readings; missing fields use defaults"),
    location: Location = Depends(resolve_location),
    engine: PredictionEngine = Depends(get_engine),
    api_key: bool = Depends(verify_api_key)
):
    """Run the scoring pipeline for a location and store the result"""
    try:
        return engine.predict_for_location(location, conditions)
    except Exception as e:
        logger.error("Prediction failed", location=location.name, error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to score {location.name}")
