from fastapi import APIRouter, Depends, Request
from datetime import datetime
import time
import structlog

from utils.dependencies import get_engine
from models.model import ModelStatus
from services.predict import PredictionEngine

logger = structlog.get_logger(__name__)

router = APIRouter(
    tags=["System & Monitoring"]
)


@router.get("/health", summary="Service health check", tags=["Monitoring"])
async def health_check(request: Request, engine: PredictionEngine = Depends(get_engine)):
    """Liveness plus engine and scheduler state"""
    scheduler = getattr(request.app.state, "scheduler", None)
    start_time = getattr(request.app.state, "start_time", None)

    return {
        "status": "healthy" if engine.is_loaded else "degraded",
        "timestamp": datetime.now().isoformat(),
        "version": request.app.state.settings.api_version,
        "services": {
            "prediction_engine": {
                "status": "healthy" if engine.is_loaded else "loading",
                "mode": engine.mode.value if engine.mode else None,
            },
            "scheduler": {
                "status": "running" if scheduler and scheduler.is_running else "stopped",
            },
        },
        "uptime_seconds": round(time.time() - start_time, 2) if start_time else 0,
    }


@router.get("/api/v1/system/status", summary="Model status", response_model=ModelStatus)
async def get_model_status(engine: PredictionEngine = Depends(get_engine)):
    return engine.get_model_status()


@router.get("/api/v1/system/confidence", summary="System confidence")
async def get_confidence(engine: PredictionEngine = Depends(get_engine)):
    return {"confidence": engine.get_confidence()}
