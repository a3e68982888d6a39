# main.py - PulseNet Risk API
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import logging
import time
import structlog
from datetime import datetime

from config import Settings, settings
from middleware import setup_logging_middleware
from services.historical_service import HistoricalDataService
from services.location_service import LocationService
from services.predict import PredictionEngine
from services.scheduler import SchedulerService

# Import Routers
from routers import historical, locations, predictions, system


def configure_logging(config: Settings) -> None:
    """Route stdlib and structlog output through one JSON (or console) stream"""
    logging.basicConfig(format="%(message)s", level=config.log_level.upper())

    renderer = (
        structlog.dev.ConsoleRenderer()
        if config.log_format == "console"
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


configure_logging(settings)
logger = structlog.get_logger(__name__)


# --- Lifespan Event Handler ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager"""
    config: Settings = app.state.settings
    logger.info("Starting PulseNet Risk API", version=config.api_version, mode=config.model_mode)
    app.state.start_time = time.time()

    # Initialize Services
    try:
        engine = PredictionEngine(settings=config)
        app.state.engine = engine
        app.state.location_service = LocationService()
        app.state.historical_service = HistoricalDataService(engine)
        app.state.scheduler = SchedulerService(engine, settings=config)
        logger.info("Services initialized successfully")
    except Exception as e:
        logger.error("Service initialization failed", error=str(e))
        raise RuntimeError("Service initialization failed") from e

    engine.load_models()

    # Score the monitored locations once so the store is not empty
    if config.seed_default_locations:
        for location in app.state.location_service.list_locations():
            engine.predict_for_location(location)
        logger.info("Default locations scored", count=len(engine.store))

    if config.scheduler_enabled:
        app.state.scheduler.start()

    logger.info("Application startup completed")

    yield

    # Shutdown
    logger.info("Shutting down PulseNet Risk API")

    try:
        app.state.scheduler.shutdown()
    except Exception as e:
        logger.error("Error stopping scheduler", error=str(e))

    logger.info("Application shutdown completed")


# --- App Setup ---
def create_app(config: Optional[Settings] = None) -> FastAPI:
    config = config or settings

    app = FastAPI(
        title=config.api_title,
        description=config.api_description,
        version=config.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )
    app.state.settings = config

    # Setup logging middleware
    app = setup_logging_middleware(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # --- Include Routers ---
    app.include_router(system.router)
    app.include_router(locations.router)
    app.include_router(predictions.router)
    app.include_router(historical.router)

    # --- Exception Handlers ---
    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception", error=str(exc), path=request.url.path, exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "detail": "An unexpected error occurred" if not config.debug else str(exc),
                "timestamp": datetime.now().isoformat()
            }
        )

    @app.get("/", summary="API Information", tags=["General"])
    async def root():
        """Get basic API information"""
        return {
            "message": "PulseNet - Multi-hazard risk scoring for Uttarakhand",
            "version": config.api_version,
            "docs": "/docs",
            "health": "/health",
            "api": {
                "locations": "/api/v1/locations",
                "predictions": "/api/v1/predictions",
                "historical": "/api/v1/historical",
                "system": "/api/v1/system"
            }
        }

    return app


app = create_app()
