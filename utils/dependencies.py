from fastapi import HTTPException, Depends, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from fastapi.requests import Request
import structlog

from config import settings
from models.model import Location
from services.historical_service import HistoricalDataService
from services.location_service import LocationService
from services.predict import PredictionEngine

logger = structlog.get_logger(__name__)

# --- Security Dependencies ---
security = HTTPBearer(auto_error=False)


async def verify_api_key(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(security)
):
    """Verify API key for write endpoints"""
    api_key = getattr(request.app.state, "settings", settings).api_key
    if not api_key:
        return True  # No API key required in development

    if not credentials or credentials.credentials != api_key:
        logger.warning("Rejected request with invalid API key", path=request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API key",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return True


# --- Service Dependencies ---

def get_engine(request: Request) -> PredictionEngine:
    return request.app.state.engine


def get_location_service(request: Request) -> LocationService:
    return request.app.state.location_service


def get_historical_service(request: Request) -> HistoricalDataService:
    return request.app.state.historical_service


def resolve_location(
    location_name: str,
    locations: LocationService = Depends(get_location_service)
) -> Location:
    """Look up a path location name or fail with 404"""
    location = locations.get_location(location_name)
    if location is None:
        raise HTTPException(status_code=404, detail=f"Location not found: {location_name}")
    return location
