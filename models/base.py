"""
Shared base models and enums for PulseNet
Used by the scoring agents, the prediction engine and the API layer
"""

from pydantic import BaseModel, ConfigDict, Field, constr, confloat
from enum import Enum


# ============= Enums =============

class HazardType(str, Enum):
    """Independently scored hazard categories"""
    LANDSLIDE = "landslide"
    FLOOD = "flood"
    WEATHER = "weather"


class RiskLevel(str, Enum):
    """Static risk label attached to a location (never derived from scoring)"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class AlertLevel(str, Enum):
    """Alert severity emitted by the alert engine"""
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"


class ModelMode(str, Enum):
    """Which agent set the engine runs"""
    ANALYTIC = "analytic"
    SYNTHETIC = "synthetic"


# ============= Base Location Model =============

class BaseLocation(BaseModel):
    """Shared location fields"""
    name: constr(min_length=1, max_length=100, strip_whitespace=True)
    lat: confloat(ge=-90.0, le=90.0)
    lng: confloat(ge=-180.0, le=180.0)
    elevation: float = Field(..., ge=-500, le=9000, description="Elevation in meters")

    model_config = ConfigDict(frozen=True)

