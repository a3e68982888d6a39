from pydantic import BaseModel, model_validator, confloat, conint, Field, ConfigDict
from typing import List, Optional, Dict
from datetime import datetime

# Import shared base models
from .base import AlertLevel, BaseLocation, HazardType, ModelMode, RiskLevel


Percentage = conint(ge=0, le=100)


# --- Reference data ---

class Location(BaseLocation):
    """Monitored location - immutable reference data keyed by name"""
    population: int = Field(..., ge=0, description="Resident population")
    risk_level: RiskLevel = Field(
        RiskLevel.MEDIUM, description="Static risk label from the location dataset"
    )

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "name": "Kedarnath",
                "lat": 30.7346,
                "lng": 79.0669,
                "elevation": 3583,
                "population": 1500,
                "risk_level": "critical"
            }
        }
    )


class CurrentConditions(BaseModel):
    """Live readings for a location. Every field is optional."""
    rainfall: Optional[confloat(ge=0.0)] = Field(None, description="Rainfall intensity in mm/hr")
    river_level: Optional[confloat(ge=0.0, le=100.0)] = Field(None, description="River level as % of capacity")
    humidity: Optional[confloat(ge=0.0, le=100.0)] = None
    pressure: Optional[confloat(ge=800.0, le=1100.0)] = Field(None, description="Barometric pressure in mb")
    temperature: Optional[confloat(ge=-60.0, le=60.0)] = None
    wind_speed: Optional[confloat(ge=0.0)] = Field(None, description="Wind speed in km/h")
    cloud_cover: Optional[confloat(ge=0.0, le=100.0)] = None

    model_config = ConfigDict(
        extra="forbid",
        allow_inf_nan=False,
        json_schema_extra={
            "example": {
                "rainfall": 127,
                "river_level": 85,
                "humidity": 87,
                "pressure": 1008,
                "temperature": 18.5,
                "wind_speed": 45,
                "cloud_cover": 95
            }
        }
    )


# --- Feature bundles ---

class FeatureBundle(BaseModel):
    """Finite readings only; any finite value is scored"""
    model_config = ConfigDict(allow_inf_nan=False)


class LandslideFeatures(FeatureBundle):
    slope: float
    moisture: float
    rainfall: float
    historical: float
    vegetation: float


class FloodFeatures(FeatureBundle):
    rainfall: float
    river_level: float
    drainage: float
    topography: float
    urbanization: float


class WeatherFeatures(FeatureBundle):
    pressure: float
    humidity: float
    temperature: float
    wind_speed: float
    cloud_cover: float


class FeatureSet(BaseModel):
    """One feature bundle per hazard agent"""
    landslide: LandslideFeatures
    flood: FloodFeatures
    weather: WeatherFeatures


# --- Agent outputs ---

class HazardResult(BaseModel):
    """Output of a single hazard agent.

    Landslide and flood agents report ``probability``; the weather agent
    reports ``severity``. Exactly one of the two is set.
    """
    probability: Optional[Percentage] = None
    severity: Optional[Percentage] = None
    confidence: Percentage
    factors: Dict[str, int] = Field(default_factory=dict)
    explanation: str = ""

    @model_validator(mode="after")
    def check_single_score(self):
        if (self.probability is None) == (self.severity is None):
            raise ValueError("Exactly one of probability or severity must be set")
        return self

    @property
    def score(self) -> int:
        return self.probability if self.probability is not None else self.severity


class HazardOutputs(BaseModel):
    """Input to the ensemble agent"""
    landslide: HazardResult
    flood: HazardResult
    weather: HazardResult


class EnsembleResult(BaseModel):
    overall_risk: Percentage
    confidence: Percentage
    primary_threat: HazardType
    recommendation: str
    timeframe: str
    explanation: str

    model_config = ConfigDict(validate_assignment=True)


class AlertEntry(BaseModel):
    level: AlertLevel
    message: str
    actions: List[str]
    color: str


class PredictionBundle(BaseModel):
    """Per-hazard results plus the ensemble.

    Hazard entries are only absent on the default prediction served while
    the agents are not loaded.
    """
    landslide: Optional[HazardResult] = None
    flood: Optional[HazardResult] = None
    weather: Optional[HazardResult] = None
    ensemble: EnsembleResult


class Prediction(BaseModel):
    location: Location
    timestamp: datetime = Field(default_factory=datetime.now)
    predictions: PredictionBundle
    alerts: List[AlertEntry] = Field(default_factory=list)
    actions: List[str] = Field(default_factory=list)

    model_config = ConfigDict(validate_assignment=True)


class ModelStatus(BaseModel):
    loaded: bool
    models_count: int
    predictions_count: int
    confidence: int
    mode: Optional[ModelMode] = None
