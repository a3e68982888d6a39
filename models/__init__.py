"""
PulseNet Data Models
Centralized export of all Pydantic models
"""

# Base models and enums
from .base import (
    HazardType,
    RiskLevel,
    AlertLevel,
    ModelMode,
    BaseLocation
)

# Operational models (real-time)
from .model import (
    Location,
    CurrentConditions,
    LandslideFeatures,
    FloodFeatures,
    WeatherFeatures,
    FeatureSet,
    HazardResult,
    HazardOutputs,
    EnsembleResult,
    AlertEntry,
    PredictionBundle,
    Prediction,
    ModelStatus
)

# Historical models (archival/analysis)
from .historical_models import (
    HistoricalDisaster,
    DisasterTypeSummary,
    HistoricalSummary,
    ActualOutcome,
    PreventionScenario,
    PreventionAnalysis
)

__all__ = [
    # Base
    "HazardType",
    "RiskLevel",
    "AlertLevel",
    "ModelMode",
    "BaseLocation",

    # Operational
    "Location",
    "CurrentConditions",
    "LandslideFeatures",
    "FloodFeatures",
    "WeatherFeatures",
    "FeatureSet",
    "HazardResult",
    "HazardOutputs",
    "EnsembleResult",
    "AlertEntry",
    "PredictionBundle",
    "Prediction",
    "ModelStatus",

    # Historical
    "HistoricalDisaster",
    "DisasterTypeSummary",
    "HistoricalSummary",
    "ActualOutcome",
    "PreventionScenario",
    "PreventionAnalysis",
]
