"""
PulseNet Services
Centralized export of all service classes
"""

from .feature_engineering import FeatureEngineer, get_historical_risk, HISTORICAL_RISK
from .alert_engine import AlertEngine
from .action_generator import ActionGenerator
from .prediction_store import PredictionStore
from .predict import PredictionEngine, AgentSet, create_agent_set
from .scheduler import SchedulerService, Ticker, APSchedulerTicker, ManualTicker
from .location_service import LocationService, DEFAULT_LOCATIONS
from .historical_service import HistoricalDataService, HISTORICAL_DISASTERS

__all__ = [
    # Scoring pipeline
    "FeatureEngineer",
    "get_historical_risk",
    "HISTORICAL_RISK",
    "AlertEngine",
    "ActionGenerator",

    # Engine & store
    "PredictionStore",
    "PredictionEngine",
    "AgentSet",
    "create_agent_set",

    # Update cycle
    "SchedulerService",
    "Ticker",
    "APSchedulerTicker",
    "ManualTicker",

    # Reference data
    "LocationService",
    "DEFAULT_LOCATIONS",
    "HistoricalDataService",
    "HISTORICAL_DISASTERS",
]
