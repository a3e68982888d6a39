"""
Historical disaster models for PulseNet
Archival records and the 2013 Kedarnath retrospective
"""

from pydantic import BaseModel, Field, ConfigDict
from typing import Dict, List
import datetime

from .model import Prediction


class HistoricalDisaster(BaseModel):
    """A recorded disaster event"""
    date: datetime.date
    type: str = Field(..., description="Disaster type, e.g. flood, landslide, avalanche")
    severity: str
    casualties: int = Field(..., ge=0)
    location: str

    model_config = ConfigDict(frozen=True)


class DisasterTypeSummary(BaseModel):
    type: str
    events: int
    casualties: int


class HistoricalSummary(BaseModel):
    total_events: int
    total_casualties: int
    by_type: List[DisasterTypeSummary]
    by_location: Dict[str, int] = Field(
        default_factory=dict, description="Event count per location"
    )


class ActualOutcome(BaseModel):
    casualties: int
    missing_persons: int
    economic_damage: int = Field(..., description="Crores INR")
    affected_people: int
    damaged_infrastructure: int


class PreventionScenario(BaseModel):
    early_warning_hours: int
    evacuation_efficiency: int = Field(..., ge=0, le=100)
    predicted_casualties: int
    predicted_damage: int
    lives_could_be_saved: int
    damage_reduction: int


class PreventionAnalysis(BaseModel):
    """Engine output on historical conditions next to what actually happened"""
    ai_prediction: Prediction
    actual_outcome: ActualOutcome
    prevention_scenario: PreventionScenario
