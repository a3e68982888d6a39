"""
Synthetic fallback agents

Constant-output stand-ins selected with ``ModelMode.SYNTHETIC``. They keep
the dashboard populated with plausible figures when the analytic agents
are not wanted (demos, smoke tests).
"""

from agents.base import PredictionAgent
from agents.ensemble_coordinator_agent import (
    calculate_timeframe,
    generate_recommendation,
)
from models.base import HazardType
from models.model import EnsembleResult, HazardOutputs, HazardResult

SYNTHETIC_EXPLANATION = "Synthetic fallback model - constant output"


class SyntheticLandslideAgent(PredictionAgent):
    """Fixed 85% landslide probability"""

    name = "landslide_synthetic"

    def predict(self, features) -> HazardResult:
        return HazardResult(probability=85, confidence=94, explanation=SYNTHETIC_EXPLANATION)


class SyntheticFloodAgent(PredictionAgent):
    """Fixed 72% flood probability"""

    name = "flood_synthetic"

    def predict(self, features) -> HazardResult:
        return HazardResult(probability=72, confidence=89, explanation=SYNTHETIC_EXPLANATION)


class SyntheticWeatherAgent(PredictionAgent):
    """Fixed 68% weather severity"""

    name = "weather_synthetic"

    def predict(self, features) -> HazardResult:
        return HazardResult(severity=68, confidence=91, explanation=SYNTHETIC_EXPLANATION)


class SyntheticEnsembleAgent(PredictionAgent):
    """Fixed 78% overall risk with landslide as the primary threat"""

    name = "ensemble_synthetic"

    OVERALL_RISK = 78
    CONFIDENCE = 91

    def predict(self, outputs: HazardOutputs) -> EnsembleResult:
        return EnsembleResult(
            overall_risk=self.OVERALL_RISK,
            confidence=self.CONFIDENCE,
            primary_threat=HazardType.LANDSLIDE,
            recommendation=generate_recommendation(self.OVERALL_RISK),
            timeframe=calculate_timeframe(self.OVERALL_RISK),
            explanation=SYNTHETIC_EXPLANATION,
        )
