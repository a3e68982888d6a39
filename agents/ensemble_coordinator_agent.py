"""
Ensemble Coordinator Agent

Combines the landslide, flood and weather agent outputs into one overall
risk figure, classifies the primary threat and derives a recommendation
and response timeframe.
"""

import numpy as np
from typing import Dict, Optional
import math
import logging

from agents.base import PredictionAgent, round_half_up
from models.base import HazardType
from models.model import EnsembleResult, HazardOutputs

logger = logging.getLogger("pulsenet.agents.ensemble_coordinator")

# Fixed enumeration order; earlier hazards win ties for primary threat
HAZARD_ORDER = (HazardType.LANDSLIDE, HazardType.FLOOD, HazardType.WEATHER)

DEFAULT_WEIGHTS = {
    HazardType.LANDSLIDE: 0.40,
    HazardType.FLOOD: 0.35,
    HazardType.WEATHER: 0.25,
}


def generate_recommendation(risk: float) -> str:
    """Recommendation bands: >80 / >60 / >40 / else"""
    if risk > 80:
        return "IMMEDIATE EVACUATION: Move to designated safe zones immediately"
    elif risk > 60:
        return "PREPARE FOR EVACUATION: Be ready to move within 1 hour"
    elif risk > 40:
        return "HIGH ALERT: Monitor conditions and prepare emergency supplies"
    return "CONTINUE MONITORING: Stay informed of changing conditions"


def calculate_timeframe(risk: float) -> str:
    """Response window bands: >80 / >60 / >40 / else"""
    if risk > 80:
        return "Next 2-4 hours"
    if risk > 60:
        return "Next 6-12 hours"
    if risk > 40:
        return "Next 12-24 hours"
    return "Next 24-48 hours"


def generate_explanation(primary_threat: HazardType, overall_risk: int) -> str:
    return (
        f"AI Analysis: {primary_threat.value.upper()} poses the primary threat "
        f"({overall_risk}% overall risk). Multiple factors converging require immediate attention."
    )


class EnsembleCoordinatorAgent(PredictionAgent):
    """
    Weighted ensemble over the three hazard agents

    Instead of trusting one hazard score, combine them:
    - Landslide: "Probability = 85%"
    - Flood: "Probability = 72%"
    - Weather: "Severity = 68%"
    - Decision: "Risk = 76%" (0.40 / 0.35 / 0.25 weighted)

    Confidence is combined with the same weights, so both outputs are convex
    combinations of the inputs.
    """

    name = "ensemble_disaster_v4.2"

    def __init__(self, weights: Optional[Dict[HazardType, float]] = None):
        """
        Args:
            weights: How much to trust each hazard agent. Must cover all three
                hazards and sum to 1.0.
                Default: {"landslide": 0.40, "flood": 0.35, "weather": 0.25}
        """
        weights = {HazardType(k): v for k, v in (weights or DEFAULT_WEIGHTS).items()}

        if set(weights) != set(HAZARD_ORDER):
            raise ValueError(f"Ensemble weights must cover {[h.value for h in HAZARD_ORDER]}")
        if any(w < 0 for w in weights.values()):
            raise ValueError("Ensemble weights must be non-negative")
        if not math.isclose(sum(weights.values()), 1.0, abs_tol=1e-9):
            raise ValueError(f"Ensemble weights must sum to 1.0, got {sum(weights.values())}")

        self.weights = weights
        self._weight_vector = np.array([weights[h] for h in HAZARD_ORDER])

        named = {h.value: w for h, w in weights.items()}
        logger.info(f"EnsembleCoordinatorAgent initialized: weights={named}")

    def predict(self, outputs: HazardOutputs) -> EnsembleResult:
        scores = self._scores(outputs)
        confidences = np.array([getattr(outputs, h.value).confidence for h in HAZARD_ORDER])

        weighted_risk = self._weighted(scores)
        overall_risk = round_half_up(weighted_risk)
        primary_threat = self.determine_primary_threat(outputs)

        return EnsembleResult(
            overall_risk=overall_risk,
            confidence=round_half_up(self._weighted(confidences)),
            primary_threat=primary_threat,
            # Bands are applied to the unrounded weighted risk
            recommendation=generate_recommendation(weighted_risk),
            timeframe=calculate_timeframe(weighted_risk),
            explanation=generate_explanation(primary_threat, overall_risk),
        )

    def determine_primary_threat(self, outputs: HazardOutputs) -> HazardType:
        """Hazard with the highest score; ties go to the earlier hazard in HAZARD_ORDER"""
        scores = dict(zip(HAZARD_ORDER, self._scores(outputs)))
        return max(HAZARD_ORDER, key=lambda hazard: scores[hazard])

    def _weighted(self, values: np.ndarray) -> float:
        return float(np.dot(self._weight_vector, values))

    @staticmethod
    def _scores(outputs: HazardOutputs) -> np.ndarray:
        return np.array([getattr(outputs, h.value).score for h in HAZARD_ORDER], dtype=float)
