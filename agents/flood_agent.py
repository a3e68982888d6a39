"""
Flash Flood Prediction Agent

Scores flash-flood probability from rainfall intensity, river level,
drainage capacity, topography and urbanization.
"""

from typing import Dict
import logging

from agents.base import PredictionAgent, calculate_confidence, fmt, power, round_half_up, to_percentage
from models.model import FloodFeatures, HazardResult

logger = logging.getLogger("pulsenet.agents.flood")


class FloodAgent(PredictionAgent):
    """Closed-form flash flood model"""

    name = "flash_flood_v1.9"

    RAINFALL_THRESHOLD = 75
    RIVER_LEVEL_THRESHOLD = 80
    TOPOGRAPHY_THRESHOLD = 20
    NORMALIZER = 80

    def __init__(self):
        logger.info(f"FloodAgent initialized: {self.name}")

    def predict(self, features: FloodFeatures) -> HazardResult:
        risk = self.rainfall_factor(features.rainfall) + self.river_level_factor(features.river_level)

        # Drainage absorbs part of the water load
        risk *= (1 - features.drainage / 150)

        risk += self.topography_factor(features.topography)
        risk += features.urbanization * 0.3

        probability = to_percentage(risk, self.NORMALIZER)

        return HazardResult(
            probability=round_half_up(probability),
            confidence=calculate_confidence(features),
            factors=self._factor_breakdown(features),
            explanation=self.explain(features, probability),
        )

    def rainfall_factor(self, rainfall: float) -> float:
        if rainfall > self.RAINFALL_THRESHOLD:
            return power(rainfall - self.RAINFALL_THRESHOLD, 1.4) * 0.7
        return rainfall * 0.4

    def river_level_factor(self, river_level: float) -> float:
        if river_level > self.RIVER_LEVEL_THRESHOLD:
            return power(river_level - self.RIVER_LEVEL_THRESHOLD, 1.6) * 0.9
        return river_level * 0.3

    def topography_factor(self, topography: float) -> float:
        if topography > self.TOPOGRAPHY_THRESHOLD:
            return topography * 0.5
        return topography * 0.2

    def _factor_breakdown(self, features: FloodFeatures) -> Dict[str, int]:
        return {
            "rainfall": round_half_up(features.rainfall * 0.7),
            "river_level": round_half_up(features.river_level * 0.9),
            "drainage": round_half_up((100 - features.drainage) * 0.5),
            "topography": round_half_up(features.topography * 0.4),
            "urbanization": round_half_up(features.urbanization * 0.3),
        }

    @staticmethod
    def explain(features: FloodFeatures, probability: float) -> str:
        if probability > 75:
            return (
                f"CRITICAL: Extreme rainfall ({fmt(features.rainfall)}mm/h) with river levels at "
                f"{fmt(features.river_level)}% capacity exceeds flood threshold."
            )
        elif probability > 50:
            return (
                "HIGH RISK: Heavy precipitation and elevated river levels create significant "
                "flash flood potential."
            )
        return "MODERATE: Current water levels and drainage capacity can handle present conditions."
