"""
Landslide Prediction Agent

Scores landslide probability from slope, soil moisture, rainfall intensity,
historical pattern weight and vegetation cover.
"""

from typing import Dict
import logging

from agents.base import PredictionAgent, calculate_confidence, fmt, power, round_half_up, to_percentage
from models.model import HazardResult, LandslideFeatures

logger = logging.getLogger("pulsenet.agents.landslide")


class LandslideAgent(PredictionAgent):
    """
    Closed-form landslide model.

    Each driver has a critical threshold above which its contribution grows
    as a power of the excess:
    - Slope above 30 degrees
    - Soil moisture above 70%
    - Rainfall above 50 mm/h
    Vegetation then damps the total (full cover removes half the risk).
    """

    name = "landslide_prediction_v2.1"

    SLOPE_THRESHOLD = 30
    MOISTURE_THRESHOLD = 70
    RAINFALL_THRESHOLD = 50
    NORMALIZER = 100

    def __init__(self):
        logger.info(f"LandslideAgent initialized: {self.name}")

    def predict(self, features: LandslideFeatures) -> HazardResult:
        risk = (
            self.slope_factor(features.slope)
            + self.moisture_factor(features.moisture)
            + self.rainfall_factor(features.rainfall)
            + features.historical * 0.4
        )
        # Vegetation protection
        risk *= (1 - features.vegetation / 200)

        probability = to_percentage(risk, self.NORMALIZER)

        return HazardResult(
            probability=round_half_up(probability),
            confidence=calculate_confidence(features),
            factors=self._factor_breakdown(features),
            explanation=self.explain(features, probability),
        )

    def slope_factor(self, slope: float) -> float:
        if slope > self.SLOPE_THRESHOLD:
            return power(slope - self.SLOPE_THRESHOLD, 1.8) * 0.4
        return slope * 0.1

    def moisture_factor(self, moisture: float) -> float:
        if moisture > self.MOISTURE_THRESHOLD:
            return power(moisture - self.MOISTURE_THRESHOLD, 1.5) * 0.6
        return moisture * 0.2

    def rainfall_factor(self, rainfall: float) -> float:
        if rainfall > self.RAINFALL_THRESHOLD:
            return power(rainfall - self.RAINFALL_THRESHOLD, 1.3) * 0.8
        return rainfall * 0.3

    def _factor_breakdown(self, features: LandslideFeatures) -> Dict[str, int]:
        return {
            "slope": round_half_up(features.slope * 0.4),
            "moisture": round_half_up(features.moisture * 0.6),
            "rainfall": round_half_up(features.rainfall * 0.8),
            "historical": round_half_up(features.historical * 0.4),
            "vegetation": round_half_up(features.vegetation * 0.2),
        }

    @staticmethod
    def explain(features: LandslideFeatures, probability: float) -> str:
        if probability > 80:
            return (
                f"CRITICAL: Slope instability ({fmt(features.slope)}°) combined with high soil "
                f"moisture ({fmt(features.moisture)}%) and intense rainfall "
                f"({fmt(features.rainfall)}mm/h) creates extreme landslide conditions."
            )
        elif probability > 60:
            return (
                "HIGH RISK: Steep terrain and saturated soil conditions favor landslide "
                "occurrence with current weather patterns."
            )
        return "MODERATE: Current conditions show elevated but manageable landslide risk factors."
