"""
Weather Pattern Agent

Scores severe-weather severity from barometric pressure, humidity,
temperature deviation, wind speed and cloud cover.
"""

from typing import Dict
import logging

from agents.base import PredictionAgent, calculate_confidence, fmt, power, round_half_up, to_percentage
from models.model import HazardResult, WeatherFeatures

logger = logging.getLogger("pulsenet.agents.weather")


class WeatherAgent(PredictionAgent):
    """Closed-form severe weather model"""

    name = "weather_pattern_v3.0"

    PRESSURE_THRESHOLD = 1010
    HUMIDITY_THRESHOLD = 85
    WIND_SPEED_THRESHOLD = 40
    BASELINE_TEMPERATURE = 20
    NORMALIZER = 50

    def __init__(self):
        logger.info(f"WeatherAgent initialized: {self.name}")

    def predict(self, features: WeatherFeatures) -> HazardResult:
        severity = (
            self.pressure_factor(features.pressure)
            + self.humidity_factor(features.humidity)
            + abs(features.temperature - self.BASELINE_TEMPERATURE) * 0.8
            + self.wind_speed_factor(features.wind_speed)
            + features.cloud_cover * 0.6
        )

        risk_level = to_percentage(severity, self.NORMALIZER)

        return HazardResult(
            severity=round_half_up(risk_level),
            confidence=calculate_confidence(features),
            factors=self._factor_breakdown(features),
            explanation=self.explain(features, risk_level),
        )

    def pressure_factor(self, pressure: float) -> float:
        # Only pressure drops below the threshold contribute
        if pressure < self.PRESSURE_THRESHOLD:
            return power(self.PRESSURE_THRESHOLD - pressure, 1.2) * 2
        return 0.0

    def humidity_factor(self, humidity: float) -> float:
        if humidity > self.HUMIDITY_THRESHOLD:
            return (humidity - self.HUMIDITY_THRESHOLD) * 1.5
        return humidity * 0.2

    def wind_speed_factor(self, wind_speed: float) -> float:
        if wind_speed > self.WIND_SPEED_THRESHOLD:
            return power(wind_speed - self.WIND_SPEED_THRESHOLD, 1.1) * 1.2
        return wind_speed * 0.3

    def _factor_breakdown(self, features: WeatherFeatures) -> Dict[str, int]:
        return {
            "pressure": round_half_up((1013 - features.pressure) * 2),
            "humidity": round_half_up(features.humidity * 0.8),
            "temperature": round_half_up(abs(features.temperature - self.BASELINE_TEMPERATURE) * 0.8),
            "wind_speed": round_half_up(features.wind_speed * 0.6),
            "cloud_cover": round_half_up(features.cloud_cover * 0.6),
        }

    @staticmethod
    def explain(features: WeatherFeatures, severity: float) -> str:
        if severity > 70:
            return (
                f"SEVERE: Low pressure system ({fmt(features.pressure)}mb) with high winds "
                f"({fmt(features.wind_speed)}kmh) indicates dangerous weather development."
            )
        return "MONITORING: Weather conditions show patterns requiring continued observation."
