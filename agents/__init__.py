"""
PulseNet Prediction Agents

Closed-form hazard models behind one ``PredictionAgent`` interface.

Agents:
- LandslideAgent: Landslide probability from slope, moisture, rainfall, history, vegetation
- FloodAgent: Flash flood probability from rainfall, river level, drainage, terrain, urbanization
- WeatherAgent: Severe weather severity from pressure, humidity, temperature, wind, clouds
- EnsembleCoordinatorAgent: Weighted combination of the three hazard agents
- Synthetic*Agent: Constant-output fallbacks
"""

from agents.base import PredictionAgent, calculate_confidence, round_half_up
from agents.landslide_agent import LandslideAgent
from agents.flood_agent import FloodAgent
from agents.weather_agent import WeatherAgent
from agents.ensemble_coordinator_agent import EnsembleCoordinatorAgent, HAZARD_ORDER
from agents.synthetic_agents import (
    SyntheticLandslideAgent,
    SyntheticFloodAgent,
    SyntheticWeatherAgent,
    SyntheticEnsembleAgent,
)

__all__ = [
    "PredictionAgent",
    "calculate_confidence",
    "round_half_up",
    "LandslideAgent",
    "FloodAgent",
    "WeatherAgent",
    "EnsembleCoordinatorAgent",
    "HAZARD_ORDER",
    "SyntheticLandslideAgent",
    "SyntheticFloodAgent",
    "SyntheticWeatherAgent",
    "SyntheticEnsembleAgent",
]
