"""
Feature Engineering

Maps a location and its current readings into the three agent feature
bundles, applying per-model defaults for missing readings and deriving
terrain proxies from static location attributes.
"""

from functools import partial
from typing import Dict, Optional, Union
import logging

from models.base import HazardType
from models.model import (
    CurrentConditions,
    FeatureSet,
    FloodFeatures,
    LandslideFeatures,
    Location,
    WeatherFeatures,
)

logger = logging.getLogger("pulsenet.feature_engineering")

# Historical risk factors for specific locations (0-100)
HISTORICAL_RISK: Dict[str, Dict[HazardType, int]] = {
    "Kedarnath": {HazardType.LANDSLIDE: 95, HazardType.FLOOD: 90},
    "Badrinath": {HazardType.LANDSLIDE: 75, HazardType.FLOOD: 65},
    "Gangotri": {HazardType.LANDSLIDE: 80, HazardType.FLOOD: 70},
    "Hemkund": {HazardType.LANDSLIDE: 85, HazardType.FLOOD: 60},
    "Joshimath": {HazardType.LANDSLIDE: 70, HazardType.FLOOD: 55},
}
DEFAULT_HISTORICAL_RISK = 50

# Fallback readings when a sensor value is missing
DEFAULT_READINGS = {
    "rainfall": 127.0,
    "river_level": 85.0,
    "humidity": 87.0,
    "pressure": 1008.0,
    "temperature": 18.5,
    "wind_speed": 45.0,
    "cloud_cover": 95.0,
}

HIGH_ALTITUDE_M = 2000
LOW_ALTITUDE_M = 1000
URBAN_POPULATION = 10000
SPARSE_VEGETATION_LOCATIONS = {"Kedarnath"}


def get_historical_risk(location_name: str, hazard: Union[HazardType, str]) -> int:
    """Historical risk for a location and hazard; 50 when not on record"""
    try:
        hazard = HazardType(hazard)
    except ValueError:
        return DEFAULT_HISTORICAL_RISK
    return HISTORICAL_RISK.get(location_name, {}).get(hazard, DEFAULT_HISTORICAL_RISK)


class FeatureEngineer:
    """Create agent-ready feature bundles from location and live readings"""

    def extract_features(
        self,
        location: Location,
        conditions: Optional[CurrentConditions] = None
    ) -> FeatureSet:
        """
        Build one feature bundle per hazard agent

        Args:
            location: Static location reference data
            conditions: Live readings; any missing field falls back to its default

        Returns:
            FeatureSet with landslide, flood and weather bundles
        """
        conditions = conditions or CurrentConditions()
        reading = partial(self._reading, conditions)

        features = FeatureSet(
            landslide=LandslideFeatures(
                # Slope is a proxy from elevation, not a measured value
                slope=45 if location.elevation > HIGH_ALTITUDE_M else 25,
                moisture=reading("humidity"),
                rainfall=reading("rainfall"),
                historical=get_historical_risk(location.name, HazardType.LANDSLIDE),
                vegetation=20 if location.name in SPARSE_VEGETATION_LOCATIONS else 60,
            ),
            flood=FloodFeatures(
                rainfall=reading("rainfall"),
                river_level=reading("river_level"),
                drainage=40 if location.elevation < LOW_ALTITUDE_M else 70,
                topography=35 if location.elevation > HIGH_ALTITUDE_M else 15,
                urbanization=60 if location.population > URBAN_POPULATION else 20,
            ),
            weather=WeatherFeatures(
                pressure=reading("pressure"),
                humidity=reading("humidity"),
                temperature=reading("temperature"),
                wind_speed=reading("wind_speed"),
                cloud_cover=reading("cloud_cover"),
            ),
        )

        logger.debug(f"Extracted features for {location.name}: {features.model_dump()}")
        return features

    @staticmethod
    def _reading(conditions: CurrentConditions, field: str) -> float:
        value = getattr(conditions, field)
        return DEFAULT_READINGS[field] if value is None else value
