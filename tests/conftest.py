import pytest
import numpy as np
from datetime import datetime, timedelta
from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from models.base import RiskLevel
from models.model import CurrentConditions, HazardOutputs, HazardResult, Location
from services.location_service import LocationService
from services.predict import PredictionEngine


class FakeClock:
    """Clock that only moves when told to"""

    def __init__(self, start=datetime(2024, 7, 1, 6, 0, 0)):
        self.now = start

    def __call__(self):
        return self.now

    def tick(self, seconds=30):
        self.now += timedelta(seconds=seconds)
        return self.now


@pytest.fixture
def test_settings():
    return Settings(scheduler_enabled=False, random_seed=42)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def engine(test_settings, clock):
    """Loaded analytic engine with a seeded RNG and fixed clock"""
    engine = PredictionEngine(settings=test_settings, rng=np.random.default_rng(42), clock=clock)
    engine.load_models()
    return engine


@pytest.fixture
def unloaded_engine(test_settings, clock):
    return PredictionEngine(settings=test_settings, rng=np.random.default_rng(42), clock=clock)


@pytest.fixture
def locations():
    return LocationService()


@pytest.fixture
def kedarnath(locations):
    return locations.get_location("Kedarnath")


@pytest.fixture
def rishikesh(locations):
    return locations.get_location("Rishikesh")


@pytest.fixture
def joshimath(locations):
    return locations.get_location("Joshimath")


@pytest.fixture
def calm_conditions():
    """Quiet pre-monsoon morning"""
    return CurrentConditions(
        rainfall=0,
        river_level=10,
        humidity=40,
        pressure=1015,
        temperature=20,
        wind_speed=5,
        cloud_cover=10,
    )


@pytest.fixture
def custom_location():
    return Location(
        name="Test Village",
        lat=30.5,
        lng=79.0,
        elevation=2000,
        population=10000,
        risk_level=RiskLevel.MEDIUM,
    )


def hazard_outputs(landslide, flood, weather, confidence=92):
    return HazardOutputs(
        landslide=HazardResult(probability=landslide, confidence=confidence),
        flood=HazardResult(probability=flood, confidence=confidence),
        weather=HazardResult(severity=weather, confidence=confidence),
    )


@pytest.fixture
def make_outputs():
    return hazard_outputs


@pytest.fixture
def client(test_settings):
    """TestClient with lifespan: engine loaded, default locations scored, scheduler off"""
    app = create_app(test_settings)
    with TestClient(app) as client:
        yield client
