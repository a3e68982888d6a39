import os

import pytest
from pydantic import ValidationError

from config import Settings


@pytest.fixture
def clean_env(monkeypatch):
    """Strip any PULSENET_* variables leaking in from the shell"""
    for key in list(os.environ):
        if key.upper().startswith("PULSENET_"):
            monkeypatch.delenv(key)
    return monkeypatch


class TestSettings:

    def test_defaults(self, clean_env):
        settings = Settings()

        assert settings.model_mode == "analytic"
        assert settings.drift_interval_seconds == 30
        assert settings.recalculation_interval_seconds == 300
        assert settings.confidence_floor == 85.0
        assert settings.api_key is None

    def test_environment_overrides(self, clean_env):
        clean_env.setenv("PULSENET_CORS_ORIGINS", "http://a.test, http://b.test")
        clean_env.setenv("PULSENET_SCHEDULER_ENABLED", "false")
        clean_env.setenv("PULSENET_DRIFT_INTERVAL_SECONDS", "15")
        clean_env.setenv("PULSENET_MODEL_MODE", "synthetic")
        clean_env.setenv("PULSENET_ENSEMBLE_WEIGHTS", '{"landslide": 0.5, "flood": 0.3, "weather": 0.2}')
        clean_env.setenv("UNRELATED", "ignored")

        settings = Settings()

        assert settings.cors_origins == ["http://a.test", "http://b.test"]
        assert settings.scheduler_enabled is False
        assert settings.drift_interval_seconds == 15
        assert settings.model_mode == "synthetic"
        assert settings.ensemble_weights == {"landslide": 0.5, "flood": 0.3, "weather": 0.2}

    def test_prefix_is_case_insensitive(self, clean_env):
        clean_env.setenv("pulsenet_api_key", "secret")
        assert Settings().api_key == "secret"

    def test_init_arguments_beat_environment(self, clean_env):
        clean_env.setenv("PULSENET_MODEL_MODE", "synthetic")
        assert Settings(model_mode="analytic").model_mode == "analytic"

    def test_unknown_mode_rejected(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(model_mode="neural")

    def test_unknown_mode_from_environment_rejected(self, clean_env):
        clean_env.setenv("PULSENET_MODEL_MODE", "neural")
        with pytest.raises(ValidationError):
            Settings()

    def test_zero_interval_rejected(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(drift_interval_seconds=0)
