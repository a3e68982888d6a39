"""
Configuration management for the PulseNet risk API
"""
import json
from typing import Annotated, Dict, List, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, overridable through PULSENET_* environment variables"""

    # API Configuration
    api_title: str = "PulseNet Risk API"
    api_description: str = "Landslide, flash flood and severe weather risk scoring for Uttarakhand"
    api_version: str = "1.0.0"
    debug: bool = False

    # Security Configuration
    api_key: Optional[str] = None
    cors_origins: Annotated[List[str], NoDecode] = ["http://localhost:3000", "http://localhost:5173"]

    # Logging Configuration
    log_level: str = "INFO"
    log_format: str = "json"

    # Prediction Engine Configuration
    model_mode: str = "analytic"
    ensemble_weights: Optional[Dict[str, float]] = None
    random_seed: Optional[int] = None
    confidence_floor: float = 85.0

    # Update Cycle Configuration
    scheduler_enabled: bool = True
    drift_interval_seconds: int = 30
    recalculation_interval_seconds: int = 300   # 5 minutes
    drift_amplitude: int = 2
    seed_default_locations: bool = True

    model_config = SettingsConfigDict(
        env_prefix="PULSENET_",
        case_sensitive=False,
        protected_namespaces=(),
    )

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',') if origin.strip()]
        return v

    @field_validator('ensemble_weights', mode='before')
    @classmethod
    def parse_ensemble_weights(cls, v):
        if isinstance(v, str):
            return json.loads(v)
        return v

    @field_validator('model_mode')
    @classmethod
    def check_model_mode(cls, v):
        if v not in ('analytic', 'synthetic'):
            raise ValueError("model_mode must be 'analytic' or 'synthetic'")
        return v

    @field_validator('drift_interval_seconds', 'recalculation_interval_seconds')
    @classmethod
    def check_positive_interval(cls, v):
        if v <= 0:
            raise ValueError("Intervals must be positive")
        return v


# Global settings instance
settings = Settings()
