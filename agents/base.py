"""
Base Prediction Agent

Every hazard model and the ensemble expose the same capability:
a versioned ``name`` and a pure ``predict(input) -> result``.
"""

from abc import ABC, abstractmethod
from typing import Any
import math

from pydantic import BaseModel

# Confidence rule constants
FULL_FEATURE_COUNT = 5
FULL_DATA_QUALITY = 95
PARTIAL_DATA_QUALITY = 85
REAL_TIME_BONUS = 3
MODEL_ACCURACY = 92


def round_half_up(value: float) -> int:
    """Round to nearest integer with .5 going up (not banker's rounding)"""
    return int(math.floor(value + 0.5))


def clamp(value: float, lower: float = 0.0, upper: float = 1.0) -> float:
    return min(max(value, lower), upper)


def power(base: float, exponent: float) -> float:
    """``base ** exponent`` that saturates to inf instead of raising OverflowError"""
    try:
        return base ** exponent
    except OverflowError:
        return math.inf


def to_percentage(raw: float, scale: float) -> float:
    """Normalize a raw risk by ``scale`` and map it onto [0, 100]"""
    # inf * 0 (full damping of a saturated term) counts as no risk
    if math.isnan(raw):
        return 0.0
    return clamp(raw / scale) * 100


def calculate_confidence(features: BaseModel) -> int:
    """
    Confidence based on data quality.

    Capped by the validated model accuracy, so any bundle with the full
    five features reports 92.
    """
    feature_count = len(type(features).model_fields)
    data_quality = FULL_DATA_QUALITY if feature_count >= FULL_FEATURE_COUNT else PARTIAL_DATA_QUALITY
    return min(data_quality + REAL_TIME_BONUS, MODEL_ACCURACY)


def fmt(value: float) -> str:
    """Render a reading for explanations: 45.0 -> '45', 18.5 -> '18.5'"""
    return f"{value:g}"


class PredictionAgent(ABC):
    """Common interface for the landslide, flood, weather and ensemble agents"""

    name: str = "agent"

    @abstractmethod
    def predict(self, features: Any) -> Any:
        """Score the given input. Must be deterministic and side-effect free."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
