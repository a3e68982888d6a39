"""
Prediction Engine

Runs the full scoring pipeline for a location:
feature extraction -> hazard agents -> ensemble -> alerts/actions -> store.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Union
import logging
import threading

import numpy as np

from agents import (
    EnsembleCoordinatorAgent,
    FloodAgent,
    LandslideAgent,
    PredictionAgent,
    round_half_up,
    SyntheticEnsembleAgent,
    SyntheticFloodAgent,
    SyntheticLandslideAgent,
    SyntheticWeatherAgent,
    WeatherAgent,
)
from config import Settings, settings as default_settings
from models.base import HazardType, ModelMode, RiskLevel
from models.model import (
    CurrentConditions,
    EnsembleResult,
    HazardOutputs,
    Location,
    ModelStatus,
    Prediction,
    PredictionBundle,
)
from services.action_generator import ActionGenerator
from services.alert_engine import AlertEngine
from services.feature_engineering import FeatureEngineer
from services.prediction_store import PredictionStore

logger = logging.getLogger("pulsenet.predict")

DEFAULT_CRITICAL_RISK = 85
DEFAULT_RISK = 65
DEFAULT_CONFIDENCE = 88


@dataclass
class AgentSet:
    """The four agents the engine runs"""
    landslide: PredictionAgent
    flood: PredictionAgent
    weather: PredictionAgent
    ensemble: PredictionAgent

    def __len__(self) -> int:
        return 4

    def names(self) -> List[str]:
        return [self.landslide.name, self.flood.name, self.weather.name, self.ensemble.name]


def create_agent_set(mode: ModelMode, ensemble_weights=None) -> AgentSet:
    """Build the analytic agents or the constant-output synthetic fallbacks"""
    if mode == ModelMode.SYNTHETIC:
        return AgentSet(
            landslide=SyntheticLandslideAgent(),
            flood=SyntheticFloodAgent(),
            weather=SyntheticWeatherAgent(),
            ensemble=SyntheticEnsembleAgent(),
        )
    return AgentSet(
        landslide=LandslideAgent(),
        flood=FloodAgent(),
        weather=WeatherAgent(),
        ensemble=EnsembleCoordinatorAgent(weights=ensemble_weights),
    )


class PredictionEngine:
    """
    Owns the agents, the prediction store and the system confidence.

    One instance per application; the caller constructs it and passes it to
    whatever needs it (API layer, scheduler).
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[PredictionStore] = None,
        feature_engineer: Optional[FeatureEngineer] = None,
        alert_engine: Optional[AlertEngine] = None,
        action_generator: Optional[ActionGenerator] = None,
        rng: Optional[np.random.Generator] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.settings = settings or default_settings
        self.store = store or PredictionStore(clock=clock)
        self.feature_engineer = feature_engineer or FeatureEngineer()
        self.alert_engine = alert_engine or AlertEngine()
        self.action_generator = action_generator or ActionGenerator()
        self.rng = rng or np.random.default_rng(self.settings.random_seed)
        self._clock = clock

        self.agents: Optional[AgentSet] = None
        self.mode: Optional[ModelMode] = None
        self.is_loaded = False
        self._confidence = 0.0
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def load_models(self, mode: Optional[Union[ModelMode, str]] = None) -> AgentSet:
        """
        Build the agent set and mark the engine ready.

        Args:
            mode: ``analytic`` (formula agents) or ``synthetic`` (constant
                fallback). Defaults to ``settings.model_mode``.

        Raises:
            ValueError: Unknown mode
        """
        mode = ModelMode(mode or self.settings.model_mode)
        if mode == ModelMode.SYNTHETIC:
            logger.warning("Using synthetic fallback agents")

        self.agents = create_agent_set(mode, self.settings.ensemble_weights)
        self.mode = mode
        self.is_loaded = True

        logger.info(f"Agents loaded ({mode.value}): {', '.join(self.agents.names())}")
        return self.agents

    # ------------------------------------------------------------------
    # Predictions
    # ------------------------------------------------------------------

    def predict_for_location(
        self,
        location: Location,
        conditions: Optional[CurrentConditions] = None
    ) -> Prediction:
        """
        Score a location and store the result, replacing any previous entry.

        While the agents are not loaded this returns the default prediction
        and stores nothing.
        """
        if not self.is_loaded:
            logger.warning(f"Agents still loading - default prediction for {location.name}")
            return self.get_default_prediction(location)

        prediction = self.score(location, conditions)
        self.store.put(prediction)

        ensemble = prediction.predictions.ensemble
        logger.info(
            f"Prediction for {location.name}: overall risk {ensemble.overall_risk}, "
            f"primary threat {ensemble.primary_threat.value}"
        )
        return prediction

    def score(
        self,
        location: Location,
        conditions: Optional[CurrentConditions] = None
    ) -> Prediction:
        """Run the pipeline without touching the store"""
        if not self.is_loaded:
            return self.get_default_prediction(location)

        features = self.feature_engineer.extract_features(location, conditions)

        outputs = HazardOutputs(
            landslide=self.agents.landslide.predict(features.landslide),
            flood=self.agents.flood.predict(features.flood),
            weather=self.agents.weather.predict(features.weather),
        )
        ensemble = self.agents.ensemble.predict(outputs)

        return Prediction(
            location=location,
            timestamp=self._clock(),
            predictions=PredictionBundle(
                landslide=outputs.landslide,
                flood=outputs.flood,
                weather=outputs.weather,
                ensemble=ensemble,
            ),
            alerts=self.alert_engine.generate_alerts(ensemble),
            actions=self.action_generator.recommend_actions(ensemble),
        )

    def get_default_prediction(self, location: Location) -> Prediction:
        """Ensemble-only prediction from the location's static risk label"""
        overall_risk = DEFAULT_CRITICAL_RISK if location.risk_level == RiskLevel.CRITICAL else DEFAULT_RISK
        return Prediction(
            location=location,
            timestamp=self._clock(),
            predictions=PredictionBundle(
                ensemble=EnsembleResult(
                    overall_risk=overall_risk,
                    confidence=DEFAULT_CONFIDENCE,
                    primary_threat=HazardType.LANDSLIDE,
                    recommendation="Monitor conditions closely",
                    timeframe="Next 6-12 hours",
                    explanation="AI models initializing - using historical patterns",
                )
            ),
        )

    def get_prediction(self, location: Location) -> Prediction:
        """Stored prediction for the location, else the default one"""
        return self.store.get(location.name) or self.get_default_prediction(location)

    def get_current_predictions(self) -> List[Prediction]:
        return self.store.values()

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def get_confidence(self) -> int:
        with self._lock:
            return round_half_up(self._confidence)

    def get_model_status(self) -> ModelStatus:
        return ModelStatus(
            loaded=self.is_loaded,
            models_count=len(self.agents) if self.agents else 0,
            predictions_count=len(self.store),
            confidence=self.get_confidence(),
            mode=self.mode,
        )

    # ------------------------------------------------------------------
    # Update cycle
    # ------------------------------------------------------------------

    def update_all_predictions(self) -> int:
        """
        Drift tick: simulate live sensor variance on stored predictions.

        Returns:
            Number of predictions nudged (0 while not loaded)
        """
        if not self.is_loaded:
            return 0

        with self._lock:
            self._confidence = max(
                self.settings.confidence_floor,
                self._confidence - self.rng.random() * 2 + self.rng.random() * 3,
            )
            updated = self.store.apply_drift(self.rng, self.settings.drift_amplitude)

        logger.info(f"Predictions updated - System confidence: {self.get_confidence()}%")
        return updated

    def recalculate_all_risks(self) -> None:
        """Recompute tick. Placeholder: no scoring is performed."""
        logger.info("Recalculating all risk assessments...")
        logger.info("Risk recalculation complete")
