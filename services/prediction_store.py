"""
Prediction Store
Latest prediction per location name, safe to share between request
handlers and scheduler jobs.
"""

import threading
import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional

import numpy as np

from models.model import Prediction

logger = logging.getLogger("pulsenet.prediction_store")


class PredictionStore:
    """
    Mapping of location name -> latest Prediction.

    Entries are overwritten, never appended. Every read and write holds the
    lock and readers get deep copies, so a drift tick running on a scheduler
    thread can't tear a read.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._predictions: Dict[str, Prediction] = {}
        self._lock = threading.RLock()
        self._clock = clock

    def put(self, prediction: Prediction) -> None:
        with self._lock:
            self._predictions[prediction.location.name] = prediction.model_copy(deep=True)

    def get(self, location_name: str) -> Optional[Prediction]:
        with self._lock:
            prediction = self._predictions.get(location_name)
            return prediction.model_copy(deep=True) if prediction else None

    def values(self) -> List[Prediction]:
        with self._lock:
            return [p.model_copy(deep=True) for p in self._predictions.values()]

    def apply_drift(self, rng: np.random.Generator, amplitude: int = 2) -> int:
        """
        Nudge every stored overall risk by an integer in [-amplitude, amplitude].

        Scorers are not re-run; only the ensemble figure and the timestamp
        change. Results stay clamped to [0, 100].

        Returns:
            Number of predictions updated
        """
        with self._lock:
            for prediction in self._predictions.values():
                ensemble = prediction.predictions.ensemble
                delta = int(rng.integers(-amplitude, amplitude, endpoint=True))
                ensemble.overall_risk = min(100, max(0, ensemble.overall_risk + delta))
                prediction.timestamp = self._clock()
            updated = len(self._predictions)

        logger.debug(f"Applied drift to {updated} predictions")
        return updated

    def __len__(self) -> int:
        with self._lock:
            return len(self._predictions)
