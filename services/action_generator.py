# services/action_generator.py
"""
Action Generator Service

Recommends operational actions for residents and field teams based on the
ensemble risk.
"""

from typing import List
import logging

from models.model import EnsembleResult

logger = logging.getLogger("pulsenet.action_generator")


class ActionGenerator:
    """Generate the preparedness checklist for high-risk assessments"""

    ACTION_THRESHOLD = 70

    PREPAREDNESS_ACTIONS = (
        "Contact local disaster management authority",
        "Ensure emergency communication devices are charged",
        "Prepare emergency supplies (water, food, medicines)",
        "Identify nearest evacuation center",
        "Stay tuned to official emergency broadcasts",
    )

    def recommend_actions(self, ensemble: EnsembleResult) -> List[str]:
        """
        Args:
            ensemble: Ensemble assessment for a location

        Returns:
            The five preparedness actions when overall risk exceeds 70, else []
        """
        if ensemble.overall_risk > self.ACTION_THRESHOLD:
            logger.debug(f"Preparedness actions recommended (overall risk {ensemble.overall_risk})")
            return list(self.PREPAREDNESS_ACTIONS)
        return []
