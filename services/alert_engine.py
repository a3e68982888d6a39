"""
Alert Engine Service
Turns an ensemble assessment into dashboard alert entries.
"""

import logging
from typing import List

from models.base import AlertLevel
from models.model import AlertEntry, EnsembleResult

logger = logging.getLogger("pulsenet.alert_engine")


class AlertEngine:
    """
    Threshold policy for alert entries.

    Alert bands (60/80) are independent of the ensemble recommendation
    bands (40/60/80).
    """

    RISK_THRESHOLD_CRITICAL = 80
    RISK_THRESHOLD_HIGH = 60

    CRITICAL_ALERT = {
        "level": AlertLevel.CRITICAL,
        "message": "Immediate evacuation required",
        "actions": ["Evacuate now", "Call emergency services", "Move to safe zone"],
        "color": "#E84142",
    }
    HIGH_ALERT = {
        "level": AlertLevel.HIGH,
        "message": "Prepare for potential evacuation",
        "actions": ["Pack essentials", "Prepare evacuation route", "Stay alert"],
        "color": "#F97316",
    }

    def generate_alerts(self, ensemble: EnsembleResult) -> List[AlertEntry]:
        """
        Evaluate the overall risk against the alert bands.

        Returns:
            At most one alert entry; empty when risk is 60 or below
        """
        risk = ensemble.overall_risk

        if risk > self.RISK_THRESHOLD_CRITICAL:
            template = self.CRITICAL_ALERT
        elif risk > self.RISK_THRESHOLD_HIGH:
            template = self.HIGH_ALERT
        else:
            return []

        logger.info(f"{template['level'].value} alert raised (overall risk {risk})")
        return [AlertEntry(**{**template, "actions": list(template["actions"])})]
