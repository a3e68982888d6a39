"""
Ensemble coordinator and alert/action policy tests
"""

import pytest

from agents import EnsembleCoordinatorAgent
from agents.ensemble_coordinator_agent import calculate_timeframe, generate_recommendation
from models.base import AlertLevel, HazardType
from services.action_generator import ActionGenerator
from services.alert_engine import AlertEngine


@pytest.fixture
def ensemble():
    return EnsembleCoordinatorAgent()


class TestEnsembleCoordinatorAgent:
    """Test weighted combination of hazard outputs"""

    def test_agent_name(self, ensemble):
        assert ensemble.name == "ensemble_disaster_v4.2"

    def test_weighted_risk(self, ensemble, make_outputs):
        result = ensemble.predict(make_outputs(85, 72, 68))

        assert result.overall_risk == 76
        assert result.confidence == 92
        assert result.primary_threat == HazardType.LANDSLIDE
        assert result.recommendation == "PREPARE FOR EVACUATION: Be ready to move within 1 hour"
        assert result.timeframe == "Next 6-12 hours"
        assert result.explanation == (
            "AI Analysis: LANDSLIDE poses the primary threat (76% overall risk). "
            "Multiple factors converging require immediate attention."
        )

    def test_overall_risk_bounded_by_inputs(self, ensemble, make_outputs):
        result = ensemble.predict(make_outputs(30, 90, 55))
        assert 30 <= result.overall_risk <= 90

    def test_primary_threat_is_highest_score(self, ensemble, make_outputs):
        assert ensemble.predict(make_outputs(20, 30, 90)).primary_threat == HazardType.WEATHER

    def test_ties_go_to_earlier_hazard(self, ensemble, make_outputs):
        assert ensemble.predict(make_outputs(50, 80, 80)).primary_threat == HazardType.FLOOD
        assert ensemble.predict(make_outputs(70, 70, 70)).primary_threat == HazardType.LANDSLIDE

    def test_bands_use_unrounded_risk(self, ensemble, make_outputs):
        # 0.40*82 + 0.35*80 + 0.25*78 = 80.3
        result = ensemble.predict(make_outputs(82, 80, 78))

        assert result.overall_risk == 80
        assert result.recommendation.startswith("IMMEDIATE EVACUATION")
        assert result.timeframe == "Next 2-4 hours"
        assert "(80% overall risk)" in result.explanation

    def test_confidence_uses_same_weights(self, ensemble, make_outputs):
        outputs = make_outputs(50, 50, 50)
        outputs.landslide.confidence = 80
        outputs.flood.confidence = 80
        outputs.weather.confidence = 100
        # 32 + 28 + 25
        assert ensemble.predict(outputs).confidence == 85


class TestEnsembleWeights:
    """Test weight validation"""

    def test_string_keys_accepted(self, make_outputs):
        agent = EnsembleCoordinatorAgent(weights={"landslide": 1.0, "flood": 0.0, "weather": 0.0})
        assert agent.predict(make_outputs(40, 90, 90)).overall_risk == 40

    @pytest.mark.parametrize("weights", [
        {"landslide": 0.5, "flood": 0.5},
        {"landslide": 0.5, "flood": 0.3, "weather": 0.1},
        {"landslide": 1.2, "flood": -0.1, "weather": -0.1},
    ])
    def test_invalid_weights_rejected(self, weights):
        with pytest.raises(ValueError):
            EnsembleCoordinatorAgent(weights=weights)

    def test_unknown_hazard_rejected(self):
        with pytest.raises(ValueError):
            EnsembleCoordinatorAgent(weights={"landslide": 0.4, "flood": 0.35, "avalanche": 0.25})


class TestBands:
    """Test recommendation and timeframe bands"""

    @pytest.mark.parametrize("risk,prefix,timeframe", [
        (95, "IMMEDIATE EVACUATION", "Next 2-4 hours"),
        (80.01, "IMMEDIATE EVACUATION", "Next 2-4 hours"),
        (80, "PREPARE FOR EVACUATION", "Next 6-12 hours"),
        (61, "PREPARE FOR EVACUATION", "Next 6-12 hours"),
        (60, "HIGH ALERT", "Next 12-24 hours"),
        (41, "HIGH ALERT", "Next 12-24 hours"),
        (40, "CONTINUE MONITORING", "Next 24-48 hours"),
        (0, "CONTINUE MONITORING", "Next 24-48 hours"),
    ])
    def test_band_edges(self, risk, prefix, timeframe):
        assert generate_recommendation(risk).startswith(prefix)
        assert calculate_timeframe(risk) == timeframe


class TestAlertEngine:
    """Test alert thresholds"""

    def _ensemble(self, ensemble, make_outputs, scores):
        return ensemble.predict(make_outputs(*scores))

    def test_critical_alert(self, ensemble, make_outputs):
        alerts = AlertEngine().generate_alerts(self._ensemble(ensemble, make_outputs, (90, 90, 90)))

        assert len(alerts) == 1
        assert alerts[0].level == AlertLevel.CRITICAL
        assert alerts[0].message == "Immediate evacuation required"
        assert alerts[0].actions == ["Evacuate now", "Call emergency services", "Move to safe zone"]
        assert alerts[0].color == "#E84142"

    def test_high_alert_at_eighty(self, ensemble, make_outputs):
        # Recommendation says evacuate (80.3) but the alert band sees 80
        alerts = AlertEngine().generate_alerts(self._ensemble(ensemble, make_outputs, (82, 80, 78)))

        assert len(alerts) == 1
        assert alerts[0].level == AlertLevel.HIGH
        assert alerts[0].color == "#F97316"

    def test_no_alert_at_sixty(self, ensemble, make_outputs):
        # 60.4 rounds to 60
        result = self._ensemble(ensemble, make_outputs, (61, 60, 60))

        assert result.overall_risk == 60
        assert result.recommendation.startswith("PREPARE FOR EVACUATION")
        assert AlertEngine().generate_alerts(result) == []

    def test_alert_actions_are_independent_copies(self, ensemble, make_outputs):
        result = self._ensemble(ensemble, make_outputs, (90, 90, 90))
        first = AlertEngine().generate_alerts(result)
        first[0].actions.append("extra")

        assert "extra" not in AlertEngine().generate_alerts(result)[0].actions


class TestActionGenerator:
    """Test preparedness action threshold"""

    def test_actions_above_seventy(self, ensemble, make_outputs):
        actions = ActionGenerator().recommend_actions(ensemble.predict(make_outputs(71, 71, 71)))

        assert len(actions) == 5
        assert actions[0] == "Contact local disaster management authority"

    def test_no_actions_at_seventy(self, ensemble, make_outputs):
        assert ActionGenerator().recommend_actions(ensemble.predict(make_outputs(70, 70, 70))) == []
