import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app


CALM = {
    "rainfall": 0,
    "river_level": 10,
    "humidity": 40,
    "pressure": 1015,
    "temperature": 20,
    "wind_speed": 5,
    "cloud_cover": 10,
}


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["api"]["predictions"] == "/api/v1/predictions"


def test_health(client):
    response = client.get("/health")
    data = response.json()

    assert response.status_code == 200
    assert data["status"] == "healthy"
    assert data["services"]["prediction_engine"]["mode"] == "analytic"
    assert data["services"]["scheduler"]["status"] == "stopped"


def test_request_id_header(client):
    assert client.get("/").headers.get("x-request-id")


class TestLocationEndpoints:

    def test_list(self, client):
        response = client.get("/api/v1/locations")
        assert response.status_code == 200
        assert len(response.json()) == 10

    def test_filter_by_risk_level(self, client):
        names = {loc["name"] for loc in client.get("/api/v1/locations?risk_level=critical").json()}
        assert names == {"Kedarnath", "Hemkund"}

    def test_lookup_is_case_insensitive(self, client):
        response = client.get("/api/v1/locations/kedarnath")
        assert response.status_code == 200
        assert response.json()["elevation"] == 3583

    def test_unknown_location(self, client):
        assert client.get("/api/v1/locations/Atlantis").status_code == 404


class TestPredictionEndpoints:

    def test_startup_scores_default_locations(self, client):
        predictions = client.get("/api/v1/predictions").json()
        risks = [p["predictions"]["ensemble"]["overall_risk"] for p in predictions]

        assert len(predictions) == 10
        assert risks == sorted(risks, reverse=True)

    def test_min_risk_filter(self, client):
        client.post("/api/v1/predictions/Rishikesh", json=CALM)
        names = {p["location"]["name"] for p in client.get("/api/v1/predictions?min_risk=50").json()}
        assert "Rishikesh" not in names
        assert "Kedarnath" in names

    def test_get_stored_prediction(self, client):
        response = client.get("/api/v1/predictions/Kedarnath")
        ensemble = response.json()["predictions"]["ensemble"]

        assert response.status_code == 200
        assert ensemble["overall_risk"] == 100
        assert ensemble["primary_threat"] == "landslide"

    def test_post_scores_and_stores(self, client):
        response = client.post("/api/v1/predictions/Rishikesh", json=CALM)
        data = response.json()

        assert response.status_code == 200
        assert data["predictions"]["ensemble"]["overall_risk"] == 26
        assert data["predictions"]["weather"]["severity"] == 31
        assert data["alerts"] == []

        stored = client.get("/api/v1/predictions/Rishikesh").json()
        assert stored["predictions"]["ensemble"]["overall_risk"] == 26

    def test_post_without_body_uses_defaults(self, client):
        response = client.post("/api/v1/predictions/Kedarnath")
        data = response.json()

        assert response.status_code == 200
        assert data["alerts"][0]["level"] == "CRITICAL"
        assert len(data["actions"]) == 5

    def test_post_huge_readings(self, client):
        response = client.post("/api/v1/predictions/Kedarnath", json={"rainfall": 1e300, "wind_speed": 1e300})
        data = response.json()

        assert response.status_code == 200
        assert data["predictions"]["landslide"]["probability"] == 100
        assert data["predictions"]["weather"]["severity"] == 100
        assert data["predictions"]["ensemble"]["overall_risk"] == 100
        assert data["alerts"][0]["level"] == "CRITICAL"

    def test_post_partial_readings(self, client):
        response = client.post("/api/v1/predictions/Haridwar", json={"rainfall": 0})
        assert response.status_code == 200
        assert response.json()["predictions"]["landslide"]["factors"]["rainfall"] == 0

    @pytest.mark.parametrize("body", [
        {"pressure": 5000},
        {"humidity": -1},
        {"snowfall": 12},
    ])
    def test_post_rejects_invalid_readings(self, client, body):
        assert client.post("/api/v1/predictions/Kedarnath", json=body).status_code == 422

    def test_post_unknown_location(self, client):
        assert client.post("/api/v1/predictions/Atlantis", json=CALM).status_code == 404


class TestSystemEndpoints:

    def test_status(self, client):
        data = client.get("/api/v1/system/status").json()

        assert data == {
            "loaded": True,
            "models_count": 4,
            "predictions_count": 10,
            "confidence": 0,
            "mode": "analytic",
        }

    def test_confidence(self, client):
        assert client.get("/api/v1/system/confidence").json() == {"confidence": 0}


class TestHistoricalEndpoints:

    def test_disasters_sorted_by_date(self, client):
        dates = [d["date"] for d in client.get("/api/v1/historical/disasters").json()]
        assert dates == ["2013-06-16", "2016-09-18", "2021-02-07", "2022-10-19"]

    def test_disasters_filter(self, client):
        data = client.get("/api/v1/historical/disasters?disaster_type=landslide").json()
        assert {d["location"] for d in data} == {"Chamoli", "Uttarkashi"}

    def test_summary(self, client):
        data = client.get("/api/v1/historical/summary").json()

        assert data["total_events"] == 4
        assert data["total_casualties"] == 5963
        assert data["by_type"][0] == {"type": "flood", "events": 1, "casualties": 5700}
        assert data["by_location"]["Chamoli"] == 2

    def test_kedarnath_2013(self, client):
        data = client.get("/api/v1/historical/kedarnath-2013").json()

        assert data["ai_prediction"]["predictions"]["ensemble"]["overall_risk"] == 100
        assert data["ai_prediction"]["location"]["population"] == 100000
        assert data["actual_outcome"]["casualties"] == 5700
        assert data["prevention_scenario"]["lives_could_be_saved"] == 5200

        # Live entry untouched
        live = client.get("/api/v1/predictions/Kedarnath").json()
        assert live["location"]["population"] == 1500


class TestAppConfiguration:

    def test_api_key_required_for_scoring(self):
        app = create_app(Settings(api_key="secret", scheduler_enabled=False))
        with TestClient(app) as client:
            assert client.post("/api/v1/predictions/Kedarnath").status_code == 401
            assert client.post(
                "/api/v1/predictions/Kedarnath",
                headers={"Authorization": "Bearer secret"},
            ).status_code == 200
            # Reads stay open
            assert client.get("/api/v1/predictions/Kedarnath").status_code == 200

    def test_no_seeding(self):
        app = create_app(Settings(scheduler_enabled=False, seed_default_locations=False))
        with TestClient(app) as client:
            assert client.get("/api/v1/predictions").json() == []
            default = client.get("/api/v1/predictions/Joshimath").json()
            assert default["predictions"]["ensemble"]["overall_risk"] == 65

    def test_synthetic_mode(self):
        app = create_app(Settings(scheduler_enabled=False, model_mode="synthetic"))
        with TestClient(app) as client:
            data = client.post("/api/v1/predictions/Dehradun", json=CALM).json()
            assert data["predictions"]["ensemble"]["overall_risk"] == 78
            assert client.get("/api/v1/system/status").json()["mode"] == "synthetic"

    def test_scheduler_runs_with_app(self):
        app = create_app(Settings(random_seed=1))
        with TestClient(app) as client:
            data = client.get("/health").json()
            assert data["services"]["scheduler"]["status"] == "running"
        assert not app.state.scheduler.is_running
