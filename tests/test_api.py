"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from vitd_screening.backend.api import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def payload(high_risk_answers):
    return {
        "initials": "S.R.",
        "age": 60,
        "gender": "Female",
        "height_feet": 5,
        "height_inches": 6,
        "weight_kg": 89.93,
        "hypertension": True,
        "questionnaire_responses": high_risk_answers,
    }


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestSchemes:
    def test_list(self, client):
        body = client.get("/api/schemes").json()
        assert body["active"] == "scheme_c"
        assert {s["id"] for s in body["schemes"]} == {
            "scheme_a", "scheme_b", "scheme_c", "scheme_c_three_tier",
        }

    def test_detail(self, client):
        body = client.get("/api/schemes/scheme_c").json()
        assert len(body["questions"]) == 18
        assert body["questions"][17]["options"] == {"yes": -5, "no": 0}
        assert body["labels"] == ["Adequate", "Inadequate"]

    def test_unknown(self, client):
        assert client.get("/api/schemes/scheme_z").status_code == 404


class TestScore:
    def test_scores_patient(self, client, payload):
        response = client.post("/api/score", json=payload)
        assert response.status_code == 200
        body = response.json()
        assert body["total_score"] == 12.75
        assert body["risk_level"] == "Inadequate"
        assert body["bmi"] == 32.0
        assert body["scoring_scheme"] == "scheme_c"

    def test_floor(self, client, payload, lowest_risk_answers):
        payload.update(age=30, questionnaire_responses=dict(lowest_risk_answers, q18="yes"))
        body = client.post("/api/score", json=payload).json()
        assert body["raw_score"] == -5
        assert body["total_score"] == 0
        assert body["risk_level"] == "Adequate"

    def test_historical_scheme(self, client, payload):
        payload.update(questionnaire_responses={}, scheme="scheme_a")
        body = client.post("/api/score", json=payload).json()
        assert body["total_score"] == 2
        assert body["risk_level"] == "Low Risk"

    def test_missing_gender(self, client, payload):
        del payload["gender"]
        assert client.post("/api/score", json=payload).status_code == 422

    def test_age_out_of_range(self, client, payload):
        payload["age"] = 0
        assert client.post("/api/score", json=payload).status_code == 422

    def test_bad_option_code(self, client, payload):
        payload["questionnaire_responses"]["q4"] = "fulll"
        response = client.post("/api/score", json=payload)
        assert response.status_code == 422
        assert "q4" in response.json()["detail"]

    def test_unknown_scheme(self, client, payload):
        payload["scheme"] = "scheme_z"
        assert client.post("/api/score", json=payload).status_code == 400


class TestSummary:
    def test_counts(self, client):
        response = client.post(
            "/api/summary",
            json={"risk_levels": ["Adequate", "Inadequate", "Inadequate", "Inadequate"]},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 4
        assert body["counts"] == {"Adequate": 1, "Inadequate": 3}
        assert body["percentages"] == {"Adequate": 25, "Inadequate": 75}

    def test_unknown_scheme(self, client):
        response = client.post("/api/summary", json={"risk_levels": [], "scheme": "nope"})
        assert response.status_code == 400
