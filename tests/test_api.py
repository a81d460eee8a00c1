"""
Tests for the REST API.
"""

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from lrjs_deadline.api import app


@pytest.fixture
def client():
    return TestClient(app)


class TestCalculateEndpoint:
    """Tests for POST /calculate."""

    def test_madrid(self, client):
        response = client.post(
            "/calculate",
            json={"trial_date": "2026-02-26", "comunidad": "MD", "use_discovery": False},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["theoretical_deadline"] == "2026-02-12"
        assert data["prorrogue_date"] == "2026-02-13"
        assert data["prorrogue_cutoff_time"] == "15:00"
        assert len(data["business_days_track"]) == 10
        assert data["comunidad"] == "MD"

    def test_extra_holidays(self, client):
        response = client.post(
            "/calculate",
            json={
                "trial_date": "26/02/2026",
                "location": "28001",
                "holidays": ["2026-02-12", "junk"],
                "use_discovery": False,
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["theoretical_deadline"] == "2026-02-11"
        assert data["resolution_method"] == "postal_code"
        assert data["holidays"][0]["date"] == "2026-02-12"
        assert data["holidays"][0]["source"] == "manual"

    def test_invalid_trial_date(self, client):
        response = client.post("/calculate", json={"trial_date": "pronto"})

        assert response.status_code == 400
        assert "Invalid trial date" in response.json()["detail"]

    def test_invalid_comunidad(self, client):
        response = client.post("/calculate", json={"trial_date": "2026-02-26", "comunidad": "XX"})

        assert response.status_code == 400

    def test_unbounded_search(self, client):
        start = date(2025, 1, 1)
        holidays = [(start + timedelta(days=i)).isoformat() for i in range(460)]

        response = client.post(
            "/calculate",
            json={
                "trial_date": "2026-02-26",
                "holidays": holidays,
                "use_static_calendar": False,
                "use_discovery": False,
            },
        )

        assert response.status_code == 422
        assert "gave up" in response.json()["detail"]

    def test_trial_near_start_of_calendar(self, client):
        response = client.post("/calculate", json={"trial_date": "0001-01-20", "use_discovery": False})

        assert response.status_code == 200
        assert response.json()["theoretical_deadline"] == "0001-01-08"

    def test_trial_without_room_to_count(self, client):
        response = client.post("/calculate", json={"trial_date": "0001-01-05", "use_discovery": False})

        assert response.status_code == 422
        assert "gave up" in response.json()["detail"]


class TestOtherEndpoints:
    """Tests for the lookup endpoints."""

    def test_parse_holidays(self, client):
        response = client.post("/parse-holidays", json={"text": "2026-02-13\nnot-a-date\n2026-02-12"})

        assert response.status_code == 200
        assert response.json() == ["2026-02-12", "2026-02-13"]

    def test_holidays_for_community(self, client):
        response = client.get("/holidays/2026/CT")

        assert response.status_code == 200
        dates = [h["date"] for h in response.json()]
        assert "2026-09-11" in dates

    def test_national_holidays(self, client):
        response = client.get("/holidays/2026/ES")

        assert response.status_code == 200
        assert all(h["is_national"] for h in response.json())

    def test_holidays_invalid_year(self, client):
        assert client.get("/holidays/1800/MD").status_code == 400

    def test_comunidades(self, client):
        response = client.get("/comunidades")

        assert response.status_code == 200
        assert len(response.json()) == 19

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
