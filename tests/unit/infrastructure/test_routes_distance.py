"""Tests for the HTTP adapter — distance and health routes."""

import pytest
from fastapi.testclient import TestClient

from geocoord.application.use_cases.measure_distance import MeasureDistanceUseCase
from geocoord.infrastructure.api.dependencies import get_measure_distance_uc
from geocoord.main import create_app


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


def _body(formula=None, origin=(1, 1), destination=(5, 5)):
    body = {
        "origin": {"latitude": origin[0], "longitude": origin[1]},
        "destination": {"latitude": destination[0], "longitude": destination[1]},
    }
    if formula:
        body["formula"] = formula
    return body


# ─── /api/health ─────────────────────────────────────────────────────


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["earth_radius_m"] > 0


# ─── /api/distance ───────────────────────────────────────────────────


def test_distance_default_formula(client):
    response = client.post("/api/distance", json=_body())
    assert response.status_code == 200
    data = response.json()
    assert data["formula"] == "haversine"
    assert data["distance_m"] == pytest.approx(62851.816846125, abs=1e-9)
    assert data["origin"] == "01.000000, 01.000000, NaN"
    assert data["destination"] == "05.000000, 05.000000, NaN"


def test_distance_vincenty(client):
    response = client.post("/api/distance", json=_body("vincenty"))
    assert response.status_code == 200
    assert response.json()["distance_m"] == pytest.approx(62642.77580421, abs=1e-9)


def test_distance_with_altitude(client):
    body = _body()
    body["origin"]["altitude"] = 120.5
    response = client.post("/api/distance", json=body)
    assert response.status_code == 200
    assert response.json()["origin"] == "01.000000, 01.000000, 120.50"


def test_distance_unknown_formula_rejected(client):
    response = client.post("/api/distance", json=_body("great_ellipse"))
    assert response.status_code == 422


def test_distance_out_of_range_latitude(client):
    response = client.post("/api/distance", json=_body(origin=(91, 1)))
    assert response.status_code == 422
    assert "latitude" in response.json()["detail"]


def test_distance_missing_longitude(client):
    body = _body()
    del body["destination"]["longitude"]
    response = client.post("/api/distance", json=body)
    assert response.status_code == 400
    assert "not a number" in response.json()["detail"]


def test_distance_vincenty_not_converging(app):
    app.dependency_overrides[get_measure_distance_uc] = lambda: MeasureDistanceUseCase(
        vincenty_max_iterations=1
    )
    with TestClient(app) as client:
        response = client.post("/api/distance", json=_body("vincenty"))
    assert response.status_code == 422
    assert "did not converge" in response.json()["detail"]
