"""
Basic test to verify the project setup is working correctly.
"""

import logging

import httpx
from fastapi.testclient import TestClient

from travel_lens.core.exceptions import ClientInputError, TravelLensException
from travel_lens.main import app


def test_app_creation():
    """Test that the FastAPI app can be created successfully."""
    assert app is not None
    assert app.title == "Travel Lens Relay"


def test_analyze_route_registered():
    paths = {route.path for route in app.routes}
    assert "/api/ai/analyze" in paths
    assert "/health" in paths


def test_health_endpoint():
    """Test the health endpoint returns expected response."""
    client = TestClient(app)
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["geocoding"] in {"enabled", "disabled"}
    assert "error_statistics" in data


def test_request_id_header_is_set():
    client = TestClient(app)
    response = client.get("/health")
    assert response.headers["X-Request-ID"]

    response = client.get("/health", headers={"X-Request-ID": "trace-123"})
    assert response.headers["X-Request-ID"] == "trace-123"


def test_placeholder_geocoding_warned_once_at_startup(monkeypatch, caplog):
    from travel_lens import main

    monkeypatch.setattr(main.settings.geocoding, "api_key", None)

    with caplog.at_level(logging.WARNING, logger="travel_lens.main"):
        with TestClient(app) as client:
            client.get("/health")
            client.get("/health")

    warnings = [r for r in caplog.records if "OpenCage API key not configured" in r.getMessage()]
    assert len(warnings) == 1


def test_error_handlers_cover_upstream_failures():
    handlers = set(app.exception_handlers)
    assert {ClientInputError, httpx.HTTPStatusError, httpx.RequestError, Exception} <= handlers
    assert TravelLensException not in handlers
