"""Tests for the health and fallback routes."""

from fastapi.testclient import TestClient

from testgen.config.settings import Settings
from testgen.main import create_app


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["github_configured"] is False


def test_health_reports_configuration(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert body["github_configured"] is False
    assert body["ai_configured"] is False
    assert body["ai_provider"] == "Google Gemini"


def test_unknown_route_is_404(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "error": "Route not found",
        "message": "Path /api/nope not found",
    }


def test_health_reports_app_config():
    app = create_app(Settings(
        _env_file=None,
        APP_NAME="Custom API",
        APP_VERSION="9.9.9",
        GITHUB_TOKEN=None,
        GEMINI_API_KEY=None,
    ))

    with TestClient(app) as client:
        health = client.get("/api/health").json()
        root = client.get("/").json()

    assert health["service"] == "Custom API"
    assert health["version"] == "9.9.9"
    assert root["message"] == "Custom API is running!"
