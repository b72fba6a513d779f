"""
Tests for health check endpoints.
"""

from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_activity_logger


def make_client(running: bool) -> TestClient:
    app = create_app()
    activity = MagicMock()
    activity.is_running = running
    app.dependency_overrides[get_activity_logger] = lambda: activity
    return TestClient(app)


class TestHealthEndpoints:
    def test_health_check(self):
        """Health endpoint should return healthy status."""
        response = make_client(True).get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"

    def test_readiness_degraded_without_supabase(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "")
        monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "")

        data = make_client(False).get("/api/ready").json()

        assert data["status"] == "degraded"
        assert data["database"] == "unconfigured"
        assert data["activity_logger"] == "inline"

    def test_readiness_ready(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://test.supabase.co")
        monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "service-key")

        data = make_client(True).get("/api/ready").json()

        assert data == {"status": "ready", "database": "configured", "activity_logger": "running"}
