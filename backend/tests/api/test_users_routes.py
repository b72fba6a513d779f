"""
Tests for the signed-in user endpoints, using real JWT validation.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_activity_logger
from modules.activity.models import ActivityLog, LogCategory

from tests.conftest import TEST_JWT_SECRET, create_mock_db, create_test_token, mock_result


@pytest.fixture
def db():
    db = create_mock_db()
    db.table.return_value.execute.return_value = mock_result(
        [{"id": "test-user-123", "display_name": "Anna", "points": 15}]
    )
    return db


@pytest.fixture
def client(db):
    with patch("modules.auth.service.get_settings") as mock_settings, \
         patch("modules.auth.service.get_supabase_client") as mock_client:
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_client.return_value = db
        yield TestClient(create_app())


class TestCurrentUser:
    def test_missing_auth_header(self, client):
        response = client.get("/api/users/me")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_profile(self, client, auth_headers):
        response = client.get("/api/users/me", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "test-user-123"
        assert data["email"] == "test@example.com"
        assert data["is_admin"] is False
        assert data["profile"]["display_name"] == "Anna"

    def test_expired_token(self, client):
        token = create_test_token(expired=True)

        response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert "expired" in response.json()["error"].lower()

    def test_activity(self, client, auth_headers):
        activity = MagicMock()
        activity.list_activity = AsyncMock(return_value=[
            ActivityLog(
                id="log-1",
                user_id="test-user-123",
                category=LogCategory.AUTH,
                action="signed_out",
                created_at="2024-01-01T00:00:00Z",
            )
        ])
        client.app.dependency_overrides[get_activity_logger] = lambda: activity

        response = client.get("/api/users/me/activity?category=auth&limit=5", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"][0]["action"] == "signed_out"
        activity.list_activity.assert_awaited_once_with("test-user-123", LogCategory.AUTH, 5)
