"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Any, Optional
from unittest.mock import MagicMock
import jwt  # PyJWT

from api.dependencies import reset_container
from modules.auth.service import reset_auth_service
from shared.config import get_settings
from shared.database import reset_client_cache


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    email_verified: bool = True,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        email_verified: Whether the email should be marked as verified

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "email_confirmed_at": now.isoformat() if email_verified else None,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


def mock_result(data: Any = None, count: Optional[int] = None) -> MagicMock:
    """A Supabase APIResponse stand-in."""
    result = MagicMock()
    result.data = data if data is not None else []
    result.count = count
    return result


def create_mock_db() -> MagicMock:
    """
    Create a Supabase client mock whose query builders chain.

    Every builder method returns the same query object, so tests set
    ``db.table.return_value.execute.return_value`` (or the rpc equivalent)
    and inspect calls on ``db.table.return_value``.
    """
    db = MagicMock()
    query = db.table.return_value
    for method in ("select", "insert", "update", "eq", "ilike", "order", "range", "limit"):
        getattr(query, method).return_value = query
    query.execute.return_value = mock_result()
    db.rpc.return_value.execute.return_value = mock_result(False)
    return db


def create_key_row(
    key_id: str = "key-1",
    key: str = "abc123",
    user_id: str = "test-user-123",
    active: bool = True,
    expires_at: Optional[str] = None,
    name: str = "Integration",
) -> dict:
    """Helper to create an api_keys row."""
    return {
        "id": key_id,
        "name": name,
        "description": None,
        "key": key,
        "user_id": user_id,
        "created_at": "2024-01-01T00:00:00Z",
        "last_used_at": None,
        "expires_at": expires_at,
        "active": active,
    }


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings, clients and services before and after each test."""
    get_settings.cache_clear()
    reset_client_cache()
    reset_auth_service()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_client_cache()
    reset_auth_service()
    reset_container()


@pytest.fixture
def mock_db() -> MagicMock:
    return create_mock_db()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
