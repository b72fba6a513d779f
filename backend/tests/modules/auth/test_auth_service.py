import pytest
from unittest.mock import patch, MagicMock
import jwt
from datetime import datetime, timedelta, timezone

from shared.exceptions import ExternalServiceError
from modules.auth.interfaces import IAuthService
from modules.auth.service import AuthService, get_auth_service, reset_auth_service
from modules.auth.exceptions import (
    AuthNotConfiguredError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)

from tests.conftest import create_mock_db, mock_result


class TestAuthService:
    @pytest.fixture
    def db(self):
        return create_mock_db()

    @pytest.fixture
    def service(self, db):
        """Create auth service with mocked dependencies."""
        with patch("modules.auth.service.get_settings") as mock_settings, \
             patch("modules.auth.service.get_supabase_client") as mock_client:
            mock_settings.return_value.supabase_jwt_secret = "test-secret"
            mock_client.return_value = db
            yield AuthService()

    @pytest.fixture
    def valid_token(self):
        """Create a valid JWT token."""
        payload = {
            "sub": "user-123",
            "email": "test@example.com",
            "email_confirmed_at": "2024-01-01T00:00:00Z",
            "exp": datetime.now(timezone.utc) + timedelta(hours=1),
            "iat": datetime.now(timezone.utc),
            "aud": "authenticated",
            "role": "authenticated",
        }
        return jwt.encode(payload, "test-secret", algorithm="HS256")

    @pytest.fixture
    def expired_token(self):
        """Create an expired JWT token."""
        payload = {
            "sub": "user-123",
            "email": "test@example.com",
            "exp": datetime.now(timezone.utc) - timedelta(hours=1),
            "iat": datetime.now(timezone.utc) - timedelta(hours=2),
            "aud": "authenticated",
            "role": "authenticated",
        }
        return jwt.encode(payload, "test-secret", algorithm="HS256")

    def test_implements_interface(self, service):
        assert isinstance(service, IAuthService)

    @pytest.mark.asyncio
    async def test_validate_valid_token(self, service, valid_token):
        """Should validate a valid token and return user."""
        user = await service.validate_token(valid_token)
        assert user.id == "user-123"
        assert user.email == "test@example.com"
        assert user.email_verified is True
        assert user.role == "user"

    @pytest.mark.asyncio
    async def test_validate_expired_token(self, service, expired_token):
        """Should raise ExpiredTokenError for expired token."""
        with pytest.raises(ExpiredTokenError):
            await service.validate_token(expired_token)

    @pytest.mark.asyncio
    async def test_validate_invalid_token(self, service):
        """Should raise InvalidTokenError for malformed token."""
        with pytest.raises(InvalidTokenError):
            await service.validate_token("not-a-valid-token")

    @pytest.mark.asyncio
    async def test_validate_missing_token(self, service):
        """Should raise MissingTokenError for empty token."""
        with pytest.raises(MissingTokenError):
            await service.validate_token("")

    @pytest.mark.asyncio
    async def test_validate_wrong_secret(self, service):
        """Should raise InvalidTokenError for token signed with wrong secret."""
        payload = {
            "sub": "user-123",
            "email": "test@example.com",
            "exp": datetime.now(timezone.utc) + timedelta(hours=1),
            "iat": datetime.now(timezone.utc),
            "aud": "authenticated",
        }
        wrong_secret_token = jwt.encode(payload, "wrong-secret", algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            await service.validate_token(wrong_secret_token)

    @pytest.mark.asyncio
    async def test_validate_wrong_audience(self, service):
        """Should raise InvalidTokenError for token with wrong audience."""
        payload = {
            "sub": "user-123",
            "email": "test@example.com",
            "exp": datetime.now(timezone.utc) + timedelta(hours=1),
            "iat": datetime.now(timezone.utc),
            "aud": "wrong-audience",
        }
        wrong_aud_token = jwt.encode(payload, "test-secret", algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            await service.validate_token(wrong_aud_token)

    @pytest.mark.asyncio
    async def test_validate_token_without_email(self, service):
        payload = {
            "sub": "user-123",
            "exp": datetime.now(timezone.utc) + timedelta(hours=1),
            "iat": datetime.now(timezone.utc),
            "aud": "authenticated",
        }
        token = jwt.encode(payload, "test-secret", algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            await service.validate_token(token)

    @pytest.mark.asyncio
    async def test_validate_without_secret(self, valid_token):
        with patch("modules.auth.service.get_settings") as mock_settings:
            mock_settings.return_value.supabase_jwt_secret = ""
            service = AuthService(db=MagicMock())
            with pytest.raises(AuthNotConfiguredError):
                await service.validate_token(valid_token)

    @pytest.mark.asyncio
    async def test_is_admin_calls_rpc(self, service, db):
        db.rpc.return_value.execute.return_value = mock_result(True)

        assert await service.is_admin("user-123") is True
        db.rpc.assert_called_once_with("is_admin", {"user_id": "user-123"})

    @pytest.mark.asyncio
    async def test_is_admin_false(self, service, db):
        db.rpc.return_value.execute.return_value = mock_result(False)

        assert await service.is_admin("user-123") is False

    @pytest.mark.asyncio
    async def test_is_admin_backend_error(self, service, db):
        db.rpc.return_value.execute.side_effect = Exception("rpc down")

        with pytest.raises(ExternalServiceError) as exc_info:
            await service.is_admin("user-123")
        assert exc_info.value.code == "ROLE_CHECK_FAILED"

    @pytest.mark.asyncio
    async def test_get_user_by_id(self, service, db):
        db.table.return_value.execute.return_value = mock_result([
            {"id": "user-123", "display_name": "Anna", "points": 40, "has_pass": True}
        ])

        profile = await service.get_user_by_id("user-123")

        assert profile.display_name == "Anna"
        assert profile.points == 40
        assert profile.has_pass is True
        db.table.assert_called_with("profiles")

    @pytest.mark.asyncio
    async def test_get_user_by_id_not_found(self, service):
        assert await service.get_user_by_id("missing") is None


class TestAuthServiceSingleton:
    @patch("modules.auth.service.get_settings")
    @patch("modules.auth.service.get_supabase_client")
    def test_singleton(self, mock_db, mock_settings):
        mock_db.return_value = MagicMock()
        assert get_auth_service() is get_auth_service()

    @patch("modules.auth.service.get_settings")
    @patch("modules.auth.service.get_supabase_client")
    def test_reset(self, mock_db, mock_settings):
        mock_db.return_value = MagicMock()
        first = get_auth_service()
        reset_auth_service()
        assert get_auth_service() is not first
