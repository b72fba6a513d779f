"""
Authentication service implementation.

Validates Supabase JWT tokens and answers role checks.
"""

from datetime import datetime, timezone
from typing import Optional
import jwt
from supabase import Client

from shared.config import get_settings
from shared.database import get_supabase_client
from shared.exceptions import ExternalServiceError
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import UserProfile, JWTPayload
from .repository import ProfileRepository, RoleRepository
from .exceptions import (
    AuthNotConfiguredError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Uses Supabase JWT tokens for authentication and the Supabase
    database for roles and profiles.
    """

    def __init__(self, db: Optional[Client] = None):
        self._settings = get_settings()
        self._db = db or get_supabase_client()
        self._roles = RoleRepository(self._db)
        self._profiles = ProfileRepository(self._db)

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        This implementation validates Supabase JWTs using the JWT secret.
        """
        if not token:
            raise MissingTokenError()

        if not self._settings.supabase_jwt_secret:
            raise AuthNotConfiguredError()

        try:
            payload = jwt.decode(
                token,
                self._settings.supabase_jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")

        jwt_payload = JWTPayload(**payload)
        if not jwt_payload.email:
            raise InvalidTokenError("Token has no email claim")

        return AuthenticatedUser(
            id=jwt_payload.sub,
            email=jwt_payload.email,
            email_verified=jwt_payload.email_confirmed_at is not None,
            last_sign_in=datetime.fromtimestamp(jwt_payload.iat, tz=timezone.utc),
            role=jwt_payload.role if jwt_payload.role != "authenticated" else "user",
        )

    async def is_admin(self, user_id: str) -> bool:
        try:
            return self._roles.is_admin(user_id)
        except Exception as e:
            raise ExternalServiceError(
                f"Error checking admin status: {e}",
                service="supabase",
                code="ROLE_CHECK_FAILED",
                details={"user_id": user_id},
            ) from e

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        return self._profiles.get_by_id(user_id)


# Module-level instance getter
_service_instance: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get the auth service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AuthService()
    return _service_instance


def reset_auth_service() -> None:
    """Reset the auth service singleton (for testing)."""
    global _service_instance
    _service_instance = None
