"""
JWT Authentication middleware.

Validates Supabase JWT tokens through the auth service and gates
admin-only routes on the is_admin role check.
"""

from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser
from modules.auth.interfaces import IAuthService

from ..dependencies import get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise AuthError("Missing authorization header")

    try:
        return await auth.validate_token(credentials.credentials)
    except AuthenticationError as e:
        raise AuthError(e.message)


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> Optional[AuthenticatedUser]:
    """
    Dependency that optionally extracts user if authenticated.
    """
    if credentials is None:
        return None

    try:
        return await auth.validate_token(credentials.credentials)
    except AuthenticationError:
        return None


async def require_admin(
    user: AuthenticatedUser = Depends(get_current_user),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires an authenticated admin.

    The role is looked up on every request.
    """
    if not await auth.is_admin(user.id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Unauthorized. Admin access required.",
        )
    return user


# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)
OptionalAuth = Depends(get_optional_user)
RequireAdmin = Depends(require_admin)
