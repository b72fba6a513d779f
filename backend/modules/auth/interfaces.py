"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import UserProfile


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        Args:
            token: JWT access token from Supabase Auth

        Returns:
            AuthenticatedUser with user ID and basic info

        Raises:
            AuthenticationError: If token is invalid or expired
        """
        ...

    async def is_admin(self, user_id: str) -> bool:
        """
        Check whether a user holds the admin role.

        Looked up on every call; the answer is never cached.

        Raises:
            ExternalServiceError: If the role check could not be performed
        """
        ...

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        """
        Get a user's club profile by their ID.

        Returns:
            UserProfile if found, None otherwise
        """
        ...
