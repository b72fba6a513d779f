"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, AuthorizationError


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class AuthNotConfiguredError(AuthenticationError):
    """Raised when the JWT secret is not configured on the server."""

    def __init__(self):
        super().__init__("Server authentication not configured", code="AUTH_NOT_CONFIGURED")


class AdminRequiredError(AuthorizationError):
    """Raised when a valid caller lacks the admin role."""

    def __init__(self, user_id: str):
        super().__init__(
            "Unauthorized. Admin access required.",
            code="ADMIN_REQUIRED",
            details={"user_id": user_id},
        )
