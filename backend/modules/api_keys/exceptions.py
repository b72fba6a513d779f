"""
API keys module exceptions.
"""

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)


class MissingApiKeyError(AuthenticationError):
    """Raised when a request carries no x-api-key header."""

    def __init__(self):
        super().__init__("Missing API key", code="MISSING_API_KEY")


class InvalidApiKeyError(AuthorizationError):
    """Raised when a key is unknown, revoked or expired."""

    def __init__(self, message: str = "Invalid API key"):
        super().__init__(message, code="INVALID_API_KEY")


class ApiKeyNotFoundError(NotFoundError):
    """Raised when a key ID does not resolve to a visible key."""

    def __init__(self, key_id: str):
        super().__init__(
            "API key not found",
            code="API_KEY_NOT_FOUND",
            details={"key_id": key_id},
        )


class ApiKeyAccessDeniedError(AuthorizationError):
    """Raised when someone other than the owner or an admin touches a key."""

    def __init__(self, key_id: str, user_id: str):
        super().__init__(
            "Unauthorized",
            code="API_KEY_ACCESS_DENIED",
            details={"key_id": key_id, "user_id": user_id},
        )


class ApiKeyNameRequiredError(ValidationError):
    """Raised when creating a key without a name."""

    def __init__(self):
        super().__init__("API key name is required", code="API_KEY_NAME_REQUIRED")
