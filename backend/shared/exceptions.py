"""
Base exception classes for the Club Pass backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class ClubError(Exception):
    """
    Base exception for all Club Pass errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 400

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.message,
            "code": self.code,
            "details": self.details,
        }


class NotFoundError(ClubError):
    """Resource not found."""

    status_code = 404


class ValidationError(ClubError):
    """Input validation failed."""

    status_code = 400


class AuthenticationError(ClubError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(ClubError):
    """Authorization failed (insufficient permissions)."""

    status_code = 403


class ExternalServiceError(ClubError):
    """Error communicating with an external service."""

    status_code = 502

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
