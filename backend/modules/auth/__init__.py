"""
Authentication module.

Handles JWT validation, role checks and the session auth gate.

Public API:
- IAuthService: Interface for auth operations
- SessionStateService: Current-session tracker for one application root
- Identity, SessionSnapshot, UserProfile, UserRole: Models
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import Identity, JWTPayload, SessionSnapshot, UserProfile, UserRole
from .session import SessionStateService
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    AuthNotConfiguredError,
    AdminRequiredError,
)

__all__ = [
    # Interface
    "IAuthService",
    "SessionStateService",
    # Models
    "Identity",
    "JWTPayload",
    "SessionSnapshot",
    "UserProfile",
    "UserRole",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "AuthNotConfiguredError",
    "AdminRequiredError",
]
