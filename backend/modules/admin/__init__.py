"""
Admin module.

Identity provisioning and deletion, system statistics and listings.
"""

from .models import AdminStats, CreateAdminRequest, DeleteUserRequest, Pass, UserListResponse
from .exceptions import (
    AdminSetupDisabledError,
    InvalidSetupTokenError,
    PassNotFoundError,
    UserIdRequiredError,
)

__all__ = [
    "AdminStats",
    "CreateAdminRequest",
    "DeleteUserRequest",
    "Pass",
    "UserListResponse",
    "AdminSetupDisabledError",
    "InvalidSetupTokenError",
    "PassNotFoundError",
    "UserIdRequiredError",
]
