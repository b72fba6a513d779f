"""
Admin module exceptions.
"""

from shared.exceptions import AuthorizationError, ClubError, NotFoundError, ValidationError


class AdminSetupDisabledError(ClubError):
    """Raised when bootstrap provisioning is attempted without ADMIN_SETUP_TOKEN configured."""

    def __init__(self):
        super().__init__("Admin setup is disabled", code="ADMIN_SETUP_DISABLED")


class InvalidSetupTokenError(AuthorizationError):
    """Raised when the provided setup token does not match."""

    def __init__(self):
        super().__init__("Invalid setup token", code="INVALID_SETUP_TOKEN")


class UserIdRequiredError(ValidationError):
    def __init__(self):
        super().__init__("User ID is required", code="USER_ID_REQUIRED")


class PassNotFoundError(NotFoundError):
    def __init__(self, pass_id: str):
        super().__init__(
            "Pass not found",
            code="PASS_NOT_FOUND",
            details={"pass_id": pass_id},
        )
