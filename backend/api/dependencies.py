"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

from fastapi import Request

from shared.models import ClientContext

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.activity.service import ActivityLogger
    from modules.admin.service import AdminService
    from modules.api_keys.interfaces import IApiKeyService
    from modules.auth.interfaces import IAuthService
    from modules.notifications.service import NotificationCenter
    from modules.purchases.interfaces import IPurchaseAdminService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._activity: "ActivityLogger | None" = None
        self._auth_service: "IAuthService | None" = None
        self._api_key_service: "IApiKeyService | None" = None
        self._admin_service: "AdminService | None" = None
        self._purchase_service: "IPurchaseAdminService | None" = None
        self._notifications: "NotificationCenter | None" = None

    @property
    def activity(self) -> "ActivityLogger":
        """Get the activity logger instance."""
        if self._activity is None:
            from modules.activity.repository import ActivityLogRepository
            from modules.activity.service import ActivityLogger
            from shared.config import get_settings
            from shared.database import get_supabase_client
            self._activity = ActivityLogger(
                ActivityLogRepository(get_supabase_client()),
                max_pending=get_settings().activity_queue_size,
            )
        return self._activity

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import get_auth_service
            self._auth_service = get_auth_service()
        return self._auth_service

    @property
    def api_keys(self) -> "IApiKeyService":
        """Get the API key service instance."""
        if self._api_key_service is None:
            from modules.api_keys.repository import ApiKeyRepository
            from modules.api_keys.service import ApiKeyService
            from shared.database import get_supabase_client
            self._api_key_service = ApiKeyService(
                repository=ApiKeyRepository(get_supabase_client()),
                auth=self.auth,
                activity=self.activity,
            )
        return self._api_key_service

    @property
    def admin(self) -> "AdminService":
        """Get the admin service instance."""
        if self._admin_service is None:
            from modules.admin.service import AdminService
            from shared.config import get_settings
            from shared.database import get_supabase_client
            self._admin_service = AdminService(
                db=get_supabase_client(),
                auth=self.auth,
                activity=self.activity,
                setup_token=get_settings().admin_setup_token,
            )
        return self._admin_service

    @property
    def notifications(self) -> "NotificationCenter":
        """Get the notification center instance."""
        if self._notifications is None:
            from modules.notifications.service import NotificationCenter
            self._notifications = NotificationCenter()
        return self._notifications

    @property
    def purchases(self) -> "IPurchaseAdminService":
        """Get the admin purchase service instance."""
        if self._purchase_service is None:
            from modules.purchases.repository import PurchaseRepository
            from modules.purchases.service import PurchaseAdminService
            from shared.database import get_supabase_client
            self._purchase_service = PurchaseAdminService(
                repository=PurchaseRepository(get_supabase_client()),
                activity=self.activity,
                notifications=self.notifications,
            )
        return self._purchase_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._activity = None
        self._auth_service = None
        self._api_key_service = None
        self._admin_service = None
        self._purchase_service = None
        self._notifications = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_activity_logger() -> "ActivityLogger":
    """FastAPI dependency for the activity logger."""
    return get_container().activity


def get_api_key_service() -> "IApiKeyService":
    """FastAPI dependency for API key service."""
    return get_container().api_keys


def get_admin_service() -> "AdminService":
    """FastAPI dependency for admin service."""
    return get_container().admin


def get_purchase_service() -> "IPurchaseAdminService":
    """FastAPI dependency for admin purchase service."""
    return get_container().purchases


def get_notifications() -> "NotificationCenter":
    """FastAPI dependency for the notification center."""
    return get_container().notifications


def get_client_context(request: Request) -> ClientContext:
    """Client metadata recorded with activity rows."""
    return ClientContext(
        hostname=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
