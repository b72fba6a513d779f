"""
API keys module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import (
    ApiKey,
    ApiKeyValidation,
    CreateApiKeyRequest,
)


@runtime_checkable
class IApiKeyService(Protocol):
    """Contract for key validation and key management."""

    async def validate_api_key(self, key: str) -> ApiKeyValidation:
        """
        Validate a key string.

        A key is valid when its row exists, is active and has not expired.
        For valid keys, the owner's admin role is looked up as well.
        Never raises: every failure yields an invalid result.
        """
        ...

    async def create_key(self, owner_id: str, request: CreateApiKeyRequest) -> ApiKey:
        """Create a key for the owner. Raises ApiKeyNameRequiredError."""
        ...

    async def list_keys(self, owner_id: str) -> list[ApiKey]:
        ...

    async def get_key(self, owner_id: str, key_id: str) -> ApiKey:
        """Get one of the owner's keys. Raises ApiKeyNotFoundError."""
        ...

    async def revoke_key(self, caller_id: str, key_id: str, caller_is_admin: bool = False) -> ApiKey:
        """Revoke a key owned by the caller (or any key, for admins)."""
        ...

    async def list_all_keys(
        self,
        limit: int = 50,
        offset: int = 0,
        search: Optional[str] = None,
        active: Optional[bool] = None,
    ) -> tuple[list[ApiKey], int]:
        ...

    async def get_any_key(self, key_id: str) -> ApiKey:
        ...

    async def set_key_active(self, key_id: str, active: bool) -> ApiKey:
        ...


@runtime_checkable
class IKeyStore(Protocol):
    """Durable client-side storage holding one raw API key string."""

    def get(self) -> Optional[str]:
        ...

    def set(self, key: str) -> None:
        ...

    def clear(self) -> None:
        ...
