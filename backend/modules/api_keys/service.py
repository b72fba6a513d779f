"""
API key service.

Validation is best-effort and never raises. Key management operations
raise module exceptions, which the API layer turns into error responses.
"""

import logging
import secrets
from typing import Optional

from modules.activity.interfaces import IActivityLogger
from modules.activity.models import LogCategory
from modules.auth.interfaces import IAuthService

from .interfaces import IApiKeyService
from .models import (
    ApiKey,
    ApiKeyStatus,
    ApiKeyValidation,
    CreateApiKeyRequest,
)
from .repository import ApiKeyRepository
from .exceptions import (
    ApiKeyAccessDeniedError,
    ApiKeyNameRequiredError,
    ApiKeyNotFoundError,
)

logger = logging.getLogger(__name__)

KEY_BYTES = 16  # 32 hex characters


def generate_key() -> str:
    """Generate a new random API key string."""
    return secrets.token_hex(KEY_BYTES)


class ApiKeyService(IApiKeyService):
    """API key validation and management backed by Supabase."""

    def __init__(
        self,
        repository: ApiKeyRepository,
        auth: IAuthService,
        activity: IActivityLogger,
    ):
        self._repository = repository
        self._auth = auth
        self._activity = activity

    async def validate_api_key(self, key: str) -> ApiKeyValidation:
        if not key:
            return ApiKeyValidation.invalid()

        try:
            record = self._repository.get_by_key(key)
        except Exception as e:
            logger.error(f"API key validation error: {e}")
            return ApiKeyValidation.invalid()

        if record is None:
            logger.info("API key validation failed: key not found")
            return ApiKeyValidation.invalid()

        status = record.status_at()
        if status is not ApiKeyStatus.ACTIVE:
            logger.info(f"API key {record.id} rejected: {status.value}")
            return ApiKeyValidation.invalid(status)

        is_admin = False
        try:
            is_admin = await self._auth.is_admin(record.user_id)
        except Exception as e:
            logger.error(f"Error checking admin status for key {record.id}: {e}")

        try:
            self._repository.touch_last_used(record.id)
        except Exception as e:
            logger.warning(f"Could not update last_used_at for key {record.id}: {e}")

        self._activity.log(
            record.user_id,
            LogCategory.ADMIN,
            "api_key_used",
            {"key_id": record.id, "key_name": record.name},
        )

        return ApiKeyValidation(
            is_valid=True,
            is_admin=is_admin,
            owner_id=record.user_id,
            key_id=record.id,
            status=status,
        )

    async def create_key(self, owner_id: str, request: CreateApiKeyRequest) -> ApiKey:
        name = request.name.strip() if request.name else ""
        if not name:
            raise ApiKeyNameRequiredError()

        api_key = self._repository.create(
            user_id=owner_id,
            name=name,
            key=generate_key(),
            description=request.description,
            expires_at=request.expires_at,
        )
        self._activity.log(
            owner_id,
            LogCategory.ADMIN,
            "api_key_created",
            {"key_id": api_key.id, "key_name": api_key.name},
        )
        return api_key

    async def list_keys(self, owner_id: str) -> list[ApiKey]:
        return self._repository.list_for_user(owner_id)

    async def get_key(self, owner_id: str, key_id: str) -> ApiKey:
        api_key = self._repository.get_by_id(key_id)
        if api_key is None or api_key.user_id != owner_id:
            raise ApiKeyNotFoundError(key_id)
        return api_key

    async def revoke_key(self, caller_id: str, key_id: str, caller_is_admin: bool = False) -> ApiKey:
        existing = self._repository.get_by_id(key_id)
        if existing is None:
            raise ApiKeyNotFoundError(key_id)

        if existing.user_id != caller_id and not caller_is_admin:
            raise ApiKeyAccessDeniedError(key_id, caller_id)

        revoked = self._repository.set_active(key_id, False)
        if revoked is None:
            raise ApiKeyNotFoundError(key_id)

        self._activity.log(
            caller_id,
            LogCategory.ADMIN,
            "api_key_revoked",
            {"key_id": key_id, "key_name": existing.name},
        )
        return revoked

    async def list_all_keys(
        self,
        limit: int = 50,
        offset: int = 0,
        search: Optional[str] = None,
        active: Optional[bool] = None,
    ) -> tuple[list[ApiKey], int]:
        return self._repository.list_all(limit=limit, offset=offset, search=search, active=active)

    async def get_any_key(self, key_id: str) -> ApiKey:
        api_key = self._repository.get_by_id(key_id, with_owner=True)
        if api_key is None:
            raise ApiKeyNotFoundError(key_id)
        return api_key

    async def set_key_active(self, key_id: str, active: bool) -> ApiKey:
        api_key = self._repository.set_active(key_id, active)
        if api_key is None:
            raise ApiKeyNotFoundError(key_id)
        return api_key
