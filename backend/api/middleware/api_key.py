"""
API key authentication middleware.

Reads the x-api-key header and validates it per request. A missing key is
a 401; an unknown, revoked or expired key is a 403, as is a valid key
whose owner is not an admin on admin-only routes.
"""

from typing import Optional
from fastapi import Depends, Security
from fastapi.security import APIKeyHeader

from modules.api_keys.exceptions import InvalidApiKeyError, MissingApiKeyError
from modules.api_keys.interfaces import IApiKeyService
from modules.api_keys.models import ApiKeyValidation
from modules.auth.exceptions import AdminRequiredError

from ..dependencies import get_api_key_service

api_key_header = APIKeyHeader(name="x-api-key", auto_error=False)


async def require_api_key(
    api_key: Optional[str] = Security(api_key_header),
    service: IApiKeyService = Depends(get_api_key_service),
) -> ApiKeyValidation:
    """Dependency that requires a valid API key."""
    if not api_key:
        raise MissingApiKeyError()

    validation = await service.validate_api_key(api_key)
    if not validation.is_valid:
        raise InvalidApiKeyError()
    return validation


async def require_admin_api_key(
    validation: ApiKeyValidation = Depends(require_api_key),
) -> ApiKeyValidation:
    """Dependency that requires a valid API key owned by an admin."""
    if not validation.is_admin:
        raise AdminRequiredError(validation.owner_id or "")
    return validation
