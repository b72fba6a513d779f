"""
API key management endpoints.

Owners manage their own keys with any valid key; the /admin routes need
an admin-owned key.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from modules.api_keys.interfaces import IApiKeyService
from modules.api_keys.models import (
    ApiKeyListResponse,
    ApiKeyValidation,
    ApiKeyView,
    CreateApiKeyRequest,
    UpdateApiKeyRequest,
)

from ..dependencies import get_api_key_service
from ..middleware.api_key import require_admin_api_key, require_api_key
from ..models import (
    ApiKeyIndexResponse,
    ApiKeyStatusResponse,
    ApiKeyStatusSummary,
    ApiKeyViewListResponse,
    ApiKeyViewResponse,
    MessageResponse,
)

router = APIRouter()


@router.get("", response_model=ApiKeyIndexResponse)
async def index(
    caller: ApiKeyValidation = Depends(require_api_key),
) -> ApiKeyIndexResponse:
    return ApiKeyIndexResponse(
        message="API Keys API",
        endpoints=[
            "/keys - GET: List your keys",
            "/keys/:id - GET: Get key details",
            "/keys - POST: Create new key",
            "/keys/:id - DELETE: Revoke key",
            "/admin/keys - GET: List all keys (admin only)",
            "/admin/keys/:id - GET: Get any key (admin only)",
            "/admin/keys/:id - PUT: Activate or revoke any key (admin only)",
        ],
    )


@router.get("/keys", response_model=ApiKeyViewListResponse)
async def list_keys(
    caller: ApiKeyValidation = Depends(require_api_key),
    service: IApiKeyService = Depends(get_api_key_service),
) -> ApiKeyViewListResponse:
    keys = await service.list_keys(caller.owner_id)
    return ApiKeyViewListResponse(data=[ApiKeyView.from_key(k) for k in keys])


@router.get("/keys/{key_id}", response_model=ApiKeyViewResponse)
async def get_key(
    key_id: str,
    caller: ApiKeyValidation = Depends(require_api_key),
    service: IApiKeyService = Depends(get_api_key_service),
) -> ApiKeyViewResponse:
    api_key = await service.get_key(caller.owner_id, key_id)
    return ApiKeyViewResponse(data=ApiKeyView.from_key(api_key))


@router.post("/keys", response_model=ApiKeyViewResponse, status_code=201)
async def create_key(
    request: CreateApiKeyRequest,
    caller: ApiKeyValidation = Depends(require_api_key),
    service: IApiKeyService = Depends(get_api_key_service),
) -> ApiKeyViewResponse:
    """
    Create a key for the caller.

    The key string is only ever returned in this response.
    """
    api_key = await service.create_key(caller.owner_id, request)
    return ApiKeyViewResponse(
        data=ApiKeyView.from_key(api_key, reveal=True),
        message="API key created successfully",
    )


@router.delete("/keys/{key_id}", response_model=MessageResponse)
async def revoke_key(
    key_id: str,
    caller: ApiKeyValidation = Depends(require_api_key),
    service: IApiKeyService = Depends(get_api_key_service),
) -> MessageResponse:
    await service.revoke_key(caller.owner_id, key_id, caller_is_admin=caller.is_admin)
    return MessageResponse(message="API key revoked successfully")


@router.get("/admin/keys", response_model=ApiKeyListResponse)
async def list_all_keys(
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    search: Optional[str] = Query(default=None),
    active: Optional[bool] = Query(default=None),
    caller: ApiKeyValidation = Depends(require_admin_api_key),
    service: IApiKeyService = Depends(get_api_key_service),
) -> ApiKeyListResponse:
    keys, total = await service.list_all_keys(limit=limit, offset=offset, search=search, active=active)
    return ApiKeyListResponse(data=[ApiKeyView.from_key(k) for k in keys], total=total)


@router.get("/admin/keys/{key_id}", response_model=ApiKeyViewResponse)
async def get_any_key(
    key_id: str,
    caller: ApiKeyValidation = Depends(require_admin_api_key),
    service: IApiKeyService = Depends(get_api_key_service),
) -> ApiKeyViewResponse:
    api_key = await service.get_any_key(key_id)
    return ApiKeyViewResponse(data=ApiKeyView.from_key(api_key))


@router.put("/admin/keys/{key_id}", response_model=ApiKeyStatusResponse)
async def set_key_active(
    key_id: str,
    request: UpdateApiKeyRequest,
    caller: ApiKeyValidation = Depends(require_admin_api_key),
    service: IApiKeyService = Depends(get_api_key_service),
) -> ApiKeyStatusResponse:
    api_key = await service.set_key_active(key_id, request.active)
    verb = "activated" if request.active else "revoked"
    return ApiKeyStatusResponse(
        message=f"API key {verb} successfully",
        data=ApiKeyStatusSummary(id=api_key.id, name=api_key.name, status=api_key.status),
    )
