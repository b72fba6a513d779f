"""
Administrative function endpoints.

POST /api-auth, /create-admin and /delete-user. Failures are reported as
``{"error": ...}`` bodies: 401 for api-auth, 400 for the other two.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Security, status

from shared.exceptions import ClubError
from shared.models import ClientContext
from modules.admin.models import CreateAdminRequest, DeleteUserRequest
from modules.admin.service import AdminService
from modules.api_keys.interfaces import IApiKeyService

from ..dependencies import get_admin_service, get_api_key_service, get_client_context
from ..middleware.api_key import api_key_header
from ..models import ApiAuthResponse, ErrorResponse, MessageResponse, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/api-auth",
    response_model=ApiAuthResponse,
    responses={401: {"model": ErrorResponse}},
)
async def api_auth(
    api_key: Optional[str] = Security(api_key_header),
    service: IApiKeyService = Depends(get_api_key_service),
) -> ApiAuthResponse:
    """
    Validate the x-api-key header.

    Returns the key owner and whether they are an admin.
    """
    if not api_key:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing API key")

    result = await service.validate_api_key(api_key)
    if not result.is_valid or result.owner_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid API key")

    return ApiAuthResponse(success=True, user_id=result.owner_id, is_admin=result.is_admin)


@router.post(
    "/create-admin",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}},
)
async def create_admin(
    request: CreateAdminRequest,
    setup_token: Optional[str] = Header(default=None, alias="x-setup-token"),
    service: AdminService = Depends(get_admin_service),
) -> MessageResponse:
    """
    Provision an administrator.

    Requires the x-setup-token header to match ADMIN_SETUP_TOKEN.
    """
    try:
        await service.provision_admin(setup_token, request)
    except ClubError as e:
        logger.warning(f"Admin provisioning failed: {e.message}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    return MessageResponse(message="Admin user created successfully")


@router.post(
    "/delete-user",
    response_model=SuccessResponse,
    responses={400: {"model": ErrorResponse}},
)
async def delete_user(
    body: Optional[DeleteUserRequest] = None,
    authorization: Optional[str] = Header(default=None),
    service: AdminService = Depends(get_admin_service),
    context: ClientContext = Depends(get_client_context),
) -> SuccessResponse:
    """
    Delete an identity. The caller must hold the admin role.
    """
    try:
        if not authorization:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No authorization header")
        token = authorization.removeprefix("Bearer ").strip()
        await service.delete_user(token, body.user_id if body else None, context)
    except ClubError as e:
        logger.warning(f"User deletion failed: {e.message}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    return SuccessResponse(success=True)
