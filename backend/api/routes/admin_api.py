"""
Admin API endpoints.

Read-only statistics and listings for integrations holding an admin
API key.
"""

from fastapi import APIRouter, Depends, Query

from modules.admin.models import UserListResponse
from modules.admin.service import AdminService

from ..dependencies import get_admin_service
from ..middleware.api_key import require_admin_api_key
from ..models import PassListResponse, PassResponse, StatsResponse

router = APIRouter(dependencies=[Depends(require_admin_api_key)])


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    service: AdminService = Depends(get_admin_service),
) -> StatsResponse:
    """Total users and users holding an active pass."""
    return StatsResponse(data=await service.get_stats())


@router.get("/users", response_model=UserListResponse)
async def list_users(
    limit: int = Query(default=10, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    service: AdminService = Depends(get_admin_service),
) -> UserListResponse:
    return await service.list_users(limit, offset)


@router.get("/passes", response_model=PassListResponse)
async def list_passes(
    service: AdminService = Depends(get_admin_service),
) -> PassListResponse:
    return PassListResponse(data=await service.list_passes())


@router.get("/passes/{pass_id}", response_model=PassResponse)
async def get_pass(
    pass_id: str,
    service: AdminService = Depends(get_admin_service),
) -> PassResponse:
    return PassResponse(data=await service.get_pass(pass_id))
