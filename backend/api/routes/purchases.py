"""
Admin purchase endpoints.

Requires a signed-in admin (Bearer token).
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from shared.models import AuthenticatedUser, ClientContext
from modules.notifications.service import NotificationCenter
from modules.purchases.interfaces import IPurchaseAdminService
from modules.purchases.models import UpdatePurchaseStatusRequest

from ..dependencies import get_client_context, get_notifications, get_purchase_service
from ..middleware.auth import require_admin
from ..models import PurchaseListResponse, PurchaseUpdateResponse

router = APIRouter()


@router.get("", response_model=PurchaseListResponse)
async def load_purchases(
    user_id: Optional[str] = Query(default=None, description="Only this user's purchases"),
    admin: AuthenticatedUser = Depends(require_admin),
    service: IPurchaseAdminService = Depends(get_purchase_service),
) -> PurchaseListResponse:
    """Load purchases from the database, replacing the cached list."""
    return PurchaseListResponse(data=await service.load_purchases(user_id))


@router.get("/cached", response_model=PurchaseListResponse)
async def cached_purchases(
    admin: AuthenticatedUser = Depends(require_admin),
    service: IPurchaseAdminService = Depends(get_purchase_service),
) -> PurchaseListResponse:
    """The cached purchase list, including merged status updates."""
    return PurchaseListResponse(data=service.cached_purchases())


@router.patch("/{purchase_id}", response_model=PurchaseUpdateResponse)
async def update_purchase_status(
    purchase_id: str,
    request: UpdatePurchaseStatusRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IPurchaseAdminService = Depends(get_purchase_service),
    notifications: NotificationCenter = Depends(get_notifications),
    context: ClientContext = Depends(get_client_context),
) -> PurchaseUpdateResponse:
    """
    Change a purchase's payment status.

    Failures come back as a 400 with the user-facing message.
    """
    purchase = await service.update_purchase_status(
        admin.id,
        purchase_id,
        request.status,
        request.product_id,
        context,
    )
    return PurchaseUpdateResponse(data=purchase, notification=notifications.latest())
