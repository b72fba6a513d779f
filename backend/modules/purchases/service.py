"""
Admin purchase service.

A successful status update is merged into the local cache, recorded as a
single shop activity entry and announced with a success notification.
A failed one leaves the cache untouched, records nothing, and produces an
error notification.
"""

import logging
from typing import Optional

from shared.models import ClientContext
from modules.activity.interfaces import IActivityLogger
from modules.activity.models import LogCategory
from modules.notifications.models import (
    PURCHASE_STATUS_UPDATE_FAILED,
    PURCHASE_STATUS_UPDATED,
)
from modules.notifications.service import NotificationCenter

from .cache import PurchaseCache
from .interfaces import IPurchaseAdminService
from .models import Purchase, PurchaseStatus
from .repository import PurchaseRepository
from .exceptions import PurchaseUpdateError

logger = logging.getLogger(__name__)


class PurchaseAdminService(IPurchaseAdminService):
    def __init__(
        self,
        repository: PurchaseRepository,
        activity: IActivityLogger,
        notifications: NotificationCenter,
        cache: Optional[PurchaseCache] = None,
    ):
        self._repository = repository
        self._activity = activity
        self._notifications = notifications
        self._cache = cache if cache is not None else PurchaseCache()

    async def load_purchases(self, user_id: Optional[str] = None) -> list[Purchase]:
        try:
            purchases = self._repository.list_purchases(user_id)
        except Exception as e:
            logger.error(f"Error loading purchases: {e}")
            return []
        self._cache.replace(purchases)
        return purchases

    def cached_purchases(self) -> list[Purchase]:
        return self._cache.items()

    async def update_purchase_status(
        self,
        actor_id: str,
        purchase_id: str,
        status: PurchaseStatus,
        product_id: Optional[str] = None,
        context: Optional[ClientContext] = None,
    ) -> Purchase:
        try:
            updated = self._repository.update_status(purchase_id, status)
        except Exception as e:
            logger.error(f"Error updating purchase status for {purchase_id}: {e}")
            self._notifications.error(PURCHASE_STATUS_UPDATE_FAILED)
            raise PurchaseUpdateError(purchase_id) from e

        if updated is None:
            logger.error(
                "Error updating purchase status: No data received from update operation"
            )
            self._notifications.error(PURCHASE_STATUS_UPDATE_FAILED)
            raise PurchaseUpdateError(purchase_id)

        self._cache.merge(updated)

        self._activity.log(
            actor_id,
            LogCategory.SHOP,
            "update_purchase_status",
            {
                "purchase_id": updated.id,
                "new_status": updated.status.value,
                "product_id": updated.product_id or product_id,
            },
            context,
        )

        self._notifications.success(PURCHASE_STATUS_UPDATED)
        return self._cache.get(updated.id) or updated
