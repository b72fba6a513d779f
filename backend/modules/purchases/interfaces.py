"""
Purchases module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import ClientContext

from .models import Purchase, PurchaseStatus


@runtime_checkable
class IPurchaseAdminService(Protocol):
    """Admin-side purchase list and status mutation."""

    async def load_purchases(self, user_id: Optional[str] = None) -> list[Purchase]:
        """Fetch purchases and replace the cached list. Empty on backend failure."""
        ...

    def cached_purchases(self) -> list[Purchase]:
        ...

    async def update_purchase_status(
        self,
        actor_id: str,
        purchase_id: str,
        status: PurchaseStatus,
        product_id: Optional[str] = None,
        context: Optional[ClientContext] = None,
    ) -> Purchase:
        """
        Update a purchase's status.

        Raises:
            PurchaseUpdateError: If the update failed. Not retried.
        """
        ...
