"""
Purchase repository.

Purchases are created by the checkout flow; the only write here is the
status update.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .models import Purchase, PurchaseStatus


class PurchaseRepository(BaseRepository[Purchase]):
    def list_purchases(self, user_id: Optional[str] = None) -> list[Purchase]:
        """List purchases with their product name, newest first."""
        query = self._db.table("purchases").select("*, product:products(name)")
        if user_id:
            query = query.eq("user_id", user_id)
        result = query.order("created_at", desc=True).execute()
        return [self._map_to_purchase(row) for row in result.data]

    def update_status(self, purchase_id: str, status: PurchaseStatus) -> Optional[Purchase]:
        """
        Set a purchase's status.

        Returns:
            The updated row, or None if nothing was updated.
        """
        result = (
            self._db.table("purchases")
            .update({"status": status.value})
            .eq("id", purchase_id)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_purchase(result.data[0])

    def _map_to_purchase(self, data: dict[str, Any]) -> Purchase:
        product = data.get("product") or {}
        return Purchase(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            product_id=data.get("product_id"),
            status=PurchaseStatus(data["status"]),
            product_name=product.get("name"),
            created_at=self._parse_datetime(data.get("created_at")),
        )
