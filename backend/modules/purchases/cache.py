"""
Local purchase list cache.

The cache is the single source of truth for the admin purchase list
between explicit loads: successful updates are merged in by id, and there
is no follow-up re-fetch.
"""

from typing import Optional

from .models import Purchase


class PurchaseCache:
    def __init__(self) -> None:
        self._items: list[Purchase] = []

    def replace(self, purchases: list[Purchase]) -> None:
        self._items = list(purchases)

    def merge(self, purchase: Purchase) -> bool:
        """
        Replace the cached entry with the same id, keeping list order.

        Returns:
            True if an entry was replaced. Unknown ids are not added.
        """
        for index, cached in enumerate(self._items):
            if cached.id == purchase.id:
                # The update response carries no product join
                if purchase.product_name is None and cached.product_name is not None:
                    purchase = purchase.model_copy(update={"product_name": cached.product_name})
                self._items[index] = purchase
                return True
        return False

    def get(self, purchase_id: str) -> Optional[Purchase]:
        for cached in self._items:
            if cached.id == purchase_id:
                return cached
        return None

    def items(self) -> list[Purchase]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)
