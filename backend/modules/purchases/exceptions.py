"""
Purchases module exceptions.
"""

from shared.exceptions import ClubError


class PurchaseUpdateError(ClubError):
    """Raised when a purchase status update did not go through."""

    def __init__(self, purchase_id: str):
        super().__init__(
            "Не удалось обновить статус покупки",
            code="PURCHASE_UPDATE_FAILED",
            details={"purchase_id": purchase_id},
        )
