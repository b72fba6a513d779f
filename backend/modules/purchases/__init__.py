"""
Purchases module.

Admin view of purchases and the payment-status mutation.
"""

from .interfaces import IPurchaseAdminService
from .cache import PurchaseCache
from .models import Purchase, PurchaseStatus, UpdatePurchaseStatusRequest
from .exceptions import PurchaseUpdateError

__all__ = [
    "IPurchaseAdminService",
    "PurchaseCache",
    "Purchase",
    "PurchaseStatus",
    "UpdatePurchaseStatusRequest",
    "PurchaseUpdateError",
]
