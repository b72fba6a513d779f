"""
Purchase data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class PurchaseStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    APPROVED = "approved"
    REJECTED = "rejected"


class Purchase(BaseModel):
    id: str
    user_id: str
    product_id: Optional[str] = None
    status: PurchaseStatus
    product_name: Optional[str] = Field(None, description="Joined from products.name")
    created_at: Optional[datetime] = None


class UpdatePurchaseStatusRequest(BaseModel):
    status: PurchaseStatus
    product_id: Optional[str] = None
