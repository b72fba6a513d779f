"""
Response envelopes shared by the admin endpoints.
"""

from typing import Optional

from pydantic import BaseModel

from modules.admin.models import AdminStats, Pass
from modules.api_keys.models import ApiKeyStatus, ApiKeyView
from modules.notifications.models import Notification
from modules.purchases.models import Purchase


class MessageResponse(BaseModel):
    message: str


class SuccessResponse(BaseModel):
    success: bool = True


class ApiAuthResponse(BaseModel):
    success: bool = True
    user_id: str
    is_admin: bool


class StatsResponse(BaseModel):
    data: AdminStats


class PassListResponse(BaseModel):
    data: list[Pass]


class PassResponse(BaseModel):
    data: Pass


class ApiKeyIndexResponse(BaseModel):
    message: str
    endpoints: list[str]


class ApiKeyViewListResponse(BaseModel):
    data: list[ApiKeyView]


class ApiKeyViewResponse(BaseModel):
    data: ApiKeyView
    message: Optional[str] = None


class ApiKeyStatusSummary(BaseModel):
    id: str
    name: str
    status: ApiKeyStatus


class ApiKeyStatusResponse(BaseModel):
    message: str
    data: ApiKeyStatusSummary


class PurchaseListResponse(BaseModel):
    data: list[Purchase]


class PurchaseUpdateResponse(BaseModel):
    data: Purchase
    notification: Optional[Notification] = None
