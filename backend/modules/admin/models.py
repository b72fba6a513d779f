"""
Admin module data models.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from modules.auth.models import UserProfile


class PassLevel(BaseModel):
    level: int
    points_required: int
    reward: dict[str, Any] = Field(default_factory=dict)


class Pass(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    price: float = 0
    levels: list[PassLevel] = Field(default_factory=list)
    created_at: Optional[datetime] = None


class AdminStats(BaseModel):
    total_users: int
    active_passes: int


class UserListResponse(BaseModel):
    data: list[UserProfile]
    total: int


class CreateAdminRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=12)
    display_name: str = "Administrator"


class DeleteUserRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(None, alias="userId")
