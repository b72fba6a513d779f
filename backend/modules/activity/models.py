"""
Activity log data models.

Activity log rows are append-only: the application inserts them and
never updates or deletes them.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class LogCategory(str, Enum):
    """Activity categories (mirrors the log_category Postgres enum)."""

    AUTH = "auth"
    ADMIN = "admin"
    POINTS = "points"
    REWARDS = "rewards"
    SHOP = "shop"
    PASSES = "passes"
    USER = "user"
    SYSTEM = "system"


class ActivityLogEntry(BaseModel):
    """An activity record waiting to be written."""

    user_id: Optional[str] = Field(..., description="Acting user ID")
    category: LogCategory = Field(..., description="Log category")
    action: str = Field(..., min_length=1, description="Action name, e.g. signed_out")
    details: dict[str, Any] = Field(default_factory=dict, description="Free-form payload")

    model_config = {"frozen": True}


class ActivityLog(BaseModel):
    """A stored activity log row."""

    id: str
    user_id: Optional[str] = None
    category: LogCategory
    action: str
    details: dict[str, Any] = Field(default_factory=dict)
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    created_at: datetime
