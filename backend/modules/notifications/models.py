"""
Notification models.

Notifications are the transient, user-facing messages shown after an
action succeeds or fails. Interface strings are in Russian.
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


class NotificationVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


class Notification(BaseModel):
    title: str
    description: str
    variant: NotificationVariant = NotificationVariant.DEFAULT
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}


# Interface strings
TITLE_SUCCESS = "Успех"
TITLE_ERROR = "Ошибка"

PURCHASE_STATUS_UPDATED = "Статус покупки обновлен"
PURCHASE_STATUS_UPDATE_FAILED = "Не удалось обновить статус покупки"

