"""
In-process notification center.

Keeps a bounded list of recent notifications; older ones fall off.
"""

from collections import deque
from typing import Optional

from .models import (
    Notification,
    NotificationVariant,
    TITLE_ERROR,
    TITLE_SUCCESS,
)


class NotificationCenter:
    """Collects user-facing notifications, newest last."""

    def __init__(self, max_items: int = 50):
        self._items: deque[Notification] = deque(maxlen=max_items)

    def success(self, description: str) -> Notification:
        return self.push(Notification(title=TITLE_SUCCESS, description=description))

    def error(self, description: str) -> Notification:
        return self.push(
            Notification(
                title=TITLE_ERROR,
                description=description,
                variant=NotificationVariant.DESTRUCTIVE,
            )
        )

    def push(self, notification: Notification) -> Notification:
        self._items.append(notification)
        return notification

    def recent(self, limit: Optional[int] = None) -> list[Notification]:
        items = list(self._items)
        if limit is not None and limit >= 0:
            items = items[len(items) - limit:] if limit < len(items) else items
        return items

    def latest(self) -> Optional[Notification]:
        return self._items[-1] if self._items else None

    def clear(self) -> None:
        self._items.clear()
