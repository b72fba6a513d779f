"""User-facing notifications (toast messages)."""

from .models import Notification, NotificationVariant
from .service import NotificationCenter

__all__ = ["Notification", "NotificationVariant", "NotificationCenter"]
