"""
Activity log module.

Append-only audit trail of user and system actions.

Public API:
- IActivityLogger: Interface for recording activity
- ActivityLogEntry, ActivityLog, LogCategory: Models
"""

from .interfaces import IActivityLogger
from .models import ActivityLog, ActivityLogEntry, LogCategory

__all__ = [
    "IActivityLogger",
    "ActivityLog",
    "ActivityLogEntry",
    "LogCategory",
]
