"""
Activity log repository.

Encapsulates Supabase access for the activity_logs table.
"""

from typing import Any, Optional

from shared.models import ClientContext
from shared.repository import BaseRepository

from .models import ActivityLog, ActivityLogEntry, LogCategory


class ActivityLogRepository(BaseRepository[ActivityLog]):
    """Insert-and-read access to activity_logs. There is no update path."""

    def insert(self, entry: ActivityLogEntry, context: Optional[ClientContext] = None) -> None:
        """
        Insert one activity row.

        Args:
            entry: The activity to record.
            context: Client metadata stored alongside the row.
        """
        context = context or ClientContext()
        data: dict[str, Any] = {
            "user_id": entry.user_id,
            "category": entry.category.value,
            "action": entry.action,
            "details": entry.details,
            "ip_address": context.hostname,
            "user_agent": context.user_agent,
        }
        self._db.table("activity_logs").insert(data).execute()

    def list_for_user(
        self,
        user_id: str,
        category: Optional[LogCategory] = None,
        limit: int = 50,
    ) -> list[ActivityLog]:
        """
        List a user's activity, newest first.

        Args:
            user_id: The user's ID.
            category: Optional category filter.
            limit: Maximum number of rows.
        """
        query = self._db.table("activity_logs").select("*").eq("user_id", user_id)
        if category:
            query = query.eq("category", category.value)

        result = query.order("created_at", desc=True).limit(limit).execute()
        return [self._map_to_log(row) for row in result.data]

    def _map_to_log(self, data: dict[str, Any]) -> ActivityLog:
        return ActivityLog(
            id=str(data["id"]),
            user_id=data.get("user_id"),
            category=LogCategory(data["category"]),
            action=data["action"],
            details=data.get("details") or {},
            ip_address=data.get("ip_address"),
            user_agent=data.get("user_agent"),
            created_at=self._parse_datetime(data["created_at"]),
        )
