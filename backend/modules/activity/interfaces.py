"""
Activity module interface.

Other modules record activity through IActivityLogger and never wait on
the write.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from shared.models import ClientContext

from .models import ActivityLog, ActivityLogEntry, LogCategory


@runtime_checkable
class IActivityLogger(Protocol):
    """
    Best-effort, at-most-once activity sink.

    Callers must not depend on an entry being visible before they proceed:
    there is no delivery or ordering guarantee relative to the business
    action that triggered it.
    """

    def enqueue(self, entry: ActivityLogEntry, context: Optional[ClientContext] = None) -> bool:
        """
        Hand an entry to the sink without blocking.

        Returns:
            False if the entry was dropped, True otherwise. Never raises.
        """
        ...

    def log(
        self,
        user_id: Optional[str],
        category: LogCategory,
        action: str,
        details: Optional[dict[str, Any]] = None,
        context: Optional[ClientContext] = None,
    ) -> bool:
        """Build an entry from its parts and enqueue it. Never raises."""
        ...

    async def flush(self) -> None:
        """Wait until every queued entry has been attempted."""
        ...

    async def list_activity(
        self,
        user_id: str,
        category: Optional[LogCategory] = None,
        limit: int = 50,
    ) -> list[ActivityLog]:
        """List a user's recent activity; empty on backend failure."""
        ...
