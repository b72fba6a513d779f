"""
Fire-and-forget activity logger.

Entries go onto a bounded asyncio queue drained by a background task.
Failed inserts are reported to the operator log and dropped; nothing is
ever raised back to the caller. When the worker is not running (CLI,
tests, shutdown) entries are written inline with the same guarantees.
"""

import asyncio
import logging
import socket
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from shared.models import ClientContext

from .interfaces import IActivityLogger
from .models import ActivityLog, ActivityLogEntry, LogCategory
from .repository import ActivityLogRepository

logger = logging.getLogger(__name__)

_Pending = tuple[ActivityLogEntry, ClientContext]


class ActivityLogger(IActivityLogger):
    """
    Activity sink backed by the activity_logs table.

    enqueue() is safe to call from any thread, e.g. auth-state callbacks
    fired by the Supabase client.
    """

    def __init__(
        self,
        repository: ActivityLogRepository,
        max_pending: int = 1000,
        default_context: Optional[ClientContext] = None,
    ):
        self._repository = repository
        self._max_pending = max_pending
        self._default_context = default_context or ClientContext(hostname=socket.gethostname())
        self._queue: Optional[asyncio.Queue[_Pending]] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._worker: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._worker is not None

    async def start(self) -> None:
        """Start the background writer on the running loop."""
        if self._worker is not None:
            return
        self._loop = asyncio.get_running_loop()
        self._queue = asyncio.Queue(maxsize=self._max_pending)
        self._worker = asyncio.create_task(self._drain(self._queue), name="activity-logger")

    async def stop(self) -> None:
        """Flush pending entries and stop the background writer."""
        if self._worker is None:
            return
        await self.flush()
        self._worker.cancel()
        try:
            await self._worker
        except asyncio.CancelledError:
            pass
        self._worker = None
        self._queue = None
        self._loop = None

    def enqueue(self, entry: ActivityLogEntry, context: Optional[ClientContext] = None) -> bool:
        pending = (entry, context or self._default_context)

        if self._queue is None or self._loop is None:
            return self._write(*pending)

        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            current_loop = None

        if current_loop is self._loop:
            return self._put(pending)

        self._loop.call_soon_threadsafe(self._put, pending)
        return True

    def log(
        self,
        user_id: Optional[str],
        category: LogCategory,
        action: str,
        details: Optional[dict[str, Any]] = None,
        context: Optional[ClientContext] = None,
    ) -> bool:
        try:
            entry = ActivityLogEntry(
                user_id=user_id,
                category=category,
                action=action,
                details=details or {},
            )
        except PydanticValidationError as e:
            logger.error(f"Discarding malformed activity entry {category}/{action}: {e}")
            return False
        return self.enqueue(entry, context)

    async def flush(self) -> None:
        if self._queue is not None:
            await self._queue.join()

    async def list_activity(
        self,
        user_id: str,
        category: Optional[LogCategory] = None,
        limit: int = 50,
    ) -> list[ActivityLog]:
        try:
            return self._repository.list_for_user(user_id, category, limit)
        except Exception as e:
            logger.error(f"Error loading activity for user {user_id}: {e}")
            return []

    def _put(self, pending: _Pending) -> bool:
        if self._queue is None:
            # Stopped between enqueue() and this callback
            return self._write(*pending)
        try:
            self._queue.put_nowait(pending)
        except asyncio.QueueFull:
            entry = pending[0]
            logger.warning(
                f"Activity queue full, dropping {entry.category.value}/{entry.action}"
            )
            return False
        return True

    async def _drain(self, queue: asyncio.Queue[_Pending]) -> None:
        while True:
            entry, context = await queue.get()
            try:
                self._write(entry, context)
            finally:
                queue.task_done()

    def _write(self, entry: ActivityLogEntry, context: ClientContext) -> bool:
        try:
            self._repository.insert(entry, context)
        except Exception as e:
            logger.error(
                f"Error logging activity {entry.category.value}/{entry.action}: {e}"
            )
            return False
        return True
