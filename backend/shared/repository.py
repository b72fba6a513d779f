"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

from datetime import datetime, timezone
from typing import Any, Optional, TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class PurchaseRepository(BaseRepository[Purchase]):
            def get_by_id(self, purchase_id: str) -> Optional[Purchase]:
                result = self._db.table("purchases").select("*").eq("id", purchase_id).execute()
                if not result.data:
                    return None
                return self._map_to_purchase(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    @staticmethod
    def _parse_datetime(value: Any) -> Optional[datetime]:
        """Parse an ISO timestamp from a Postgres row (None passes through)."""
        if value is None or isinstance(value, datetime):
            return value
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
