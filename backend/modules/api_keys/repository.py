"""
API key repository.

Encapsulates all Supabase queries against the api_keys table. Keys are
never deleted; revoking flips the active flag.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from shared.repository import BaseRepository

from .models import ApiKey

_ADMIN_SELECT = "*, profiles!api_keys_user_id_fkey(display_name)"


class ApiKeyRepository(BaseRepository[ApiKey]):
    """
    Repository for API key data access.

    Note: This repository does NOT perform ownership checks.
    The service layer is responsible for that.
    """

    def get_by_key(self, key: str) -> Optional[ApiKey]:
        """Look up a key row by its key string."""
        result = self._db.table("api_keys").select("*").eq("key", key).limit(1).execute()
        if not result.data:
            return None
        return self._map_to_key(result.data[0])

    def get_by_id(self, key_id: str, with_owner: bool = False) -> Optional[ApiKey]:
        columns = _ADMIN_SELECT if with_owner else "*"
        result = self._db.table("api_keys").select(columns).eq("id", key_id).limit(1).execute()
        if not result.data:
            return None
        return self._map_to_key(result.data[0])

    def list_for_user(self, user_id: str) -> list[ApiKey]:
        result = (
            self._db.table("api_keys")
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_key(row) for row in result.data]

    def list_all(
        self,
        limit: int = 50,
        offset: int = 0,
        search: Optional[str] = None,
        active: Optional[bool] = None,
    ) -> tuple[list[ApiKey], int]:
        """
        List keys across all owners.

        Returns:
            The page of keys and the total count matching the filters.
        """
        query = self._db.table("api_keys").select(_ADMIN_SELECT, count="exact")
        if search:
            query = query.ilike("name", f"%{search}%")
        if active is not None:
            query = query.eq("active", active)

        result = query.range(offset, offset + limit - 1).order("created_at", desc=True).execute()
        keys = [self._map_to_key(row) for row in result.data]
        return keys, result.count or 0

    def create(
        self,
        user_id: str,
        name: str,
        key: str,
        description: Optional[str] = None,
        expires_at: Optional[datetime] = None,
    ) -> ApiKey:
        data: dict[str, Any] = {
            "user_id": user_id,
            "name": name,
            "description": description,
            "key": key,
            "expires_at": expires_at.isoformat() if expires_at else None,
        }
        result = self._db.table("api_keys").insert(data).execute()
        return self._map_to_key(result.data[0])

    def set_active(self, key_id: str, active: bool) -> Optional[ApiKey]:
        """
        Set the active flag.

        Returns:
            The updated key, or None if no row matched.
        """
        result = self._db.table("api_keys").update({"active": active}).eq("id", key_id).execute()
        if not result.data:
            return None
        return self._map_to_key(result.data[0])

    def touch_last_used(self, key_id: str) -> None:
        self._db.table("api_keys").update(
            {"last_used_at": datetime.now(timezone.utc).isoformat()}
        ).eq("id", key_id).execute()

    def _map_to_key(self, data: dict[str, Any]) -> ApiKey:
        owner = data.get("profiles") or {}
        return ApiKey(
            id=str(data["id"]),
            name=data["name"],
            description=data.get("description"),
            key=data["key"],
            user_id=str(data["user_id"]),
            user_name=owner.get("display_name"),
            created_at=self._parse_datetime(data["created_at"]),
            last_used_at=self._parse_datetime(data.get("last_used_at")),
            expires_at=self._parse_datetime(data.get("expires_at")),
            active=bool(data.get("active", True)),
        )
