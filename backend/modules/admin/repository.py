"""
Pass repository (read-only).
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .models import Pass, PassLevel


class PassRepository(BaseRepository[Pass]):
    def list_passes(self) -> list[Pass]:
        result = self._db.table("passes").select("*").order("created_at", desc=True).execute()
        return [self._map_to_pass(row) for row in result.data]

    def get_by_id(self, pass_id: str) -> Optional[Pass]:
        result = self._db.table("passes").select("*").eq("id", pass_id).limit(1).execute()
        if not result.data:
            return None
        return self._map_to_pass(result.data[0])

    def _map_to_pass(self, data: dict[str, Any]) -> Pass:
        return Pass(
            id=str(data["id"]),
            name=data["name"],
            description=data.get("description"),
            price=float(data.get("price") or 0),
            levels=[PassLevel(**level) for level in data.get("levels") or []],
            created_at=self._parse_datetime(data.get("created_at")),
        )
