"""
Role and profile data access.

Admin privilege is derived on every check through the is_admin(user_id)
RPC; it is never cached here.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .models import MembershipStatus, UserProfile, UserRole


class RoleRepository(BaseRepository[UserRole]):
    """Access to the user_roles table and the is_admin RPC."""

    def is_admin(self, user_id: str) -> bool:
        """Ask the database whether the user holds the admin role."""
        result = self._db.rpc("is_admin", {"user_id": user_id}).execute()
        return bool(result.data)

    def assign_role(self, user_id: str, role: UserRole) -> None:
        """Insert a role row for the user."""
        self._db.table("user_roles").insert({"user_id": user_id, "role": role.value}).execute()


class ProfileRepository(BaseRepository[UserProfile]):
    """Access to the profiles table."""

    def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        result = self._db.table("profiles").select("*").eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    def list_page(self, limit: int, offset: int) -> tuple[list[UserProfile], int]:
        """
        Get one page of profiles.

        Returns:
            The page of profiles and the total row count.
        """
        result = (
            self._db.table("profiles")
            .select("*", count="exact")
            .order("created_at", desc=True)
            .range(offset, offset + limit - 1)
            .execute()
        )
        profiles = [self._map_to_profile(row) for row in result.data]
        return profiles, result.count or 0

    def count(self, has_pass: Optional[bool] = None) -> int:
        query = self._db.table("profiles").select("id", count="exact")
        if has_pass is not None:
            query = query.eq("has_pass", has_pass)
        return query.execute().count or 0

    def _map_to_profile(self, data: dict[str, Any]) -> UserProfile:
        status = data.get("status") or MembershipStatus.STANDARD.value
        return UserProfile(
            id=str(data["id"]),
            display_name=data.get("display_name"),
            phone_number=data.get("phone_number"),
            level=data.get("level") or 1,
            points=data.get("points") or 0,
            free_points=data.get("free_points") or 0,
            status=MembershipStatus(status),
            has_pass=bool(data.get("has_pass")),
            is_blocked=bool(data.get("is_blocked")),
            created_at=self._parse_datetime(data.get("created_at")),
        )
