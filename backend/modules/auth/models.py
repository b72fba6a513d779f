"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field


class JWTPayload(BaseModel):
    """
    Decoded JWT token payload from Supabase.

    This matches the structure of Supabase Auth JWTs.
    """

    sub: str = Field(..., description="Subject (user ID)")
    email: Optional[str] = Field(None, description="User's email")
    email_confirmed_at: Optional[str] = Field(None, description="Email confirmation time")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")
    aud: str = Field(default="authenticated", description="Audience")
    role: str = Field(default="authenticated", description="User role")

    # Supabase-specific claims
    app_metadata: dict = Field(default_factory=dict)
    user_metadata: dict = Field(default_factory=dict)


class UserRole(str, Enum):
    """Roles stored in the user_roles table."""

    ADMIN = "admin"
    USER = "user"


class MembershipStatus(str, Enum):
    STANDARD = "Standard"
    PREMIUM = "Premium"
    VIP = "VIP"


class UserProfile(BaseModel):
    """
    Club profile mirrored in the profiles table, keyed by identity ID.
    """

    id: str = Field(..., description="User ID (UUID)")
    display_name: Optional[str] = Field(None, description="Display name")
    phone_number: Optional[str] = Field(None, description="Phone number")
    level: int = Field(default=1, description="Pass level")
    points: int = Field(default=0, description="Points balance")
    free_points: int = Field(default=0, description="Points not yet spent on the pass")
    status: MembershipStatus = Field(default=MembershipStatus.STANDARD)
    has_pass: bool = Field(default=False, description="Whether the user holds a club pass")
    is_blocked: bool = Field(default=False)
    created_at: Optional[datetime] = None


class Identity(BaseModel):
    """
    The signed-in identity as reported by the auth provider's session.
    """

    id: str
    email: Optional[str] = None
    phone: Optional[str] = None
    display_name: Optional[str] = None
    email_verified: bool = False

    model_config = {"frozen": True}

    @classmethod
    def from_session(cls, session: Any) -> Optional["Identity"]:
        """Build an identity from a Supabase session (None when signed out)."""
        user = getattr(session, "user", None) if session is not None else None
        if user is None:
            return None
        metadata = getattr(user, "user_metadata", None) or {}
        return cls(
            id=str(user.id),
            email=getattr(user, "email", None),
            phone=getattr(user, "phone", None) or None,
            display_name=metadata.get("name") or metadata.get("display_name"),
            email_verified=getattr(user, "email_confirmed_at", None) is not None,
        )


class SessionSnapshot(BaseModel):
    """Current session state: who is signed in, and whether that is known yet."""

    identity: Optional[Identity] = None
    is_loading: bool = True

    model_config = {"frozen": True}
