"""
API key data models.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ApiKeyStatus(str, Enum):
    """Derived key status (mirrors the api_key_status Postgres enum)."""

    ACTIVE = "active"
    REVOKED = "revoked"
    EXPIRED = "expired"


class ApiKey(BaseModel):
    """A row of the api_keys table."""

    id: str
    name: str
    description: Optional[str] = None
    key: str
    user_id: str = Field(..., description="Owner identity ID")
    user_name: Optional[str] = Field(None, description="Owner display name (admin listings)")
    created_at: datetime
    last_used_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    active: bool = True

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        if self.expires_at is None:
            return False
        now = now or datetime.now(timezone.utc)
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return expires_at < now

    def status_at(self, now: Optional[datetime] = None) -> ApiKeyStatus:
        if not self.active:
            return ApiKeyStatus.REVOKED
        if self.is_expired(now):
            return ApiKeyStatus.EXPIRED
        return ApiKeyStatus.ACTIVE

    @property
    def status(self) -> ApiKeyStatus:
        return self.status_at()


class ApiKeyView(BaseModel):
    """
    API representation of a key.

    The full key string is only returned once, in the creation response;
    listings carry a short preview instead.
    """

    id: str
    name: str
    description: Optional[str] = None
    key: Optional[str] = None
    key_preview: str
    user_id: str
    user_name: Optional[str] = None
    created_at: datetime
    last_used_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    status: ApiKeyStatus

    @classmethod
    def from_key(cls, api_key: ApiKey, reveal: bool = False) -> "ApiKeyView":
        return cls(
            id=api_key.id,
            name=api_key.name,
            description=api_key.description,
            key=api_key.key if reveal else None,
            key_preview=f"{api_key.key[:6]}…",
            user_id=api_key.user_id,
            user_name=api_key.user_name,
            created_at=api_key.created_at,
            last_used_at=api_key.last_used_at,
            expires_at=api_key.expires_at,
            status=api_key.status,
        )


class ApiKeyValidation(BaseModel):
    """Outcome of validating a key string."""

    is_valid: bool
    is_admin: bool = False
    owner_id: Optional[str] = None
    key_id: Optional[str] = None
    status: Optional[ApiKeyStatus] = Field(None, description="None when the key does not exist")

    model_config = {"frozen": True}

    @classmethod
    def invalid(cls, status: Optional[ApiKeyStatus] = None) -> "ApiKeyValidation":
        return cls(is_valid=False, status=status)


class ApiKeyAuthState(BaseModel):
    """What the API-key gate currently knows about the caller."""

    is_authenticated: bool = False
    is_admin: bool = False
    owner_id: Optional[str] = None
    is_loading: bool = True

    model_config = {"frozen": True}


class CreateApiKeyRequest(BaseModel):
    name: str = Field(..., description="Human-readable key name")
    description: Optional[str] = None
    expires_at: Optional[datetime] = None


class UpdateApiKeyRequest(BaseModel):
    active: bool


class ApiKeyListResponse(BaseModel):
    data: list[ApiKeyView]
    total: int
