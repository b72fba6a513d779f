"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This model is populated from JWT claims and made available
    to route handlers via dependency injection.
    """

    id: str = Field(..., description="User ID (UUID from Supabase)")
    email: EmailStr = Field(..., description="User's email address")
    email_verified: bool = Field(default=False, description="Whether email is verified")

    created_at: Optional[datetime] = Field(None, description="Account creation time")
    last_sign_in: Optional[datetime] = Field(None, description="Last sign-in time")

    role: str = Field(default="user", description="User role")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",  # Ignore extra fields from JWT
    }


class ClientContext(BaseModel):
    """
    Client-observed request metadata.

    Attached to activity log rows at insert time.
    """

    hostname: Optional[str] = Field(None, description="Originating hostname")
    user_agent: Optional[str] = Field(None, description="User-Agent header")

    model_config = {"frozen": True}
