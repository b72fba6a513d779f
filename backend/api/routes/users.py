"""
User-related endpoints.

Provides the signed-in user's profile and activity history.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, EmailStr

from shared.models import AuthenticatedUser
from modules.activity.models import ActivityLog, LogCategory
from modules.activity.service import ActivityLogger
from modules.auth.interfaces import IAuthService
from modules.auth.models import UserProfile

from ..dependencies import get_activity_logger, get_auth_service
from ..middleware.auth import get_current_user

router = APIRouter()


class UserProfileResponse(BaseModel):
    """User profile response model."""

    id: str
    email: EmailStr
    email_verified: bool
    is_admin: bool
    profile: Optional[UserProfile] = None


class ActivityListResponse(BaseModel):
    data: list[ActivityLog]


@router.get("/me", response_model=UserProfileResponse)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    auth: IAuthService = Depends(get_auth_service),
) -> UserProfileResponse:
    """
    Get the current user's profile.

    Requires authentication.
    """
    return UserProfileResponse(
        id=user.id,
        email=user.email,
        email_verified=user.email_verified,
        is_admin=await auth.is_admin(user.id),
        profile=await auth.get_user_by_id(user.id),
    )


@router.get("/me/activity", response_model=ActivityListResponse)
async def get_current_user_activity(
    category: Optional[LogCategory] = Query(default=None),
    limit: int = Query(default=50, ge=1, le=200),
    user: AuthenticatedUser = Depends(get_current_user),
    activity: ActivityLogger = Depends(get_activity_logger),
) -> ActivityListResponse:
    """Most recent activity first."""
    return ActivityListResponse(data=await activity.list_activity(user.id, category, limit))
