"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.config import get_settings
from modules.activity.service import ActivityLogger

from ..dependencies import get_activity_logger

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str
    activity_logger: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    activity: ActivityLogger = Depends(get_activity_logger),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports whether Supabase is configured and the activity writer is running.
    """
    settings = get_settings()
    configured = bool(settings.supabase_url and settings.supabase_service_role_key)
    running = activity.is_running
    return ReadinessResponse(
        status="ready" if configured and running else "degraded",
        database="configured" if configured else "unconfigured",
        activity_logger="running" if running else "inline",
    )
