"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.logging import configure_logging

from .dependencies import get_container
from .middleware.exceptions import register_exception_handlers
from .routes import admin_api, api_keys, functions, health, purchases, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Starts the activity writer and flushes it on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")

    activity = get_container().activity
    await activity.start()
    yield
    await activity.stop()
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Loyalty club administration API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(functions.router, tags=["functions"])
    app.include_router(admin_api.router, prefix="/admin-api", tags=["admin"])
    app.include_router(api_keys.router, prefix="/api-keys-api", tags=["api-keys"])
    app.include_router(purchases.router, prefix="/admin/purchases", tags=["purchases"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])

    return app


# Application instance for uvicorn
app = create_app()
