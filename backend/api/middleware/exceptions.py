"""
Exception handlers.

Every error response carries an ``error`` field, matching what the admin
clients expect from the serverless functions this API replaces.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from shared.exceptions import ClubError

logger = logging.getLogger(__name__)

# Function endpoints answer every failure, malformed bodies included, with 400
PLAIN_ERROR_PATHS = frozenset({"/create-admin", "/delete-user"})


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request body"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    return f"Invalid request body: {field}: {message}" if field else f"Invalid request body: {message}"


async def club_error_handler(request: Request, exc: ClubError) -> JSONResponse:
    """Convert ClubError subclasses into their status code and an error body."""
    logger.warning(f"{request.method} {request.url.path} failed: {exc.code} - {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(exc.to_dict()),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    if request.url.path in PLAIN_ERROR_PATHS:
        return JSONResponse(
            status_code=400,
            content={"error": _describe_validation_error(exc)},
        )
    return JSONResponse(
        status_code=422,
        content={"error": "Validation Error", "detail": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ClubError, club_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
