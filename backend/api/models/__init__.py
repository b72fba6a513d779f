"""API models package."""

from .errors import ErrorResponse, ValidationErrorResponse
from .responses import (
    ApiAuthResponse,
    ApiKeyIndexResponse,
    ApiKeyStatusResponse,
    ApiKeyStatusSummary,
    ApiKeyViewListResponse,
    ApiKeyViewResponse,
    MessageResponse,
    PassListResponse,
    PassResponse,
    PurchaseListResponse,
    PurchaseUpdateResponse,
    StatsResponse,
    SuccessResponse,
)

__all__ = [
    "ErrorResponse",
    "ValidationErrorResponse",
    "ApiAuthResponse",
    "ApiKeyIndexResponse",
    "ApiKeyStatusResponse",
    "ApiKeyStatusSummary",
    "ApiKeyViewListResponse",
    "ApiKeyViewResponse",
    "MessageResponse",
    "PassListResponse",
    "PassResponse",
    "PurchaseListResponse",
    "PurchaseUpdateResponse",
    "StatsResponse",
    "SuccessResponse",
]
