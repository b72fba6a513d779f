"""
Error response models.

Standardized error responses for the API.
"""

from typing import Any, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    code: Optional[str] = None
    details: Optional[dict[str, Any]] = None


class ValidationErrorResponse(BaseModel):
    """Validation error response format."""

    error: str = "Validation Error"
    detail: list[dict]
