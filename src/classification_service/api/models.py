"""
API-specific response models for FastAPI endpoints.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = Field(
        default="ok",
        description="Liveness marker",
        examples=["ok"]
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Health check timestamp (UTC, ISO-8601)"
    )


class ErrorResponse(BaseModel):
    """Error body returned on every failure path."""

    error: str = Field(
        description="Error description",
        examples=['Field "text" is required and must be a string', "Rate limit exceeded"]
    )
    message: Optional[str] = Field(
        default=None,
        description="Internal detail, only present outside production"
    )
