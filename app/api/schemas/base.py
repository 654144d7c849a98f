"""
Base schemas and common components used across all API schemas.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Error type or code")
    detail: str = Field(..., description="Human-readable error description")
    timestamp: datetime = Field(default_factory=_utcnow)


class SuccessResponse(BaseModel):
    """Returned by delete operations."""

    success: bool = True


class HealthResponse(BaseModel):
    status: Literal["ok", "degraded"]
    timestamp: datetime
    database: Literal["ok", "unavailable"]
