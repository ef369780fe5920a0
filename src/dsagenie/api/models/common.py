"""
Common API models used across different endpoints.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class APIResponse(BaseModel):
    """Base response wrapper for all API endpoints."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(..., description="Whether the request was successful")


class APIError(APIResponse):
    """Standard error response format. Always sent with HTTP 500."""
    success: bool = False
    error: str = Field(..., description="Error message")


class HealthStatus(BaseModel):
    """Liveness response."""
    ok: bool = True


class ReadinessStatus(BaseModel):
    ready: bool
    missing: list[str] = Field(default_factory=list, description="Environment variables that still need a value")


def loose_text(value: Any) -> Optional[str]:
    """Read a scraped request field leniently: numbers become text, other non-strings are dropped."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None
