"""
Health check endpoints.

Provides endpoints for monitoring application health.
"""

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    success: bool
    message: str
    version: str
    timestamp: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(
        success=True,
        message="Server is running",
        version=get_settings().app_version,
        timestamp=datetime.now(timezone.utc),
    )
