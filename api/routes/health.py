"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import asyncio
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.config import Settings, get_settings
from shared.database import is_database_reachable

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str
    media: str
    sms: str


def check_database() -> str:
    return "connected" if is_database_reachable() else "unavailable"


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=settings.app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(settings: Settings = Depends(get_settings)) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports the database connection and whether the media CDN and SMS
    gateway are configured.
    """
    database = await asyncio.to_thread(check_database)
    return ReadinessResponse(
        status="ready" if database == "connected" else "degraded",
        database=database,
        media="configured" if settings.cloudinary_cloud_name else "not_configured",
        sms="configured" if settings.twilio_verify_service_sid else "not_configured",
    )
