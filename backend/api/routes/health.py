"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings
from ..dependencies import get_container

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str
    assistant: str
    realtime: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check() -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports which backing services are configured. Status is "degraded"
    when the database is not.
    """
    settings = get_settings()

    database = "configured" if settings.supabase_url and settings.supabase_service_role_key else "not_configured"

    if settings.assistant_provider == "azure_openai":
        assistant_ready = bool(
            settings.azure_openai_endpoint
            and settings.azure_openai_api_key
            and settings.azure_openai_deployment
        )
    else:
        assistant_ready = bool(settings.openai_api_key)

    if not settings.enable_realtime:
        realtime = "disabled"
    elif get_container().realtime_listener.is_running:
        realtime = "connected"
    else:
        realtime = "disconnected"

    return ReadinessResponse(
        status="ready" if database == "configured" else "degraded",
        database=database,
        assistant="configured" if assistant_ready else "not_configured",
        realtime=realtime,
    )
