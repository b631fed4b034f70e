"""Health check API endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from assetlens.core.config import settings
from assetlens.core.database import db_client

router = APIRouter()


class HealthCheckResponse(BaseModel):
    status: str = Field(..., description="Health check status")
    version: str = Field(..., description="Running application version")
    service: str = Field(..., description="Service name")
    storage: str = Field(..., description="Active storage backend")


@router.get(
    "",
    response_model=HealthCheckResponse,
    tags=["Health"],
    summary="Health check endpoint",
    description="Check if the service is running and healthy",
    operation_id="get_service_health_status",
)
async def health_check() -> HealthCheckResponse:
    """Health check endpoint."""
    healthy = True
    if settings.storage_backend == "sql":
        db_health = await db_client.health_check()
        healthy = db_health["status"] == "healthy"

    return HealthCheckResponse(
        status="healthy" if healthy else "degraded",
        version=settings.app_version,
        service=settings.app_name,
        storage=settings.storage_backend,
    )
