"""GET /health: liveness do conector."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel

from config.settings import SERVICE_VERSION, get_service_settings

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    service: str
    environment: str
    timestamp: str
    version: str = SERVICE_VERSION


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Responde enquanto o processo estiver de pé; não chama a Attentive."""
    service = get_service_settings()
    return HealthResponse(
        status="healthy",
        service=service.service_name,
        environment=service.environment,
        timestamp=datetime.now(UTC).isoformat(),
    )
