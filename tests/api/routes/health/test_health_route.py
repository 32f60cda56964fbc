"""Testes do endpoint de health."""

from __future__ import annotations

import pytest

from api.routes.health.router import health_check
from config.settings import get_service_settings


@pytest.mark.asyncio
async def test_health_reports_service_and_environment() -> None:
    settings = get_service_settings()

    response = await health_check()

    assert response.status == "healthy"
    assert response.service == settings.service_name
    assert response.environment == settings.environment
    assert response.timestamp.endswith("+00:00")
