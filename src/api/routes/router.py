"""Router raiz do serviço.

    /health                           liveness
    /actions, /actions/{r}/{op}       catálogo e execução de ações
    /webhook/attentive                entregas de eventos da Attentive
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.attentive import actions_router, webhook_router
from api.routes.health.router import router as health_router

WEBHOOK_PREFIX = "/webhook/attentive"


def create_api_router() -> APIRouter:
    """APIRouter com todos os sub-routers montados."""
    api_router = APIRouter()
    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(actions_router, tags=["actions"])
    api_router.include_router(webhook_router, prefix=WEBHOOK_PREFIX, tags=["webhook"])
    return api_router
