"""Rotas Attentive: ações (dispatcher) e webhook do trigger."""

from api.routes.attentive.actions import router as actions_router
from api.routes.attentive.webhook import router as webhook_router

__all__ = ["actions_router", "webhook_router"]
