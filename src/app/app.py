"""Aplicação ASGI do conector Attentive.

    uvicorn app.app:app --host 0.0.0.0 --port 8080

ou, em desenvolvimento, `attentive-connector` (ver main()).
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import (
    get_webhook_subscription_manager,
    initialize_app,
    validate_runtime_settings,
)
from app.bootstrap.trigger import register_trigger_webhook, unregister_trigger_webhook
from config.logging import get_logger
from config.settings import SERVICE_VERSION, get_attentive_settings, get_service_settings
from utils.errors import AttentiveError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Logging JSON antes dos loggers dos módulos importados abaixo emitirem
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Ciclo de vida do serviço.

    Startup:
    - Valida settings (em staging/production falha o boot)
    - Registra o webhook do trigger quando ATTENTIVE_WEBHOOK_URL existe

    Shutdown:
    - Remove o webhook registrado no startup
    """
    service = get_service_settings()
    validate_runtime_settings()

    app.state.trigger_webhook = {}
    app.state.trigger_registered = False
    manager = None
    attentive = get_attentive_settings()
    if attentive.webhook_url:
        manager = get_webhook_subscription_manager()
        try:
            app.state.trigger_registered = await register_trigger_webhook(
                manager, attentive, app.state.trigger_webhook
            )
        except AttentiveError as exc:
            logger.warning(
                "trigger_webhook_not_ready",
                extra={"error_type": type(exc).__name__, "detail": str(exc)},
            )
            if service.is_strict:
                raise

    logger.info("app_started", extra={"service": service.service_name})
    yield

    if manager is not None and app.state.trigger_registered:
        await unregister_trigger_webhook(manager, app.state.trigger_webhook)
    logger.info("app_stopped", extra={"service": service.service_name})


def create_app() -> FastAPI:
    """FastAPI com ações, webhook e health. Docs desligadas em produção."""
    service = get_service_settings()
    docs_enabled = not service.is_production

    fastapi_app = FastAPI(
        title="Attentive Connector",
        description="Ações resource + operation sobre a API REST da Attentive e webhook de eventos",
        version=SERVICE_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    fastapi_app.include_router(create_api_router())
    return fastapi_app


app = create_app()


def main() -> None:
    """Sobe o uvicorn com host/porta das settings (reload quando DEBUG)."""
    import uvicorn

    service = get_service_settings()
    uvicorn.run("app.app:app", host=service.host, port=service.port, reload=service.debug)


if __name__ == "__main__":
    main()
