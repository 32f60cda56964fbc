"""Composition root do conector: logging, validação de settings e singletons.

Uso:
    from app.bootstrap import initialize_app, get_action_dispatcher

    initialize_app()
    records = await get_action_dispatcher().run(batch)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_attentive_settings, get_service_settings

if TYPE_CHECKING:
    from app.coordinators.attentive import ActionDispatcher
    from app.use_cases.attentive import WebhookSubscriptionManager

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura o logging JSON do processo. Chamar uma vez no boot."""
    service = get_service_settings()
    configure_logging(
        level=service.effective_log_level,
        service_name=service.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Confere settings de serviço e da Attentive no startup.

    Raises:
        RuntimeError: Em staging/production, se houver qualquer erro.
            Em development os erros são apenas logados.
    """
    service = get_service_settings()
    errors = [f"service: {error}" for error in service.validate()]
    errors += [f"attentive: {error}" for error in get_attentive_settings().validate()]

    if not errors:
        logger.info("settings_validated", extra={"environment": service.environment})
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "environment": service.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if service.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {service.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_action_dispatcher() -> ActionDispatcher:
    """Dispatcher com o registry completo de resources (singleton)."""
    from app.bootstrap.attentive_factory import create_action_dispatcher

    return create_action_dispatcher()


@lru_cache(maxsize=1)
def get_webhook_subscription_manager() -> WebhookSubscriptionManager:
    from app.bootstrap.attentive_factory import create_webhook_subscription_manager

    return create_webhook_subscription_manager()
