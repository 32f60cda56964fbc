"""Registro do webhook do trigger no startup/shutdown do serviço.

Com ATTENTIVE_WEBHOOK_URL definido, o serviço se inscreve nos eventos
configurados ao subir e remove a inscrição ao descer.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import MutableMapping

    from app.use_cases.attentive import WebhookSubscriptionManager
    from config.settings import AttentiveSettings

logger = logging.getLogger(__name__)


async def register_trigger_webhook(
    manager: WebhookSubscriptionManager,
    settings: AttentiveSettings,
    state: MutableMapping[str, Any],
) -> bool:
    """Garante o webhook do trigger registrado na Attentive.

    Returns:
        False se não houver URL configurada; True se já existia ou foi criado.

    Raises:
        ValidationError: Evento fora do vocabulário em webhook_events.
        ApiError: Se o registro falhar.
    """
    if not settings.webhook_url:
        logger.info("trigger_webhook_disabled")
        return False

    if await manager.check_exists(state, settings.webhook_url):
        logger.info("trigger_webhook_already_registered")
        return True

    await manager.create(
        state,
        settings.webhook_url,
        settings.webhook_events,
        secret=settings.webhook_secret or None,
    )
    return True


async def unregister_trigger_webhook(
    manager: WebhookSubscriptionManager,
    state: MutableMapping[str, Any],
) -> None:
    await manager.delete(state)
    logger.info("trigger_webhook_unregistered")
