"""Factory de wiring para o conector Attentive (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.attentive import create_attentive_http_client
from app.coordinators.attentive import ActionDispatcher
from app.use_cases.attentive import RESOURCE_HANDLER_CLASSES, WebhookSubscriptionManager

if TYPE_CHECKING:
    import httpx

    from app.protocols.attentive import AttentiveTransportProtocol, ResourceHandlerProtocol
    from config.settings import AttentiveSettings


def create_attentive_client(
    settings: AttentiveSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AttentiveTransportProtocol:
    """Cria o transporte HTTP (implementa AttentiveTransportProtocol)."""
    return create_attentive_http_client(settings, transport=transport)


def create_resource_registry(
    client: AttentiveTransportProtocol,
) -> dict[str, ResourceHandlerProtocol]:
    """Registry resource -> handler, todos compartilhando o mesmo cliente."""
    return {str(cls.name): cls(client) for cls in RESOURCE_HANDLER_CLASSES}


def create_action_dispatcher(
    settings: AttentiveSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ActionDispatcher:
    """Cria dispatcher com registry completo."""
    client = create_attentive_client(settings, transport=transport)
    return ActionDispatcher(create_resource_registry(client))


def create_webhook_subscription_manager(
    settings: AttentiveSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WebhookSubscriptionManager:
    """Cria gerenciador do webhook do trigger."""
    return WebhookSubscriptionManager(create_attentive_client(settings, transport=transport))
