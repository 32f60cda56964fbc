"""Normalizers Attentive: respostas da API e eventos de webhook."""

from api.normalizers.attentive.results import to_result_list
from api.normalizers.attentive.webhook_event import (
    AttentiveWebhookEvent,
    normalize_webhook_event,
)

__all__ = [
    "AttentiveWebhookEvent",
    "normalize_webhook_event",
    "to_result_list",
]
