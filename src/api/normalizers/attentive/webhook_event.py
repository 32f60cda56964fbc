"""Normalização de entregas de webhook da Attentive."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from api.payload_builders.attentive.timestamps import resolve_timestamp


class AttentiveWebhookEvent(BaseModel):
    """Evento recebido via webhook, já normalizado.

    Attributes:
        event: Nome do evento (ex: message.delivered)
        timestamp: Momento do evento (recebimento, se ausente)
        data: Conteúdo útil do evento
        raw: Corpo original completo
    """

    model_config = ConfigDict(frozen=True)

    event: str | None = None
    timestamp: str
    data: Any = None
    raw: dict[str, Any]


def normalize_webhook_event(body: Mapping[str, Any]) -> AttentiveWebhookEvent:
    """Monta o evento a partir do corpo decodificado.

    event = body.event ou body.type; timestamp = body.timestamp ou agora;
    data = body.data ou o próprio corpo.
    """
    raw = dict(body)
    return AttentiveWebhookEvent(
        event=raw.get("event") or raw.get("type"),
        timestamp=str(raw.get("timestamp") or resolve_timestamp()),
        data=raw.get("data") or raw,
        raw=raw,
    )
