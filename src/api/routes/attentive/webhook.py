"""Endpoint de recebimento de webhooks da Attentive (trigger).

Endpoint:
- POST /webhook/attentive: entrega de eventos

Segurança:
- Com ATTENTIVE_WEBHOOK_SECRET configurado, o header
  x-attentive-signature é obrigatório e validado (HMAC-SHA256 do corpo)
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response

from api.connectors.attentive.webhook import WebhookRequestError, parse_webhook_request
from api.normalizers.attentive import normalize_webhook_event
from app.bootstrap.notice import log_usage_notice_once
from app.observability import correlation_scope
from config.settings import get_attentive_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=None)
async def receive_webhook(request: Request) -> Response | dict[str, Any]:
    """Recebe uma entrega, valida a assinatura e devolve o evento normalizado."""
    log_usage_notice_once()
    with correlation_scope(request.headers.get("x-correlation-id")) as correlation_id:
        settings = get_attentive_settings()
        raw_body = await request.body()

        try:
            payload, signature_result = parse_webhook_request(
                raw_body=raw_body,
                headers=dict(request.headers),
                secret=settings.webhook_secret or None,
            )
        except WebhookRequestError as exc:
            logger.warning(
                "attentive_webhook_rejected",
                extra={"error_type": type(exc).__name__, "status_code": exc.status_code},
            )
            return Response(
                content=str(exc),
                media_type="text/plain",
                status_code=exc.status_code,
            )

        event = normalize_webhook_event(payload)
        logger.info(
            "attentive_webhook_received",
            extra={
                "event": event.event,
                "signature_skipped": signature_result.skipped,
                "payload_size": len(raw_body),
            },
        )
        return {
            "status": "received",
            "correlation_id": correlation_id,
            "event": event.model_dump(),
        }
