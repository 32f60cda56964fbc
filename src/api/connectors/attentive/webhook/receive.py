"""Parse e validação inicial do webhook (sem PII)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from api.connectors.attentive.webhook.signature import (
    SignatureResult,
    verify_attentive_signature,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""

    status_code: int = 400


class MissingSignatureError(WebhookRequestError):
    """Secret configurado e header de assinatura ausente."""

    status_code = 401


class InvalidSignatureError(WebhookRequestError):
    """Assinatura não confere com o corpo recebido."""

    status_code = 401


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook."""


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> tuple[dict[str, object], SignatureResult]:
    """Valida assinatura e parseia JSON do webhook.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        secret: Secret do webhook (None/vazio desativa a verificação)

    Raises:
        MissingSignatureError: Se o header de assinatura estiver ausente
        InvalidSignatureError: Se a assinatura for inválida
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto

    Returns:
        (payload dict, SignatureResult)
    """
    signature_result = verify_attentive_signature(raw_body, headers, secret)
    if not signature_result.valid:
        if signature_result.error == "missing_signature":
            raise MissingSignatureError("Missing signature")
        raise InvalidSignatureError("Invalid signature")

    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("Bad Request") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("Bad Request")

    return payload, signature_result
