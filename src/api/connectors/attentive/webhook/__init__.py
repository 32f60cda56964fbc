"""Webhook Attentive: assinatura e parsing seguro das entregas."""

from api.connectors.attentive.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    MissingSignatureError,
    WebhookRequestError,
    parse_webhook_request,
)
from api.connectors.attentive.webhook.signature import (
    SIGNATURE_HEADER,
    SignatureResult,
    compute_signature,
    verify_attentive_signature,
)

__all__ = [
    "SIGNATURE_HEADER",
    "InvalidJsonError",
    "InvalidSignatureError",
    "MissingSignatureError",
    "SignatureResult",
    "WebhookRequestError",
    "compute_signature",
    "parse_webhook_request",
    "verify_attentive_signature",
]
