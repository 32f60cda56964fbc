"""Validação de assinatura HMAC-SHA256 das entregas de webhook."""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_HEADER = "x-attentive-signature"
_PREFIX = "sha256="


@dataclass(frozen=True)
class SignatureResult:
    """Resultado da verificação (error é um código curto, nunca o segredo)."""

    valid: bool
    skipped: bool = False
    error: str | None = None


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


def compute_signature(raw_body: bytes, secret: str) -> str:
    """Hex digest HMAC-SHA256 do corpo bruto."""
    return hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).hexdigest()


def verify_attentive_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> SignatureResult:
    """Verifica o header x-attentive-signature contra o corpo bruto.

    Sem secret configurado a verificação é pulada. O header aceita o
    digest puro ou prefixado por "sha256=".
    """
    if not secret:
        return SignatureResult(valid=True, skipped=True)

    signature = _get_header(headers, SIGNATURE_HEADER)
    if not signature:
        return SignatureResult(valid=False, error="missing_signature")

    received = signature.strip()
    if received.startswith(_PREFIX):
        received = received[len(_PREFIX):]

    expected = compute_signature(raw_body, secret)
    if not hmac.compare_digest(expected, received.lower()):
        return SignatureResult(valid=False, error="invalid_signature")
    return SignatureResult(valid=True)
