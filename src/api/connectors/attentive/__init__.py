"""Conector Attentive - adapter de borda para a API REST de SMS marketing.

Este módulo é o único ponto de IO com a Attentive.
Responsabilidades:
- HTTP client autenticado (request e paginação por offset)
- Classificação de erros HTTP
- Webhook (assinatura e parsing das entregas)
"""

from api.connectors.attentive.errors import classify_error, describe_status
from api.connectors.attentive.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.attentive.http_client import (
    AttentiveHttpClient,
    create_attentive_http_client,
)
from api.connectors.attentive.webhook import SignatureResult, verify_attentive_signature

__all__ = [
    "AttentiveHttpClient",
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "SignatureResult",
    "classify_error",
    "create_attentive_http_client",
    "describe_status",
    "verify_attentive_signature",
]
