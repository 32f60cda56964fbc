"""Classificação de erros HTTP da API Attentive."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn

from utils.errors import ApiError

if TYPE_CHECKING:
    from api.connectors.attentive.http_base import HttpError

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"

# Status com mensagem fixa (o texto upstream é descartado)
_FIXED_MESSAGES: dict[int, str] = {
    401: "Unauthorized: Invalid API key",
    403: "Forbidden: Insufficient permissions",
    404: "Not Found: Resource does not exist",
    429: "Rate Limited: Too many requests. Please try again later.",
    500: "Server Error: Attentive API is experiencing issues",
}


def describe_status(status_code: int | None, message: str | None) -> str:
    """Mensagem amigável para o status HTTP.

    400 prefixa a mensagem upstream; 401/403/404/429/500 usam texto fixo;
    qualquer outro status repassa a mensagem crua.
    """
    base = message or UNKNOWN_ERROR_MESSAGE
    if status_code == 400:
        return f"Bad Request: {base}"
    if status_code is not None and status_code in _FIXED_MESSAGES:
        return _FIXED_MESSAGES[status_code]
    return base


def classify_error(error: HttpError) -> NoReturn:
    """Converte HttpError em ApiError classificado.

    Raises:
        ApiError: Sempre.
    """
    raise ApiError(
        describe_status(error.status_code, error.message),
        status_code=error.status_code,
        upstream_message=error.message,
    ) from error


def extract_error_message(payload: Any) -> str | None:
    """Extrai a mensagem de erro do corpo JSON de uma resposta de falha.

    Formatos aceitos: {"message": ...}, {"error": "..."},
    {"error": {"message": ...}} e {"errors": [{"message": ...}]}.
    """
    if not isinstance(payload, dict):
        return None

    message = payload.get("message")
    if isinstance(message, str) and message:
        return message

    error = payload.get("error")
    if isinstance(error, str) and error:
        return error
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])

    errors = payload.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        first = errors[0].get("message")
        if first:
            return str(first)
    return None
