"""Cliente HTTP base para conectores da camada API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis.

    status_code é None quando a falha ocorreu antes de haver resposta
    (timeout, conexão recusada, DNS).
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Uma tentativa por chamada, sem retry nem backoff. O transport é
    injetável (httpx.MockTransport nos testes).
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def send(
        self,
        method: str,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa a requisição e devolve a resposta crua (qualquer status).

        Raises:
            HttpError: Falha de transporte (sem status_code).
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._transport,
                timeout=self._config.timeout_seconds,
            ) as client:
                return await client.request(
                    method,
                    url,
                    json=json,
                    params=params,
                    headers=merged_headers,
                )
        except httpx.TimeoutException as exc:
            logger.info("http_timeout", extra={"method": method})
            raise HttpError("Request timed out") from exc
        except httpx.HTTPError as exc:
            logger.info("http_connection_error", extra={"method": method})
            raise HttpError(f"Connection error: {type(exc).__name__}") from exc
