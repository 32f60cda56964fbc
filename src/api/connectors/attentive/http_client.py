"""Cliente HTTP especializado para a API REST da Attentive.

Estende HttpClient genérico com comportamentos específicos da Attentive:
- Autenticação Bearer com API key (validada antes de qualquer IO)
- Body JSON apenas em métodos de escrita e quando não vazio
- Classificação de erros HTTP em ApiError
- Paginação por offset com limite de segurança de páginas
- Logging estruturado sem PII (sem API key, sem telefones)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from api.connectors.attentive.attentive_logging import (
    log_pagination_truncated,
    log_request,
)
from api.connectors.attentive.errors import classify_error, extract_error_message
from api.connectors.attentive.http_base import HttpClient, HttpClientConfig, HttpError
from config.settings.attentive import (
    ATTENTIVE_API_BASE_URL,
    DEFAULT_MAX_PAGE_ITERATIONS,
    DEFAULT_PAGE_SIZE,
)
from utils.errors import AuthError

if TYPE_CHECKING:
    import httpx

    from config.settings import AttentiveSettings

logger: logging.Logger = logging.getLogger(__name__)


class AttentiveHttpClient(HttpClient):
    """Cliente HTTP para a API Attentive.

    Uma requisição por chamada: nenhuma falha é retentada aqui.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = ATTENTIVE_API_BASE_URL,
        config: HttpClientConfig | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_page_iterations: int = DEFAULT_MAX_PAGE_ITERATIONS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Inicializa cliente Attentive.

        Args:
            api_key: API key da conta (pode ser vazia; falha na primeira chamada)
            base_url: URL base com versão, sem barra final
            config: Configuração HTTP base
            page_size: Valor fixo de `limit` na paginação
            max_page_iterations: Máximo de páginas por coleta
            transport: Transport httpx alternativo (testes)
        """
        super().__init__(config, transport=transport)
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self.page_size = page_size
        self.max_page_iterations = max_page_iterations

    async def request(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
    ) -> Any:
        """Executa uma requisição autenticada e devolve o JSON decodificado.

        Args:
            method: Verbo HTTP
            path: Caminho relativo à base (ex: /segments/123)
            body: Corpo JSON (ignorado em GET e quando vazio)
            query: Query string

        Returns:
            Resposta decodificada ({} para corpo vazio)

        Raises:
            AuthError: Se não houver API key
            ApiError: Se a API responder erro ou o transporte falhar
        """
        if not self._api_key or not self._api_key.strip():
            raise AuthError("No API key provided")

        method = method.upper()
        json_body = body if body and method != "GET" else None
        started = time.perf_counter()
        try:
            response = await self.send(
                method,
                f"{self._base_url}{path}",
                json=json_body,
                params=query or None,
                headers=self._build_headers(),
            )
        except HttpError as exc:
            log_request(method, path, None, _elapsed_ms(started))
            classify_error(exc)

        log_request(method, path, response.status_code, _elapsed_ms(started))
        if response.status_code >= 400:
            classify_error(_http_error_from_response(response))
        return _decode_body(response)

    async def request_all_items(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
        result_key: str = "data",
    ) -> list[Any]:
        """Coleta todas as páginas de uma listagem paginada por offset.

        Para quando a resposta não declara meta.total (ou declara 0), quando
        o acumulado atinge o total, ou no limite de páginas. No limite, o
        que foi coletado é devolvido e um warning é logado.
        """
        collected: list[Any] = []
        params = dict(query or {})
        params["limit"] = self.page_size
        offset = 0
        total: int | None = None

        for _ in range(self.max_page_iterations):
            params["offset"] = offset
            response = await self.request(method, path, body, dict(params))

            items = response.get(result_key) if isinstance(response, dict) else None
            if isinstance(items, list):
                collected.extend(items)

            total = _declared_total(response)
            if not total or len(collected) >= total:
                return collected
            offset += self.page_size

        log_pagination_truncated(path, self.max_page_iterations, len(collected), total)
        return collected

    def _build_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000


def _declared_total(response: Any) -> int | None:
    if not isinstance(response, dict):
        return None
    meta = response.get("meta")
    if not isinstance(meta, dict):
        return None
    total = meta.get("total")
    if isinstance(total, bool) or not isinstance(total, (int, float)):
        return None
    return int(total)


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        logger.warning(
            "attentive_response_not_json",
            extra={"status_code": response.status_code},
        )
        return {}


def _http_error_from_response(response: httpx.Response) -> HttpError:
    try:
        payload = response.json() if response.content else None
    except ValueError:
        payload = None
    message = extract_error_message(payload) or response.reason_phrase or None
    return HttpError(message or "", status_code=response.status_code)


def create_attentive_http_client(
    settings: AttentiveSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AttentiveHttpClient:
    """Factory para criar cliente Attentive com config padrão.

    Args:
        settings: AttentiveSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx alternativo (testes)

    Returns:
        Cliente HTTP configurado para a Attentive.
    """
    from config.settings import get_attentive_settings

    attentive = settings or get_attentive_settings()
    return AttentiveHttpClient(
        api_key=attentive.api_key,
        base_url=attentive.api_base_url,
        config=HttpClientConfig(timeout_seconds=attentive.request_timeout_seconds),
        page_size=attentive.page_size,
        max_page_iterations=attentive.max_page_iterations,
        transport=transport,
    )
