"""Settings específicas da Attentive.

Credencial, endpoint da API REST e parâmetros do webhook de trigger.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da API Attentive
ATTENTIVE_API_BASE_URL: str = "https://api.attentivemobile.com/v1"
DEFAULT_PAGE_SIZE: int = 100
DEFAULT_MAX_PAGE_ITERATIONS: int = 1000


@dataclass(frozen=True)
class AttentiveSettings:
    """Configurações do conector Attentive.

    Attributes:
        api_key: API key (Bearer token) da conta Attentive
        api_base_url: URL base da API REST (com versão)
        request_timeout_seconds: Timeout para requisições HTTP
        page_size: Tamanho fixo da página na paginação por offset
        max_page_iterations: Limite de segurança de páginas por coleta
        webhook_secret: Secret HMAC para validar entregas do webhook
        webhook_url: URL pública registrada na Attentive para o trigger
        webhook_events: Eventos assinados pelo trigger
    """

    # Credenciais
    api_key: str = ""

    # API
    api_base_url: str = ATTENTIVE_API_BASE_URL
    request_timeout_seconds: float = 30.0

    # Paginação
    page_size: int = DEFAULT_PAGE_SIZE
    max_page_iterations: int = DEFAULT_MAX_PAGE_ITERATIONS

    # Webhook (trigger)
    webhook_secret: str = ""
    webhook_url: str = ""
    webhook_events: tuple[str, ...] = ()

    def validate(self) -> list[str]:
        """Valida configurações mínimas da Attentive.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key:
            errors.append("ATTENTIVE_API_KEY não configurado")

        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append("ATTENTIVE_API_BASE_URL deve começar com http(s)://")

        if self.request_timeout_seconds <= 0:
            errors.append("ATTENTIVE_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if not 1 <= self.page_size <= 100:
            errors.append("ATTENTIVE_PAGE_SIZE deve estar entre 1 e 100")

        if self.max_page_iterations < 1:
            errors.append("ATTENTIVE_MAX_PAGE_ITERATIONS deve ser >= 1")

        return errors


def _parse_events(raw: str) -> tuple[str, ...]:
    """Converte lista separada por vírgula em tupla sem vazios."""
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _load_from_env() -> AttentiveSettings:
    """Carrega AttentiveSettings a partir de variáveis de ambiente."""
    return AttentiveSettings(
        api_key=os.getenv("ATTENTIVE_API_KEY", ""),
        api_base_url=os.getenv("ATTENTIVE_API_BASE_URL", ATTENTIVE_API_BASE_URL).rstrip("/"),
        request_timeout_seconds=float(
            os.getenv("ATTENTIVE_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        page_size=int(os.getenv("ATTENTIVE_PAGE_SIZE", str(DEFAULT_PAGE_SIZE))),
        max_page_iterations=int(
            os.getenv("ATTENTIVE_MAX_PAGE_ITERATIONS", str(DEFAULT_MAX_PAGE_ITERATIONS))
        ),
        webhook_secret=os.getenv("ATTENTIVE_WEBHOOK_SECRET", ""),
        webhook_url=os.getenv("ATTENTIVE_WEBHOOK_URL", ""),
        webhook_events=_parse_events(os.getenv("ATTENTIVE_WEBHOOK_EVENTS", "")),
    )


@lru_cache(maxsize=1)
def get_attentive_settings() -> AttentiveSettings:
    """Retorna instância cacheada de AttentiveSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
