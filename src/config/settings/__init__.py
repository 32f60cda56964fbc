"""Settings do conector Attentive, carregadas de variáveis de ambiente.

- service: ambiente, logging e bind HTTP
- attentive: credencial, endpoint, paginação e webhook
"""

from __future__ import annotations

from config.settings.attentive import (
    ATTENTIVE_API_BASE_URL,
    DEFAULT_MAX_PAGE_ITERATIONS,
    DEFAULT_PAGE_SIZE,
    AttentiveSettings,
    get_attentive_settings,
)
from config.settings.service import (
    SERVICE_VERSION,
    Environment,
    ServiceSettings,
    get_service_settings,
)

__all__ = [
    "ATTENTIVE_API_BASE_URL",
    "DEFAULT_MAX_PAGE_ITERATIONS",
    "DEFAULT_PAGE_SIZE",
    "SERVICE_VERSION",
    "AttentiveSettings",
    "Environment",
    "ServiceSettings",
    "get_attentive_settings",
    "get_service_settings",
]
