"""Settings do processo HTTP (ambiente, identificação e bind do uvicorn)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "production": "production",
    "prod": "production",
    "staging": "staging",
    "stage": "staging",
}

SERVICE_VERSION = "1.0.0"


@dataclass(frozen=True)
class ServiceSettings:
    """Configuração do serviço que expõe as ações e o webhook.

    Attributes:
        environment: development | staging | production
        service_name: Identificação do serviço nos logs e no /health
        log_level: Nível do root logger
        debug: Força DEBUG e habilita reload no modo dev
        host: Interface de bind do uvicorn
        port: Porta de bind do uvicorn
    """

    environment: Environment = "development"
    service_name: str = "attentive-connector"
    log_level: str = "INFO"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8080

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_strict(self) -> bool:
        """Em staging/production configuração inválida impede o boot."""
        return self.environment in ("staging", "production")

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        if not 0 < self.port < 65536:
            errors.append(f"PORT inválida: {self.port}")
        return errors


def _load_from_env() -> ServiceSettings:
    raw_env = os.getenv("ENVIRONMENT", "development").strip().lower()
    return ServiceSettings(
        environment=_ENVIRONMENT_ALIASES.get(raw_env, "development"),
        service_name=os.getenv("SERVICE_NAME", "attentive-connector"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
    )


@lru_cache(maxsize=1)
def get_service_settings() -> ServiceSettings:
    """ServiceSettings cacheada (uma leitura do ambiente por processo)."""
    return _load_from_env()
