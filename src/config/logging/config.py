"""Configuração do logging JSON do processo.

    configure_logging(level="INFO", service_name="attentive-connector")
    logger = get_logger(__name__)
    logger.info("attentive_request_ok", extra={"status_code": 200})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, SensitiveDataFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "attentive-connector"

# httpx loga a URL completa (inclusive query com telefone) em INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def _build_handler(
    level: str,
    service_name: str,
    correlation_id_getter: Callable[[], str] | None,
) -> logging.Handler:
    formatter = create_json_formatter()

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(SensitiveDataFilter())
    return handler


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    quiet_loggers: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """Instala um único handler JSON no root logger.

    Chamadas repetidas substituem o handler anterior.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (case-insensitive).
        service_name: Valor do campo `service` em todo record.
        correlation_id_getter: Fonte do correlation_id corrente
            (app.observability.get_correlation_id no serviço).
        quiet_loggers: Loggers de bibliotecas limitados a WARNING.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [_build_handler(level_upper, service_name, correlation_id_getter)]

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_api_call(
    logger: logging.Logger,
    method: str,
    path: str,
    status_code: int | None,
    elapsed_ms: float | None = None,
) -> None:
    """Registra uma chamada à Attentive sem body nem credenciais.

    status >= 400 ou ausente (falha de transporte) sai em WARNING;
    sucesso sai em DEBUG.
    """
    extra: dict[str, object] = {
        "method": method,
        "path": path,
        "status_code": status_code,
    }
    if elapsed_ms is not None:
        extra["elapsed_ms"] = round(elapsed_ms, 2)

    if status_code is None or status_code >= 400:
        logger.warning("attentive_request_failed", extra=extra)
    else:
        logger.debug("attentive_request_ok", extra=extra)
