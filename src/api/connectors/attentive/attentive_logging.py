"""Helpers de logging para a API Attentive (sem PII)."""

from __future__ import annotations

import logging

from config.logging import log_api_call

logger = logging.getLogger(__name__)


def log_request(
    method: str,
    path: str,
    status_code: int | None,
    elapsed_ms: float | None = None,
) -> None:
    """Loga a chamada sem query, body ou credencial."""
    log_api_call(logger, method, path, status_code, elapsed_ms)


def log_pagination_truncated(path: str, pages: int, collected: int, total: int | None) -> None:
    """Coleta interrompida pelo limite de páginas antes de atingir o total."""
    logger.warning(
        "attentive_pagination_truncated",
        extra={
            "path": path,
            "pages": pages,
            "collected": collected,
            "declared_total": total,
        },
    )
