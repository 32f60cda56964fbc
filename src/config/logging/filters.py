"""Filters de logging: contexto de rastreamento e mascaramento de PII.

- CorrelationIdFilter injeta correlation_id e service em cada record.
- SensitiveDataFilter mascara API keys e telefones E.164 que escapem
  para a mensagem renderizada.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

_BEARER_RE = re.compile(r"Bearer\s+[A-Za-z0-9._\-]+")
_PHONE_RE = re.compile(r"\+[1-9]\d{5,14}")


def mask_sensitive(text: str) -> str:
    """Mascara tokens Bearer e telefones, preservando os 4 últimos dígitos."""
    text = _BEARER_RE.sub("Bearer ***", text)
    return _PHONE_RE.sub(lambda m: "+***" + m.group(0)[-4:], text)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        # correlation_id passado via `extra` tem precedência
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SensitiveDataFilter(logging.Filter):
    """Reescreve a mensagem do record sem API keys nem telefones completos."""

    def filter(self, record: logging.LogRecord) -> bool:
        rendered = record.getMessage()
        masked = mask_sensitive(rendered)
        if masked != rendered:
            record.msg = masked
            record.args = None
        return True
