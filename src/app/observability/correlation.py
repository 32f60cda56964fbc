"""correlation_id por requisição/lote, propagado para os logs.

Usa ContextVar para ser seguro em asyncio: cada request do FastAPI e
cada lote do dispatcher enxerga o seu próprio valor.

Uso:
    with correlation_scope(request.headers.get("x-correlation-id")) as cid:
        ...
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual ("" se não definido)."""
    return _correlation_id.get()


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4 em hex)."""
    return uuid.uuid4().hex


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Define o correlation_id durante o bloco e restaura o anterior na saída.

    Args:
        correlation_id: Valor recebido do chamador. Se vazio, gera um novo;
            se já existe um valor no contexto e nenhum foi informado,
            reutiliza o existente (lote dentro de request).
    """
    value = correlation_id or get_correlation_id() or generate_correlation_id()
    token = _correlation_id.set(value)
    try:
        yield value
    finally:
        _correlation_id.reset(token)
