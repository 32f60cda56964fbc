"""Parsing numérico tolerante para valores digitados no host.

Aceita prefixos numéricos ("29.99 USD" -> 29.99), como fazem os
campos de formulário da plataforma de automação.
"""

from __future__ import annotations

import math
import re
from typing import Any

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def parse_float(raw: Any, default: float = 0.0) -> float:
    """Float do prefixo numérico de `raw`; `default` se não houver."""
    if isinstance(raw, bool):
        return default
    if isinstance(raw, (int, float)):
        value = float(raw)
        return value if math.isfinite(value) else default
    match = _FLOAT_PREFIX.match(str(raw)) if raw is not None else None
    if match is None:
        return default
    value = float(match.group(1))
    return value if math.isfinite(value) else default


def parse_int(raw: Any, default: int = 0) -> int:
    """Inteiro do prefixo numérico de `raw` (trunca floats); `default` se não houver."""
    if isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else default
    match = _INT_PREFIX.match(str(raw)) if raw is not None else None
    if match is None:
        return default
    return int(match.group(1))


def money(value: Any, currency: str | None) -> dict[str, Any]:
    """Objeto monetário da API: {"value": ..., "currency": ...} (USD padrão)."""
    return {"value": value, "currency": currency or "USD"}
