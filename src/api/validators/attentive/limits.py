"""Limites de paginação aceitos pelas operações de listagem."""

from __future__ import annotations

from typing import Any

from utils.errors import ValidationError

MIN_LIMIT = 1
MAX_LIMIT = 100
DEFAULT_LIMIT = 50


def validate_limit(raw: Any) -> int:
    """Converte e valida o `limit` de uma listagem simples (1..100).

    Raises:
        ValidationError: Se não for inteiro ou estiver fora da faixa.
    """
    if raw is None or raw == "":
        return DEFAULT_LIMIT
    if isinstance(raw, bool):
        raise ValidationError(f'Invalid limit: "{raw}". Must be an integer.')
    try:
        limit = int(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f'Invalid limit: "{raw}". Must be an integer.') from exc
    if not MIN_LIMIT <= limit <= MAX_LIMIT:
        raise ValidationError(
            f"Invalid limit: {limit}. Must be between {MIN_LIMIT} and {MAX_LIMIT}."
        )
    return limit
