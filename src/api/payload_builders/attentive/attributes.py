"""Conversão de pares {key, value} vindos do host em mapping."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def parse_attribute_list(
    pairs: Iterable[Mapping[str, Any]] | None,
) -> dict[str, Any]:
    """Monta {key: value} a partir de uma lista de pares.

    Pares sem key (ou key vazia) ou sem value (None) são ignorados
    silenciosamente. Em chaves repetidas, a última ocorrência vence.

    Example:
        >>> parse_attribute_list([{"key": "firstName", "value": "John"}])
        {'firstName': 'John'}
    """
    attributes: dict[str, Any] = {}
    if not pairs:
        return attributes

    for pair in pairs:
        if not isinstance(pair, Mapping):
            continue
        key = pair.get("key")
        value = pair.get("value")
        if not key or value is None:
            continue
        attributes[str(key)] = value
    return attributes
