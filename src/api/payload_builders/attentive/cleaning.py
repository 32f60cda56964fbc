"""Poda recursiva de payloads de escrita antes do envio."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def prune(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Remove entradas vazias de um mapping, recursivamente.

    Regras:
    - None e "" são descartados
    - mappings aninhados são podados; se ficarem vazios, somem
    - listas são mantidas como estão se não vazias, descartadas se vazias
    - 0 e False são valores legítimos e permanecem

    Usado apenas em bodies de escrita, nunca em query params.
    """
    cleaned: dict[str, Any] = {}
    for key, value in payload.items():
        if _is_blank(value):
            continue
        if isinstance(value, Mapping):
            nested = prune(value)
            if nested:
                cleaned[key] = nested
        elif isinstance(value, (list, tuple)):
            if value:
                cleaned[key] = list(value)
        else:
            cleaned[key] = value
    return cleaned
