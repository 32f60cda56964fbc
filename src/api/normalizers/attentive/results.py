"""Conversão de respostas da API em registros de saída."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def to_result_list(payload: Any) -> list[dict[str, Any]]:
    """Expande a resposta em uma lista de registros.

    - lista: um registro por elemento (escalares viram {"value": x})
    - mapping: um único registro
    - None: nenhum registro
    """
    if payload is None:
        return []
    if isinstance(payload, (list, tuple)):
        return [_as_record(entry) for entry in payload]
    return [_as_record(payload)]


def _as_record(entry: Any) -> dict[str, Any]:
    if isinstance(entry, Mapping):
        return dict(entry)
    return {"value": entry}
