"""Modelos de execução de ações: contexto por item e registro de resultado."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from utils.errors import ValidationError

_TRUTHY = frozenset({"true", "1", "yes", "on"})


@dataclass(frozen=True)
class OperationContext:
    """Parâmetros de um item de entrada e sua posição no lote."""

    parameters: Mapping[str, Any] = field(default_factory=dict)
    item_index: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    def get(self, name: str, default: Any = None) -> Any:
        """Valor do parâmetro ou default se ausente (None)."""
        value = self.parameters.get(name)
        return default if value is None else value

    def require(self, name: str) -> Any:
        """Valor obrigatório; ausente ou vazio falha.

        Raises:
            ValidationError: Se o parâmetro não foi informado.
        """
        value = self.parameters.get(name)
        if value is None or value == "":
            raise ValidationError(f'Missing required parameter: "{name}"')
        return value

    def get_bool(self, name: str, default: bool = False) -> bool:
        value = self.parameters.get(name)
        if value is None:
            return default
        if isinstance(value, str):
            return value.strip().lower() in _TRUTHY
        return bool(value)

    def get_mapping(self, name: str) -> dict[str, Any]:
        """Coleção de opções (additional_fields, options, ...) ou {}."""
        value = self.parameters.get(name)
        return dict(value) if isinstance(value, Mapping) else {}

    def get_list(self, name: str) -> list[Any]:
        value = self.parameters.get(name)
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return list(value)
        return [value]


@dataclass(frozen=True)
class ResultRecord:
    """Uma unidade de saída, associada ao item de origem.

    A variante de erro carrega {"error": <mensagem>}.
    """

    json: dict[str, Any]
    item_index: int

    @classmethod
    def from_error(cls, error: BaseException, item_index: int) -> ResultRecord:
        return cls(json={"error": str(error)}, item_index=item_index)

    @property
    def is_error(self) -> bool:
        return set(self.json) == {"error"}

    def to_dict(self) -> dict[str, Any]:
        return {"json": self.json, "item_index": self.item_index}
