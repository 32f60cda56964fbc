"""Protocolos do conector Attentive usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.actions import OperationContext


class AttentiveTransportProtocol(Protocol):
    """Contrato mínimo para o transporte HTTP da Attentive."""

    async def request(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
    ) -> Any: ...

    async def request_all_items(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
        result_key: str = "data",
    ) -> list[Any]: ...


class ResourceHandlerProtocol(Protocol):
    """Contrato de um módulo de resource (registry do dispatcher)."""

    name: str

    def list_operations(self) -> tuple[str, ...]: ...

    async def execute(
        self,
        operation: str,
        context: OperationContext,
    ) -> list[dict[str, Any]]: ...
