"""Base dos módulos de resource da Attentive.

Cada resource declara um mapa operation -> coroutine. A operação é
resolvida antes de qualquer leitura de parâmetro ou requisição.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from enum import StrEnum
from typing import TYPE_CHECKING, Any, ClassVar

from api.normalizers.attentive import to_result_list
from api.payload_builders.attentive import resolve_timestamp
from api.validators.attentive import validate_limit
from utils.errors import UnsupportedOperationError, ValidationError

if TYPE_CHECKING:
    from app.domain.actions import OperationContext
    from app.protocols.attentive import AttentiveTransportProtocol

OperationFn = Callable[["OperationContext"], Awaitable[Any]]


class ResourceHandler:
    """Módulo de resource: lista operações e executa uma delas por item."""

    name: ClassVar[str] = ""

    def __init__(self, client: AttentiveTransportProtocol) -> None:
        self._client = client

    def _operations(self) -> dict[str, OperationFn]:
        raise NotImplementedError

    def list_operations(self) -> tuple[str, ...]:
        return tuple(self._operations())

    async def execute(
        self,
        operation: str,
        context: OperationContext,
    ) -> list[dict[str, Any]]:
        """Executa a operação para um item e devolve os registros de saída.

        Raises:
            UnsupportedOperationError: Se a operação não existe no resource.
        """
        handler = self._operations().get(operation)
        if handler is None:
            raise UnsupportedOperationError(operation, resource=self.name)
        return to_result_list(await handler(context))

    async def _list(
        self,
        context: OperationContext,
        path: str,
        result_key: str,
        query: dict[str, Any] | None = None,
    ) -> list[Any]:
        """Listagem completa (return_all) ou uma página com `limit`."""
        if context.get_bool("return_all"):
            return await self._client.request_all_items(
                "GET", path, None, dict(query or {}), result_key
            )

        params = {**(query or {}), "limit": validate_limit(context.get("limit"))}
        response = await self._client.request("GET", path, None, params)
        items = response.get(result_key) if isinstance(response, dict) else None
        return items or []


def date_range_query(context: OperationContext) -> dict[str, str]:
    """Query startDate/endDate (ISO-8601) a partir de `date_range`."""
    date_range = context.get_mapping("date_range")
    query: dict[str, str] = {}
    if date_range.get("start_date"):
        query["startDate"] = resolve_timestamp(date_range["start_date"])
    if date_range.get("end_date"):
        query["endDate"] = resolve_timestamp(date_range["end_date"])
    return query


def enum_filter_query(
    context: OperationContext,
    name: str,
    allowed: type[StrEnum],
) -> dict[str, str]:
    """Query `{name: valor}` a partir de `filters.<name>`, restrito ao enum.

    Raises:
        ValidationError: Se o valor não pertencer ao enum.
    """
    value = context.get_mapping("filters").get(name)
    if not value:
        return {}
    choices = [member.value for member in allowed]
    if value not in choices:
        raise ValidationError(
            f'Invalid {name}: "{value}". Expected one of: {", ".join(choices)}'
        )
    return {name: str(value)}
