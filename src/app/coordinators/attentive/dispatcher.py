"""Dispatcher de ações: executa resource+operation sobre um lote de itens.

Itens são processados em ordem, um por vez. O dispatcher é o único ponto
de recuperação de erros: com continue_on_fail, a falha de um item vira um
registro {"error": <mensagem>} e o lote segue; sem ele, a falha aborta o
restante do lote.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from app.bootstrap.notice import log_usage_notice_once
from app.domain.actions import OperationContext, ResultRecord
from utils.errors import UnsupportedOperationError

if TYPE_CHECKING:
    from app.protocols.attentive import ResourceHandlerProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionBatch:
    """Lote de itens para uma mesma combinação resource/operation."""

    resource: str
    operation: str
    items: Sequence[Mapping[str, Any]] = field(default_factory=tuple)
    continue_on_fail: bool = False


class ActionDispatcher:
    """Roteia lotes para o handler do resource (registry por nome)."""

    def __init__(self, registry: Mapping[str, ResourceHandlerProtocol]) -> None:
        self._registry = dict(registry)

    def catalog(self) -> dict[str, list[str]]:
        """Resources registrados e suas operações."""
        return {name: list(handler.list_operations()) for name, handler in self._registry.items()}

    def resolve(self, resource: str, operation: str) -> ResourceHandlerProtocol:
        """Handler do resource, validando a operação antes de qualquer item.

        Raises:
            UnsupportedOperationError: Resource ou operação desconhecidos.
        """
        handler = self._registry.get(resource)
        if handler is None:
            raise UnsupportedOperationError(
                operation,
                resource=resource,
                message=f"Unknown resource: {resource}",
            )
        if operation not in handler.list_operations():
            raise UnsupportedOperationError(operation, resource=resource)
        return handler

    async def run(self, batch: ActionBatch) -> list[ResultRecord]:
        """Executa o lote e devolve os registros marcados com o índice do item.

        Resource ou operação desconhecidos contam como falha de cada item:
        com continue_on_fail viram um registro de erro por item, sem IO.

        Raises:
            AttentiveError: Primeira falha de item quando continue_on_fail=False.
        """
        log_usage_notice_once()
        try:
            handler = self.resolve(batch.resource, batch.operation)
        except UnsupportedOperationError as exc:
            if batch.items and not batch.continue_on_fail:
                raise
            logger.info(
                "attentive_batch_unresolved",
                extra={
                    "resource": batch.resource,
                    "operation": batch.operation,
                    "items": len(batch.items),
                },
            )
            return [ResultRecord.from_error(exc, index) for index in range(len(batch.items))]

        results: list[ResultRecord] = []
        failures = 0

        for index, parameters in enumerate(batch.items):
            context = OperationContext(parameters=parameters, item_index=index)
            try:
                records = await handler.execute(batch.operation, context)
            except Exception as exc:
                if not batch.continue_on_fail:
                    logger.warning(
                        "attentive_batch_aborted",
                        extra={
                            "resource": batch.resource,
                            "operation": batch.operation,
                            "item_index": index,
                            "error_type": type(exc).__name__,
                        },
                    )
                    raise
                failures += 1
                logger.info(
                    "attentive_item_failed",
                    extra={
                        "resource": batch.resource,
                        "operation": batch.operation,
                        "item_index": index,
                        "error_type": type(exc).__name__,
                    },
                )
                results.append(ResultRecord.from_error(exc, index))
                continue

            results.extend(ResultRecord(json=record, item_index=index) for record in records)

        logger.info(
            "attentive_batch_processed",
            extra={
                "resource": batch.resource,
                "operation": batch.operation,
                "items": len(batch.items),
                "records": len(results),
                "failures": failures,
            },
        )
        return results
