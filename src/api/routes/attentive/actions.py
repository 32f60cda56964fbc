"""Endpoints de ações Attentive (binding HTTP do dispatcher).

Endpoints:
- GET /actions: catálogo de resources, operações e parâmetros
- POST /actions/{resource}/{operation}: executa um lote de itens

Erros não tolerados pelo lote viram status HTTP:
AuthError 401, ValidationError 422, UnsupportedOperationError 404, ApiError 502.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from app.bootstrap import get_action_dispatcher
from app.constants.attentive import OPERATION_PARAMETERS
from app.coordinators.attentive import ActionBatch
from app.observability import correlation_scope
from utils.errors import (
    ApiError,
    AttentiveError,
    AuthError,
    UnsupportedOperationError,
    ValidationError,
)

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_STATUS: tuple[tuple[type[AttentiveError], int], ...] = (
    (AuthError, 401),
    (ValidationError, 422),
    (UnsupportedOperationError, 404),
    (ApiError, 502),
)


class ActionRequest(BaseModel):
    """Corpo do POST de ações."""

    items: list[dict[str, Any]] = Field(default_factory=lambda: [{}])
    continue_on_fail: bool = False


def error_status(exc: AttentiveError) -> int:
    """Status HTTP para um erro do conector."""
    for error_type, status_code in _ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _error_response(status_code: int, message: str, error_type: str) -> JSONResponse:
    return JSONResponse(
        content={"error": message, "error_type": error_type},
        status_code=status_code,
    )


@router.get("/actions")
async def list_actions() -> dict[str, Any]:
    """Catálogo: resource -> operation -> parâmetros lidos de cada item."""
    dispatcher = get_action_dispatcher()
    catalog = dispatcher.catalog()
    return {
        "resources": {
            resource: {
                operation: list(OPERATION_PARAMETERS.get(resource, {}).get(operation, ()))
                for operation in operations
            }
            for resource, operations in catalog.items()
        }
    }


@router.post("/actions/{resource}/{operation}", response_model=None)
async def run_action(resource: str, operation: str, request: Request) -> JSONResponse:
    """Executa resource+operation sobre os itens do corpo, em ordem."""
    with correlation_scope(request.headers.get("x-correlation-id")) as correlation_id:
        raw_body = await request.body()
        try:
            payload = json.loads(raw_body or b"{}")
            action = ActionRequest.model_validate(payload)
        except (json.JSONDecodeError, UnicodeDecodeError, PydanticValidationError) as exc:
            logger.warning(
                "attentive_action_bad_request",
                extra={"resource": resource, "operation": operation, "error_type": type(exc).__name__},
            )
            return _error_response(
                status.HTTP_400_BAD_REQUEST, "Bad Request", type(exc).__name__
            )

        batch = ActionBatch(
            resource=resource,
            operation=operation,
            items=action.items,
            continue_on_fail=action.continue_on_fail,
        )
        try:
            records = await get_action_dispatcher().run(batch)
        except AttentiveError as exc:
            status_code = error_status(exc)
            logger.warning(
                "attentive_action_failed",
                extra={
                    "resource": resource,
                    "operation": operation,
                    "status_code": status_code,
                    "error_type": type(exc).__name__,
                },
            )
            return _error_response(status_code, str(exc), type(exc).__name__)

        return JSONResponse(
            content={
                "results": [record.to_dict() for record in records],
                "correlation_id": correlation_id,
            },
            status_code=status.HTTP_200_OK,
        )
