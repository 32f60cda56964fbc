"""Resource signUpUnit: unidades de cadastro (popups, forms, keywords)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.attentive import Resource, SignUpUnitType
from app.use_cases.attentive.base import (
    OperationFn,
    ResourceHandler,
    date_range_query,
    enum_filter_query,
)

if TYPE_CHECKING:
    from app.domain.actions import OperationContext


class SignUpUnitHandler(ResourceHandler):
    name = Resource.SIGN_UP_UNIT

    def _operations(self) -> dict[str, OperationFn]:
        return {"get": self.get, "getAll": self.get_all, "getStats": self.get_stats}

    async def get(self, context: OperationContext) -> Any:
        unit_id = context.require("sign_up_unit_id")
        return await self._client.request("GET", f"/sign-up-units/{unit_id}")

    async def get_all(self, context: OperationContext) -> Any:
        query = enum_filter_query(context, "type", SignUpUnitType)
        return await self._list(context, "/sign-up-units", "signUpUnits", query)

    async def get_stats(self, context: OperationContext) -> Any:
        unit_id = context.require("sign_up_unit_id")
        return await self._client.request(
            "GET", f"/sign-up-units/{unit_id}/stats", None, date_range_query(context)
        )
