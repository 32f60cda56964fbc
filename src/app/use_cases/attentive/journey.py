"""Resource journey: consulta de jornadas e estatísticas."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.attentive import JourneyStatus, Resource
from app.use_cases.attentive.base import (
    OperationFn,
    ResourceHandler,
    date_range_query,
    enum_filter_query,
)

if TYPE_CHECKING:
    from app.domain.actions import OperationContext


class JourneyHandler(ResourceHandler):
    name = Resource.JOURNEY

    def _operations(self) -> dict[str, OperationFn]:
        return {"get": self.get, "getAll": self.get_all, "getStats": self.get_stats}

    async def get(self, context: OperationContext) -> Any:
        journey_id = context.require("journey_id")
        return await self._client.request("GET", f"/journeys/{journey_id}")

    async def get_all(self, context: OperationContext) -> Any:
        query = enum_filter_query(context, "status", JourneyStatus)
        return await self._list(context, "/journeys", "journeys", query)

    async def get_stats(self, context: OperationContext) -> Any:
        journey_id = context.require("journey_id")
        return await self._client.request(
            "GET", f"/journeys/{journey_id}/stats", None, date_range_query(context)
        )
