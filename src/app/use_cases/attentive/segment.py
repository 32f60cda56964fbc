"""Resource segment: CRUD de segmentos e listagem de membros."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.attentive import prune
from app.constants.attentive import Resource
from app.use_cases.attentive.base import OperationFn, ResourceHandler

if TYPE_CHECKING:
    from app.domain.actions import OperationContext


class SegmentHandler(ResourceHandler):
    name = Resource.SEGMENT

    def _operations(self) -> dict[str, OperationFn]:
        return {
            "create": self.create,
            "get": self.get,
            "getAll": self.get_all,
            "update": self.update,
            "delete": self.delete,
            "getMembers": self.get_members,
        }

    async def create(self, context: OperationContext) -> Any:
        body = {
            "name": context.require("segment_name"),
            "description": context.get("description"),
        }
        return await self._client.request("POST", "/segments", prune(body))

    async def get(self, context: OperationContext) -> Any:
        segment_id = context.require("segment_id")
        return await self._client.request("GET", f"/segments/{segment_id}")

    async def get_all(self, context: OperationContext) -> Any:
        return await self._list(context, "/segments", "segments")

    async def update(self, context: OperationContext) -> Any:
        segment_id = context.require("segment_id")
        fields = context.get_mapping("update_fields")
        body = {"name": fields.get("name"), "description": fields.get("description")}
        return await self._client.request("PATCH", f"/segments/{segment_id}", prune(body))

    async def delete(self, context: OperationContext) -> Any:
        segment_id = context.require("segment_id")
        await self._client.request("DELETE", f"/segments/{segment_id}")
        return {"success": True, "segmentId": segment_id}

    async def get_members(self, context: OperationContext) -> Any:
        segment_id = context.require("segment_id")
        return await self._list(context, f"/segments/{segment_id}/members", "members")
