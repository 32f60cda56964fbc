"""Resource customAttribute: atributos customizados de assinantes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.attentive import parse_attribute_list, prune
from api.validators.attentive import build_user_identifier, identifier_from_entry
from app.constants.attentive import Resource
from app.use_cases.attentive.base import OperationFn, ResourceHandler

if TYPE_CHECKING:
    from app.domain.actions import OperationContext


class CustomAttributeHandler(ResourceHandler):
    name = Resource.CUSTOM_ATTRIBUTE

    def _operations(self) -> dict[str, OperationFn]:
        return {"set": self.set, "setBatch": self.set_batch, "delete": self.delete}

    def _user(self, context: OperationContext) -> dict[str, Any]:
        return build_user_identifier(
            context.get("identifier_type", "phone"),
            phone=context.get("phone"),
            email=context.get("email"),
        )

    async def set(self, context: OperationContext) -> Any:
        body = {
            "user": self._user(context),
            "properties": parse_attribute_list(context.get_list("attributes")),
        }
        return await self._client.request("POST", "/attributes/custom", prune(body))

    async def set_batch(self, context: OperationContext) -> Any:
        updates: list[dict[str, Any]] = []
        for entry in context.get_list("subscribers"):
            update: dict[str, Any] = {"properties": {entry.get("key"): entry.get("value")}}
            user = identifier_from_entry(entry)
            if user is not None:
                update["user"] = user
            updates.append(update)

        return await self._client.request(
            "POST", "/attributes/custom/batch", {"updates": updates}
        )

    async def delete(self, context: OperationContext) -> Any:
        body = {
            "attributeKey": context.require("attribute_key"),
            "user": self._user(context),
        }
        return await self._client.request("DELETE", "/attributes/custom", prune(body))
