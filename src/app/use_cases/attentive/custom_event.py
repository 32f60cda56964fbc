"""Resource customEvent: eventos customizados individuais e em lote."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.attentive import parse_attribute_list, prune, resolve_timestamp
from api.validators.attentive import build_user_identifier, identifier_from_entry
from app.constants.attentive import Resource
from app.use_cases.attentive.base import OperationFn, ResourceHandler

if TYPE_CHECKING:
    from app.domain.actions import OperationContext


class CustomEventHandler(ResourceHandler):
    name = Resource.CUSTOM_EVENT

    def _operations(self) -> dict[str, OperationFn]:
        return {"send": self.send, "sendBatch": self.send_batch}

    async def send(self, context: OperationContext) -> Any:
        options = context.get_mapping("event_options")
        body = {
            "type": context.require("event_type"),
            "user": build_user_identifier(
                context.get("identifier_type", "phone"),
                phone=context.get("phone"),
                email=context.get("email"),
            ),
            "occurredAt": resolve_timestamp(options.get("occurred_at")),
            "externalId": options.get("external_id"),
            "properties": parse_attribute_list(options.get("properties")),
        }
        return await self._client.request("POST", "/events/custom", prune(body))

    async def send_batch(self, context: OperationContext) -> Any:
        """Lote de eventos carimbados com o instante atual.

        O corpo do lote não é podado: entradas sem identificador seguem sem `user`.
        """
        events: list[dict[str, Any]] = []
        for entry in context.get_list("events"):
            event: dict[str, Any] = {
                "type": entry.get("type"),
                "occurredAt": resolve_timestamp(),
            }
            user = identifier_from_entry(entry)
            if user is not None:
                event["user"] = user
            events.append(event)

        return await self._client.request("POST", "/events/custom/batch", {"events": events})
