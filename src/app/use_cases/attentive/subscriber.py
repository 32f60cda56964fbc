"""Resource subscriber: inscrição, cancelamento, consulta e atualização."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.attentive import parse_attribute_list, prune
from api.validators.attentive import require_phone
from app.constants.attentive import Resource
from app.use_cases.attentive.base import OperationFn, ResourceHandler

if TYPE_CHECKING:
    from app.domain.actions import OperationContext


class SubscriberHandler(ResourceHandler):
    """Assinantes identificados por telefone E.164."""

    name = Resource.SUBSCRIBER

    def _operations(self) -> dict[str, OperationFn]:
        return {
            "subscribe": self.subscribe,
            "unsubscribe": self.unsubscribe,
            "get": self.get,
            "update": self.update,
        }

    async def subscribe(self, context: OperationContext) -> Any:
        phone = require_phone(context.require("phone"))
        fields = context.get_mapping("additional_fields")

        body: dict[str, Any] = {
            "user": {"phone": phone, "email": fields.get("email")},
            "signUpSourceId": context.require("sign_up_source_id"),
            "subscriptionType": fields.get("subscription_type"),
            "locale": fields.get("locale"),
            "notifications": fields.get("notifications"),
            "customAttributes": parse_attribute_list(fields.get("custom_attributes")),
        }
        key = fields.get("external_id_key")
        value = fields.get("external_id_value")
        if key and value:
            body["externalIdentifiers"] = {key: value}

        return await self._client.request("POST", "/subscriptions", prune(body))

    async def unsubscribe(self, context: OperationContext) -> Any:
        phone = require_phone(context.require("phone"))
        body = {
            "user": {"phone": phone},
            "notification": context.get_bool("notification"),
        }
        return await self._client.request("POST", "/subscriptions/unsubscribe", body)

    async def get(self, context: OperationContext) -> Any:
        phone = require_phone(context.require("phone"))
        return await self._client.request("GET", "/subscriptions", None, {"phone": phone})

    async def update(self, context: OperationContext) -> Any:
        phone = require_phone(context.require("phone"))
        fields = context.get_mapping("update_fields")
        body = {
            "user": {"phone": phone, "email": fields.get("email")},
            "locale": fields.get("locale"),
            "customAttributes": parse_attribute_list(fields.get("custom_attributes")),
        }
        return await self._client.request("PATCH", "/subscribers", prune(body))
