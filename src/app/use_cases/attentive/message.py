"""Resource message: envio individual, em massa e transacional."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.attentive import parse_attribute_list, prune
from api.validators.attentive import require_phone
from app.constants.attentive import Resource, SubscriptionType
from app.use_cases.attentive.base import OperationFn, ResourceHandler

if TYPE_CHECKING:
    from app.domain.actions import OperationContext


class MessageHandler(ResourceHandler):
    """Mensagens SMS/MMS."""

    name = Resource.MESSAGE

    def _operations(self) -> dict[str, OperationFn]:
        return {
            "send": self.send,
            "sendBulk": self.send_bulk,
            "sendTransactional": self.send_transactional,
        }

    async def send(self, context: OperationContext) -> Any:
        to = require_phone(context.require("to"))
        options = context.get_mapping("options")
        body = {
            "to": to,
            "body": context.require("body"),
            "subscriptionType": options.get("subscription_type"),
            "mediaUrl": options.get("media_url"),
            "messageName": options.get("message_name"),
            "useShortLinks": options.get("use_short_links"),
            "skipFatigue": options.get("skip_fatigue"),
            "externalId": options.get("external_id"),
        }
        return await self._client.request("POST", "/messages/send", prune(body))

    async def send_bulk(self, context: OperationContext) -> Any:
        # Qualquer destinatário inválido aborta o item inteiro
        recipients = [
            {"phone": require_phone(entry.get("phone") if isinstance(entry, dict) else entry)}
            for entry in context.get_list("recipients")
        ]
        options = context.get_mapping("options")
        body = {
            "recipients": recipients,
            "body": context.require("body"),
            "subscriptionType": options.get("subscription_type"),
            "mediaUrl": options.get("media_url"),
            "messageName": options.get("message_name"),
            "useShortLinks": options.get("use_short_links"),
        }
        return await self._client.request("POST", "/messages/bulk", prune(body))

    async def send_transactional(self, context: OperationContext) -> Any:
        to = require_phone(context.require("to"))
        options = context.get_mapping("transactional_options")
        body = {
            "to": to,
            "body": context.require("body"),
            "messageName": context.require("message_name"),
            "subscriptionType": SubscriptionType.TRANSACTIONAL.value,
            "mediaUrl": options.get("media_url"),
            "externalId": options.get("external_id"),
            "variables": parse_attribute_list(options.get("variables")),
        }
        return await self._client.request("POST", "/messages/transactional", prune(body))
