"""Resource webhook: gestão manual de webhooks da conta."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.attentive import WEBHOOK_EVENTS, Resource
from app.use_cases.attentive.base import OperationFn, ResourceHandler
from utils.errors import ValidationError

if TYPE_CHECKING:
    from app.domain.actions import OperationContext


def validate_events(events: list[Any]) -> list[str]:
    """Eventos restritos ao vocabulário da Attentive.

    Raises:
        ValidationError: Se algum evento não for reconhecido.
    """
    unknown = [event for event in events if event not in WEBHOOK_EVENTS]
    if unknown:
        raise ValidationError(
            f"Invalid webhook events: {', '.join(map(str, unknown))}. "
            f"Allowed: {', '.join(WEBHOOK_EVENTS)}"
        )
    return [str(event) for event in events]


class WebhookHandler(ResourceHandler):
    name = Resource.WEBHOOK

    def _operations(self) -> dict[str, OperationFn]:
        return {"create": self.create, "getAll": self.get_all, "delete": self.delete}

    async def create(self, context: OperationContext) -> Any:
        body: dict[str, Any] = {
            "url": context.require("url"),
            "events": validate_events(context.get_list("events")),
        }
        secret = context.get("secret")
        if secret:
            body["secret"] = secret
        return await self._client.request("POST", "/webhooks", body)

    async def get_all(self, context: OperationContext) -> Any:
        return await self._list(context, "/webhooks", "webhooks")

    async def delete(self, context: OperationContext) -> Any:
        webhook_id = context.require("webhook_id")
        await self._client.request("DELETE", f"/webhooks/{webhook_id}")
        return {"success": True, "webhookId": webhook_id}
