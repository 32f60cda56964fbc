"""Resource ecommerce: eventos de produto, carrinho e compra."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.attentive import (
    money,
    parse_line_items,
    prune,
    resolve_timestamp,
)
from api.validators.attentive import build_user_identifier
from app.constants.attentive import Resource
from app.use_cases.attentive.base import OperationFn, ResourceHandler

if TYPE_CHECKING:
    from app.domain.actions import OperationContext

_PRODUCT_EVENT_PATHS: dict[str, str] = {
    "productView": "/events/ecommerce/product-view",
    "addToCart": "/events/ecommerce/add-to-cart",
    "removeFromCart": "/events/ecommerce/remove-from-cart",
}


class EcommerceHandler(ResourceHandler):
    """Eventos de ecommerce com usuário e itens de produto."""

    name = Resource.ECOMMERCE

    def _operations(self) -> dict[str, OperationFn]:
        return {
            "productView": self.product_view,
            "addToCart": self.add_to_cart,
            "removeFromCart": self.remove_from_cart,
            "purchase": self.purchase,
            "abandoned": self.abandoned,
        }

    def _base_body(self, context: OperationContext) -> dict[str, Any]:
        return {
            "user": build_user_identifier(
                context.get("identifier_type", "phone"),
                phone=context.get("phone"),
                email=context.get("email"),
            ),
            "items": [item.to_payload() for item in parse_line_items(context.get_list("items"))],
        }

    async def _product_event(self, operation: str, context: OperationContext) -> Any:
        body = self._base_body(context)
        options = context.get_mapping("event_options")
        body["occurredAt"] = resolve_timestamp(options.get("occurred_at"))
        body["externalId"] = options.get("external_id")
        return await self._client.request("POST", _PRODUCT_EVENT_PATHS[operation], prune(body))

    async def product_view(self, context: OperationContext) -> Any:
        return await self._product_event("productView", context)

    async def add_to_cart(self, context: OperationContext) -> Any:
        return await self._product_event("addToCart", context)

    async def remove_from_cart(self, context: OperationContext) -> Any:
        return await self._product_event("removeFromCart", context)

    async def purchase(self, context: OperationContext) -> Any:
        body = self._base_body(context)
        options = context.get_mapping("order_options")
        currency = options.get("currency")

        body["orderId"] = context.require("order_id")
        body["occurredAt"] = resolve_timestamp(options.get("occurred_at"))
        body["currency"] = currency
        # Valores zerados ou ausentes não são enviados
        if options.get("total_amount"):
            body["order"] = {"total": money(options["total_amount"], currency)}
        if options.get("discount_amount"):
            body["discount"] = money(options["discount_amount"], currency)
        if options.get("shipping_amount"):
            body["shipping"] = money(options["shipping_amount"], currency)
        if options.get("tax_amount"):
            body["tax"] = money(options["tax_amount"], currency)
        body["externalId"] = options.get("external_id")

        return await self._client.request("POST", "/events/ecommerce/purchase", prune(body))

    async def abandoned(self, context: OperationContext) -> Any:
        body = self._base_body(context)
        options = context.get_mapping("order_options")
        currency = options.get("currency")

        body["occurredAt"] = resolve_timestamp(options.get("occurred_at"))
        body["currency"] = currency
        if options.get("total_amount"):
            body["cart"] = {"total": money(options["total_amount"], currency)}
        body["externalId"] = options.get("external_id")

        return await self._client.request("POST", "/events/ecommerce/abandoned", prune(body))
