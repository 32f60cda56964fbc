"""Itens de produto dos eventos de ecommerce."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from api.payload_builders.attentive.numbers import money, parse_float, parse_int

DEFAULT_CURRENCY = "USD"


@dataclass(frozen=True, slots=True)
class LineItem:
    """Item de produto já normalizado (imutável após construção)."""

    product_id: str
    name: str
    price: float
    currency: str = DEFAULT_CURRENCY
    quantity: int = 1
    product_variant_id: str | None = None
    product_image: str | None = None
    product_url: str | None = None
    category: tuple[str, ...] | None = None

    def to_payload(self) -> dict[str, Any]:
        """Serializa no formato camelCase esperado pela API."""
        payload: dict[str, Any] = {
            "productId": self.product_id,
            "name": self.name,
            "price": money(self.price, self.currency),
            "quantity": self.quantity,
        }
        if self.product_variant_id:
            payload["productVariantId"] = self.product_variant_id
        if self.product_image:
            payload["productImage"] = self.product_image
        if self.product_url:
            payload["productUrl"] = self.product_url
        if self.category:
            payload["category"] = list(self.category)
        return payload


def _normalize_category(raw: Any) -> tuple[str, ...] | None:
    if not raw:
        return None
    if isinstance(raw, (list, tuple)):
        return tuple(str(c) for c in raw)
    return (str(raw),)


def build_line_item(raw: Mapping[str, Any]) -> LineItem:
    """Converte um item cru do host em LineItem.

    price inválido vira 0; quantity inválida (ou zero) vira 1.
    """
    return LineItem(
        product_id=raw.get("product_id") or "",
        name=raw.get("name") or "",
        price=parse_float(raw.get("price"), default=0.0),
        currency=raw.get("currency") or DEFAULT_CURRENCY,
        quantity=parse_int(raw.get("quantity"), default=1) or 1,
        product_variant_id=raw.get("product_variant_id") or None,
        product_image=raw.get("product_image") or None,
        product_url=raw.get("product_url") or None,
        category=_normalize_category(raw.get("category")),
    )


def parse_line_items(raw_items: Iterable[Mapping[str, Any]] | None) -> list[LineItem]:
    """Converte a lista crua de itens preservando a ordem."""
    if not raw_items:
        return []
    return [build_line_item(item) for item in raw_items if isinstance(item, Mapping)]
