"""Testes do resource ecommerce."""

from __future__ import annotations

import pytest

from app.domain.actions import OperationContext
from app.use_cases.attentive import EcommerceHandler
from tests.fakes.fake_attentive_client import FakeAttentiveClient
from utils.errors import ValidationError

_ITEM = {
    "product_id": "sku-1",
    "name": "Sneaker",
    "price": "59.90",
    "quantity": "2",
    "category": "shoes",
}


@pytest.mark.parametrize(
    ("operation", "path"),
    [
        ("productView", "/events/ecommerce/product-view"),
        ("addToCart", "/events/ecommerce/add-to-cart"),
        ("removeFromCart", "/events/ecommerce/remove-from-cart"),
    ],
)
@pytest.mark.asyncio
async def test_product_events(operation: str, path: str) -> None:
    client = FakeAttentiveClient()
    context = OperationContext(
        {
            "phone": "+19148440001",
            "items": [_ITEM],
            "event_options": {"occurred_at": "2024-03-01T12:00:00+00:00"},
        }
    )

    await EcommerceHandler(client).execute(operation, context)

    assert client.last_call.path == path
    assert client.last_call.body == {
        "user": {"phone": "+19148440001"},
        "items": [
            {
                "productId": "sku-1",
                "name": "Sneaker",
                "price": {"value": 59.9, "currency": "USD"},
                "quantity": 2,
                "category": ["shoes"],
            }
        ],
        "occurredAt": "2024-03-01T12:00:00.000Z",
    }


@pytest.mark.asyncio
async def test_purchase_omits_zero_amounts() -> None:
    client = FakeAttentiveClient()
    context = OperationContext(
        {
            "identifier_type": "email",
            "email": "jane@example.com",
            "order_id": "1001",
            "items": [{"product_id": "sku-1", "name": "Sneaker", "price": "bad"}],
            "order_options": {
                "currency": "BRL",
                "total_amount": 120.5,
                "discount_amount": 0,
                "tax_amount": 4.5,
            },
        }
    )

    await EcommerceHandler(client).execute("purchase", context)

    body = client.last_call.body
    assert client.last_call.path == "/events/ecommerce/purchase"
    assert body["orderId"] == "1001"
    assert body["currency"] == "BRL"
    assert body["order"] == {"total": {"value": 120.5, "currency": "BRL"}}
    assert body["tax"] == {"value": 4.5, "currency": "BRL"}
    assert "discount" not in body
    assert "shipping" not in body
    assert body["items"][0]["price"] == {"value": 0.0, "currency": "USD"}
    assert body["items"][0]["quantity"] == 1


@pytest.mark.asyncio
async def test_abandoned_cart_total() -> None:
    client = FakeAttentiveClient()
    context = OperationContext(
        {
            "phone": "+19148440001",
            "items": [],
            "order_options": {"total_amount": 80},
        }
    )

    await EcommerceHandler(client).execute("abandoned", context)

    body = client.last_call.body
    assert client.last_call.path == "/events/ecommerce/abandoned"
    assert body["cart"] == {"total": {"value": 80, "currency": "USD"}}
    assert "items" not in body
    assert "currency" not in body


@pytest.mark.parametrize(
    "operation", ["productView", "addToCart", "removeFromCart", "purchase", "abandoned"]
)
@pytest.mark.asyncio
async def test_email_identifier_without_email_sends_nothing(operation: str) -> None:
    client = FakeAttentiveClient()
    context = OperationContext(
        {"identifier_type": "email", "order_id": "1001", "items": [_ITEM]}
    )

    with pytest.raises(ValidationError, match='"email"'):
        await EcommerceHandler(client).execute(operation, context)
    assert client.calls == []
