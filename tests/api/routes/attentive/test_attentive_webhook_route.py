"""Testes do endpoint de webhook Attentive."""

from __future__ import annotations

import hashlib
import hmac
import json
from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.routes.attentive import webhook


def _build_request(body: bytes, headers: dict[str, str] | None = None) -> Request:
    header_items = headers or {}
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in header_items.items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "path": "/webhook/attentive",
        "raw_path": b"/webhook/attentive",
        "query_string": b"",
        "headers": raw_headers,
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


def _sign(payload: bytes, secret: str) -> str:
    return hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()


def _use_secret(monkeypatch: pytest.MonkeyPatch, secret: str) -> None:
    monkeypatch.setattr(
        webhook, "get_attentive_settings", lambda: SimpleNamespace(webhook_secret=secret)
    )


_BODY = json.dumps(
    {
        "type": "message.delivered",
        "timestamp": "2024-02-01T09:00:00.000Z",
        "data": {"messageId": "m-1"},
    }
).encode("utf-8")


@pytest.mark.asyncio
async def test_signed_delivery_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    _use_secret(monkeypatch, "s3cr3t")
    request = _build_request(
        _BODY,
        {"X-Attentive-Signature": _sign(_BODY, "s3cr3t"), "x-correlation-id": "corr-7"},
    )

    result = await webhook.receive_webhook(request)

    assert result["status"] == "received"
    assert result["correlation_id"] == "corr-7"
    assert result["event"]["event"] == "message.delivered"
    assert result["event"]["timestamp"] == "2024-02-01T09:00:00.000Z"
    assert result["event"]["data"] == {"messageId": "m-1"}


@pytest.mark.asyncio
async def test_missing_signature_is_401(monkeypatch: pytest.MonkeyPatch) -> None:
    _use_secret(monkeypatch, "s3cr3t")

    response = await webhook.receive_webhook(_build_request(_BODY))

    assert response.status_code == 401
    assert response.body == b"Missing signature"


@pytest.mark.asyncio
async def test_wrong_signature_is_401(monkeypatch: pytest.MonkeyPatch) -> None:
    _use_secret(monkeypatch, "s3cr3t")
    request = _build_request(_BODY, {"x-attentive-signature": _sign(_BODY, "other")})

    response = await webhook.receive_webhook(request)

    assert response.status_code == 401
    assert response.body == b"Invalid signature"


@pytest.mark.asyncio
async def test_without_secret_accepts_unsigned(monkeypatch: pytest.MonkeyPatch) -> None:
    _use_secret(monkeypatch, "")
    body = json.dumps({"subscriber": "+19148440001"}).encode("utf-8")

    result = await webhook.receive_webhook(_build_request(body))

    assert result["event"]["event"] is None
    assert result["event"]["data"] == {"subscriber": "+19148440001"}
    assert result["event"]["timestamp"].endswith("Z")


@pytest.mark.asyncio
async def test_invalid_json_is_400(monkeypatch: pytest.MonkeyPatch) -> None:
    _use_secret(monkeypatch, "")

    response = await webhook.receive_webhook(_build_request(b"not json"))

    assert response.status_code == 400
