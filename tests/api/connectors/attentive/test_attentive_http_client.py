"""Testes do AttentiveHttpClient com httpx.MockTransport."""

from __future__ import annotations

import json
import logging

import httpx
import pytest

from api.connectors.attentive.http_base import HttpClientConfig
from api.connectors.attentive.http_client import (
    AttentiveHttpClient,
    create_attentive_http_client,
)
from config.settings.attentive import AttentiveSettings
from utils.errors import ApiError, AuthError

BASE_URL = "https://api.attentivemobile.com/v1"


def _client(handler, **kwargs) -> AttentiveHttpClient:
    return AttentiveHttpClient(
        api_key=kwargs.pop("api_key", "test-key"),
        base_url=BASE_URL,
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


class TestRequest:
    @pytest.mark.asyncio
    async def test_missing_api_key_raises_before_io(self) -> None:
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json={})

        client = _client(handler, api_key="")

        with pytest.raises(AuthError, match="No API key provided"):
            await client.request("GET", "/segments")
        assert calls == []

    @pytest.mark.asyncio
    async def test_headers_and_json_body(self) -> None:
        captured: dict[str, object] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["headers"] = request.headers
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"id": "seg-1"})

        client = _client(handler)
        response = await client.request("POST", "/segments", {"name": "VIP"})

        assert response == {"id": "seg-1"}
        assert captured["url"] == f"{BASE_URL}/segments"
        headers = captured["headers"]
        assert headers["authorization"] == "Bearer test-key"
        assert headers["content-type"] == "application/json"
        assert headers["accept"] == "application/json"
        assert captured["body"] == {"name": "VIP"}

    @pytest.mark.asyncio
    async def test_get_never_sends_body(self) -> None:
        captured: dict[str, object] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["content"] = request.content
            captured["params"] = dict(request.url.params)
            return httpx.Response(200, json={"subscriptions": []})

        client = _client(handler)
        await client.request("GET", "/subscriptions", {"ignored": True}, {"phone": "+19148440001"})

        assert captured["content"] == b""
        assert captured["params"] == {"phone": "+19148440001"}

    @pytest.mark.asyncio
    async def test_empty_body_not_attached(self) -> None:
        captured: dict[str, object] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["content"] = request.content
            return httpx.Response(204)

        client = _client(handler)
        response = await client.request("DELETE", "/segments/seg-1", {})

        assert captured["content"] == b""
        assert response == {}

    @pytest.mark.asyncio
    async def test_http_error_is_classified(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"message": "phone is required"})

        client = _client(handler)

        with pytest.raises(ApiError) as exc_info:
            await client.request("POST", "/subscriptions", {"user": {}})

        assert str(exc_info.value) == "Bad Request: phone is required"
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_unauthorized_uses_fixed_message(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"message": "token expired"})

        client = _client(handler)

        with pytest.raises(ApiError, match="Unauthorized: Invalid API key"):
            await client.request("GET", "/segments")

    @pytest.mark.asyncio
    async def test_rate_limit_is_not_retried(self) -> None:
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(429, json={"message": "slow down"})

        client = _client(handler)

        with pytest.raises(ApiError, match="Rate Limited"):
            await client.request("GET", "/segments")
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_transport_failure_becomes_api_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("boom", request=request)

        client = _client(handler)

        with pytest.raises(ApiError) as exc_info:
            await client.request("GET", "/segments")
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_logs_do_not_contain_api_key(self, caplog: pytest.LogCaptureFixture) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"message": "oops"})

        client = _client(handler, api_key="super-secret-key")

        with caplog.at_level(logging.DEBUG), pytest.raises(ApiError):
            await client.request("GET", "/segments")

        assert "super-secret-key" not in caplog.text
        failed = [r for r in caplog.records if r.getMessage() == "attentive_request_failed"]
        assert failed and failed[0].status_code == 500


class TestRequestAllItems:
    @pytest.mark.asyncio
    async def test_paginates_until_total(self) -> None:
        offsets: list[int] = []
        records = [{"id": n} for n in range(250)]

        def handler(request: httpx.Request) -> httpx.Response:
            params = request.url.params
            offset = int(params["offset"])
            limit = int(params["limit"])
            offsets.append(offset)
            return httpx.Response(
                200,
                json={"segments": records[offset : offset + limit], "meta": {"total": 250}},
            )

        client = _client(handler)
        result = await client.request_all_items("GET", "/segments", result_key="segments")

        assert offsets == [0, 100, 200]
        assert len(result) == 250
        assert result[-1] == {"id": 249}

    @pytest.mark.asyncio
    async def test_stops_without_declared_total(self) -> None:
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json={"keywords": [{"id": "k1"}]})

        client = _client(handler)
        result = await client.request_all_items("GET", "/keywords", result_key="keywords")

        assert result == [{"id": "k1"}]
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_keeps_filters_in_query(self) -> None:
        captured: list[dict[str, str]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(dict(request.url.params))
            return httpx.Response(200, json={"journeys": []})

        client = _client(handler)
        await client.request_all_items(
            "GET", "/journeys", query={"status": "active"}, result_key="journeys"
        )

        assert captured == [{"status": "active", "limit": "100", "offset": "0"}]

    @pytest.mark.asyncio
    async def test_iteration_cap_returns_partial_and_warns(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"members": [{"id": 1}], "meta": {"total": 1000}})

        client = _client(handler, max_page_iterations=3)

        with caplog.at_level(logging.WARNING):
            result = await client.request_all_items(
                "GET", "/segments/s1/members", result_key="members"
            )

        assert len(result) == 3
        truncated = [r for r in caplog.records if r.getMessage() == "attentive_pagination_truncated"]
        assert len(truncated) == 1
        assert truncated[0].declared_total == 1000


def test_factory_uses_settings() -> None:
    settings = AttentiveSettings(
        api_key="k",
        api_base_url="https://sandbox.example/v1/",
        request_timeout_seconds=5.0,
        page_size=50,
        max_page_iterations=10,
    )

    client = create_attentive_http_client(settings)

    assert client.page_size == 50
    assert client.max_page_iterations == 10
    assert client._base_url == "https://sandbox.example/v1"
    assert client._config == HttpClientConfig(timeout_seconds=5.0)
