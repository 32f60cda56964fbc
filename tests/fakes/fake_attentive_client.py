"""Fake in-memory do transporte Attentive para testes deterministas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RecordedCall:
    method: str
    path: str
    body: dict[str, Any] | None
    query: dict[str, Any] | None
    result_key: str | None = None
    paginated: bool = False


class FakeAttentiveClient:
    """Implementa AttentiveTransportProtocol sem IO.

    Respostas são configuradas por (method, path); chamadas sem resposta
    configurada devolvem {"ok": True}. Erros configurados são levantados
    no lugar da resposta.
    """

    def __init__(self) -> None:
        self.calls: list[RecordedCall] = []
        self._responses: dict[tuple[str, str], Any] = {}
        self._errors: dict[tuple[str, str], Exception] = {}

    def respond(self, method: str, path: str, payload: Any) -> None:
        self._responses[(method, path)] = payload

    def fail(self, method: str, path: str, error: Exception) -> None:
        self._errors[(method, path)] = error

    async def request(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
    ) -> Any:
        self.calls.append(RecordedCall(method, path, body, query))
        error = self._errors.get((method, path))
        if error is not None:
            raise error
        return self._responses.get((method, path), {"ok": True})

    async def request_all_items(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
        result_key: str = "data",
    ) -> list[Any]:
        self.calls.append(
            RecordedCall(method, path, body, query, result_key=result_key, paginated=True)
        )
        error = self._errors.get((method, path))
        if error is not None:
            raise error
        return list(self._responses.get((method, path), []))

    @property
    def last_call(self) -> RecordedCall:
        return self.calls[-1]
