"""Resource keyword: consulta de palavras-chave de SMS."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.attentive import Resource
from app.use_cases.attentive.base import OperationFn, ResourceHandler

if TYPE_CHECKING:
    from app.domain.actions import OperationContext


class KeywordHandler(ResourceHandler):
    name = Resource.KEYWORD

    def _operations(self) -> dict[str, OperationFn]:
        return {"get": self.get, "getAll": self.get_all}

    async def get(self, context: OperationContext) -> Any:
        keyword_id = context.require("keyword_id")
        return await self._client.request("GET", f"/keywords/{keyword_id}")

    async def get_all(self, context: OperationContext) -> Any:
        return await self._list(context, "/keywords", "keywords")
