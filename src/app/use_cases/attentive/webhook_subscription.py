"""Ciclo de vida do webhook do trigger (registro na Attentive).

O id do webhook registrado vive num mapping mutável fornecido pelo host
(chave `webhook_id`), que persiste entre ativações do trigger.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.bootstrap.notice import log_usage_notice_once
from app.use_cases.attentive.webhook import validate_events
from utils.errors import ApiError, AttentiveError

if TYPE_CHECKING:
    from collections.abc import MutableMapping, Sequence

    from app.protocols.attentive import AttentiveTransportProtocol

logger = logging.getLogger(__name__)

WEBHOOK_ID_KEY = "webhook_id"


class WebhookSubscriptionManager:
    """check_exists / create / delete do webhook do trigger."""

    def __init__(self, client: AttentiveTransportProtocol) -> None:
        self._client = client

    async def check_exists(self, state: MutableMapping[str, Any], webhook_url: str) -> bool:
        """Confere se o webhook já está registrado.

        Com id conhecido, consulta direto; se a consulta falhar o id é
        esquecido. Sem id, procura um webhook com a mesma URL e adota o id.
        """
        log_usage_notice_once()

        webhook_id = state.get(WEBHOOK_ID_KEY)
        if webhook_id:
            try:
                await self._client.request("GET", f"/webhooks/{webhook_id}")
            except AttentiveError:
                logger.info("attentive_webhook_stale_id")
                state.pop(WEBHOOK_ID_KEY, None)
                return False
            return True

        try:
            response = await self._client.request("GET", "/webhooks")
        except AttentiveError as exc:
            logger.warning(
                "attentive_webhook_lookup_failed",
                extra={"error_type": type(exc).__name__},
            )
            return False

        webhooks = response.get("webhooks") if isinstance(response, dict) else None
        for webhook in webhooks or []:
            if isinstance(webhook, dict) and webhook.get("url") == webhook_url:
                state[WEBHOOK_ID_KEY] = webhook.get("id")
                logger.info("attentive_webhook_adopted")
                return True
        return False

    async def create(
        self,
        state: MutableMapping[str, Any],
        webhook_url: str,
        events: Sequence[str],
        secret: str | None = None,
    ) -> bool:
        """Registra o webhook e guarda o id retornado.

        Raises:
            ValidationError: Se algum evento estiver fora do vocabulário.
            ApiError: Se o registro falhar.
        """
        log_usage_notice_once()

        body: dict[str, Any] = {"url": webhook_url, "events": validate_events(list(events))}
        if secret:
            body["secret"] = secret

        try:
            response = await self._client.request("POST", "/webhooks", body)
        except AttentiveError as exc:
            status_code = exc.status_code if isinstance(exc, ApiError) else None
            raise ApiError(
                f"Failed to create Attentive webhook: {exc}",
                status_code=status_code,
            ) from exc

        state[WEBHOOK_ID_KEY] = response.get("id") if isinstance(response, dict) else None
        logger.info("attentive_webhook_created", extra={"events": list(body["events"])})
        return True

    async def delete(self, state: MutableMapping[str, Any]) -> bool:
        """Remove o webhook conhecido; falhas são logadas e ignoradas."""
        webhook_id = state.get(WEBHOOK_ID_KEY)
        if webhook_id:
            try:
                await self._client.request("DELETE", f"/webhooks/{webhook_id}")
            except AttentiveError as exc:
                logger.warning(
                    "attentive_webhook_delete_failed",
                    extra={"error_type": type(exc).__name__, "detail": str(exc)},
                )
            state.pop(WEBHOOK_ID_KEY, None)
        return True
