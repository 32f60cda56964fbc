"""Serialização JSON dos records do conector (python-json-logger).

Cada linha sai com timestamp UTC no mesmo formato das datas enviadas à
Attentive (`2026-02-02T10:30:00.000Z`), facilitando correlacionar o log
com o payload da requisição.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from pythonjsonlogger.json import JsonFormatter

if TYPE_CHECKING:
    import logging

# Atributos do LogRecord emitidos em toda linha; `extra` entra depois
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}


class AttentiveJsonFormatter(JsonFormatter):
    """JsonFormatter com `timestamp` em UTC e precisão de milissegundos."""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        moment = datetime.fromtimestamp(record.created, tz=UTC)
        return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{int(record.msecs):03d}Z"


def create_json_formatter() -> AttentiveJsonFormatter:
    """Formatter do handler raiz.

        {"timestamp": "2026-02-02T10:30:00.042Z", "level": "INFO",
         "logger": "api.connectors.attentive.http_client",
         "message": "attentive_request_ok", "correlation_id": "abc-123",
         "service": "attentive-connector", "status_code": 200}
    """
    return AttentiveJsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
    )
