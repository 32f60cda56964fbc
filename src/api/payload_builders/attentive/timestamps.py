"""Timestamps ISO-8601 no formato aceito pela API (milissegundos + Z)."""

from __future__ import annotations

import math
from datetime import UTC, datetime

from utils.errors import ValidationError


def format_timestamp(moment: datetime) -> str:
    """Formata como YYYY-MM-DDTHH:MM:SS.mmmZ em UTC.

    Datetimes sem timezone são tratados como UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    moment = moment.astimezone(UTC)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def parse_timestamp(raw: str | int | float) -> datetime:
    """Interpreta data/data-hora ISO-8601 (aceita sufixo Z) ou epoch em ms.

    Números são milissegundos desde a epoch, em UTC.

    Raises:
        ValidationError: Se o valor não puder ser interpretado.
    """
    if isinstance(raw, int | float) and not isinstance(raw, bool):
        if not math.isfinite(raw):
            raise ValidationError(f'Invalid date/time value: "{raw}"')
        try:
            return datetime.fromtimestamp(raw / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError) as exc:
            raise ValidationError(f'Invalid date/time value: "{raw}"') from exc

    text = str(raw).strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValidationError(f'Invalid date/time value: "{raw}"') from exc


def resolve_timestamp(raw: str | int | float | datetime | None = None) -> str:
    """Timestamp informado reformatado, ou o instante atual se ausente.

    Examples:
        >>> resolve_timestamp("2024-01-15T10:30:00Z")
        '2024-01-15T10:30:00.000Z'
        >>> resolve_timestamp(1705314600000)
        '2024-01-15T10:30:00.000Z'
    """
    if raw is None or raw == "":
        return format_timestamp(datetime.now(UTC))
    if isinstance(raw, datetime):
        return format_timestamp(raw)
    return format_timestamp(parse_timestamp(raw))
