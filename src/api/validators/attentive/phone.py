"""Normalização e validação de telefones no formato E.164."""

from __future__ import annotations

import re

from utils.errors import ValidationError

# "+" seguido de 2 a 15 dígitos, sem zero inicial no código do país
E164_PATTERN = re.compile(r"^\+[1-9]\d{1,14}$")
_NON_PHONE_CHARS = re.compile(r"[^\d+]")


def normalize_phone(raw: str | None) -> str:
    """Remove tudo que não for dígito ou "+" e garante o prefixo "+".

    Entrada vazia devolve string vazia (sem erro).

    Examples:
        >>> normalize_phone("1-914-844-0001")
        '+19148440001'
        >>> normalize_phone("(914) 844-0001")
        '+9148440001'
    """
    if not raw:
        return ""
    digits = _NON_PHONE_CHARS.sub("", str(raw))
    if digits.startswith("+"):
        return digits
    return f"+{digits}"


def is_e164(value: str | None) -> bool:
    """True se o valor já está em E.164 estrito."""
    if not value:
        return False
    return E164_PATTERN.fullmatch(value) is not None


def require_phone(raw: str | None) -> str:
    """Normaliza e valida o telefone, devolvendo o valor canônico.

    Raises:
        ValidationError: Se o valor normalizado não for E.164. A mensagem
            ecoa a entrada original.
    """
    phone = normalize_phone(raw)
    if not is_e164(phone):
        raise ValidationError(
            f'Invalid phone number format: "{raw if raw is not None else ""}". '
            "Phone numbers must be in E.164 format (e.g., +19148440001)."
        )
    return phone
