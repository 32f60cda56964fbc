"""Construção do identificador de assinante (telefone OU email)."""

from __future__ import annotations

from typing import Any

from api.validators.attentive.phone import require_phone
from utils.errors import ValidationError

IDENTIFIER_TYPES: tuple[str, ...] = ("phone", "email")


def build_user_identifier(
    identifier_type: str,
    phone: str | None = None,
    email: str | None = None,
) -> dict[str, Any]:
    """Monta o objeto `user` com exatamente um campo de identificação.

    Telefone passa por normalização + validação E.164; email só precisa
    estar presente (o formato não é checado).

    Raises:
        ValidationError: Se o tipo for desconhecido, o telefone inválido
            ou o email ausente.
    """
    if identifier_type == "phone":
        return {"phone": require_phone(phone)}
    if identifier_type == "email":
        if email is None or not str(email).strip():
            raise ValidationError('Missing required parameter: "email"')
        return {"email": email}
    expected = " or ".join(f'"{name}"' for name in IDENTIFIER_TYPES)
    raise ValidationError(f'Invalid identifier type: "{identifier_type}". Expected {expected}.')


def identifier_from_entry(entry: dict[str, Any]) -> dict[str, Any] | None:
    """Identificador de uma entrada de lote: telefone tem precedência.

    Returns:
        {"phone": ...}, {"email": ...} ou None se a entrada não tem nenhum.
    """
    if entry.get("phone"):
        return {"phone": require_phone(entry["phone"])}
    if entry.get("email"):
        return {"email": entry["email"]}
    return None
