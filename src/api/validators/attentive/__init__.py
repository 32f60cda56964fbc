"""Validadores Attentive: telefone E.164, identificadores e limites.

Uso:
    from api.validators.attentive import require_phone, build_user_identifier

    phone = require_phone("1-914-844-0001")  # "+19148440001"
    user = build_user_identifier("email", email="jane@example.com")
"""

from api.validators.attentive.identifiers import (
    IDENTIFIER_TYPES,
    build_user_identifier,
    identifier_from_entry,
)
from api.validators.attentive.limits import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    MIN_LIMIT,
    validate_limit,
)
from api.validators.attentive.phone import (
    E164_PATTERN,
    is_e164,
    normalize_phone,
    require_phone,
)

__all__ = [
    "DEFAULT_LIMIT",
    "E164_PATTERN",
    "IDENTIFIER_TYPES",
    "MAX_LIMIT",
    "MIN_LIMIT",
    "build_user_identifier",
    "identifier_from_entry",
    "is_e164",
    "normalize_phone",
    "require_phone",
    "validate_limit",
]
