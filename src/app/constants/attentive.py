"""Enums e tabelas estáticas do conector Attentive.

A tabela de parâmetros descreve, por resource/operation, os campos lidos
de cada item de entrada. É consumida pelo catálogo exposto ao host.
"""

from __future__ import annotations

from enum import StrEnum


class Resource(StrEnum):
    """Resources expostos pelo conector."""

    SUBSCRIBER = "subscriber"
    MESSAGE = "message"
    CUSTOM_EVENT = "customEvent"
    CUSTOM_ATTRIBUTE = "customAttribute"
    ECOMMERCE = "ecommerce"
    SEGMENT = "segment"
    JOURNEY = "journey"
    SIGN_UP_UNIT = "signUpUnit"
    KEYWORD = "keyword"
    WEBHOOK = "webhook"


class SubscriptionType(StrEnum):
    """Tipos de assinatura aceitos pela Attentive."""

    MARKETING = "MARKETING"
    TRANSACTIONAL = "TRANSACTIONAL"


class JourneyStatus(StrEnum):
    """Filtro de status das jornadas."""

    ACTIVE = "active"
    PAUSED = "paused"
    DRAFT = "draft"


class SignUpUnitType(StrEnum):
    """Filtro de tipo das unidades de cadastro."""

    POPUP = "popup"
    FORM = "form"
    KEYWORD = "keyword"


WEBHOOK_EVENTS: tuple[str, ...] = (
    "subscription.created",
    "subscription.opted_out",
    "message.sent",
    "message.delivered",
    "message.clicked",
    "message.replied",
    "message.failed",
)

_LIST_PARAMS = ("return_all", "limit")
_IDENTIFIER_PARAMS = ("identifier_type", "phone", "email")

OPERATION_PARAMETERS: dict[str, dict[str, tuple[str, ...]]] = {
    Resource.SUBSCRIBER: {
        "subscribe": ("phone", "sign_up_source_id", "additional_fields"),
        "unsubscribe": ("phone", "notification"),
        "get": ("phone",),
        "update": ("phone", "update_fields"),
    },
    Resource.MESSAGE: {
        "send": ("to", "body", "options"),
        "sendBulk": ("recipients", "body", "options"),
        "sendTransactional": ("to", "body", "message_name", "transactional_options"),
    },
    Resource.CUSTOM_EVENT: {
        "send": ("event_type", *_IDENTIFIER_PARAMS, "event_options"),
        "sendBatch": ("events",),
    },
    Resource.CUSTOM_ATTRIBUTE: {
        "set": (*_IDENTIFIER_PARAMS, "attributes"),
        "setBatch": ("subscribers",),
        "delete": (*_IDENTIFIER_PARAMS, "attribute_key"),
    },
    Resource.ECOMMERCE: {
        "productView": (*_IDENTIFIER_PARAMS, "items", "event_options"),
        "addToCart": (*_IDENTIFIER_PARAMS, "items", "event_options"),
        "removeFromCart": (*_IDENTIFIER_PARAMS, "items", "event_options"),
        "purchase": (*_IDENTIFIER_PARAMS, "items", "order_id", "order_options"),
        "abandoned": (*_IDENTIFIER_PARAMS, "items", "order_options"),
    },
    Resource.SEGMENT: {
        "create": ("segment_name", "description"),
        "get": ("segment_id",),
        "getAll": _LIST_PARAMS,
        "update": ("segment_id", "update_fields"),
        "delete": ("segment_id",),
        "getMembers": ("segment_id", *_LIST_PARAMS),
    },
    Resource.JOURNEY: {
        "get": ("journey_id",),
        "getAll": (*_LIST_PARAMS, "filters"),
        "getStats": ("journey_id", "date_range"),
    },
    Resource.SIGN_UP_UNIT: {
        "get": ("sign_up_unit_id",),
        "getAll": (*_LIST_PARAMS, "filters"),
        "getStats": ("sign_up_unit_id", "date_range"),
    },
    Resource.KEYWORD: {
        "get": ("keyword_id",),
        "getAll": _LIST_PARAMS,
    },
    Resource.WEBHOOK: {
        "create": ("url", "events", "secret"),
        "getAll": _LIST_PARAMS,
        "delete": ("webhook_id",),
    },
}
