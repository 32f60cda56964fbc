"""Builders de payload para a API Attentive.

Funções puras: poda de bodies, pares chave/valor, itens de produto,
valores monetários e timestamps.
"""

from api.payload_builders.attentive.attributes import parse_attribute_list
from api.payload_builders.attentive.cleaning import prune
from api.payload_builders.attentive.line_items import (
    DEFAULT_CURRENCY,
    LineItem,
    build_line_item,
    parse_line_items,
)
from api.payload_builders.attentive.numbers import money, parse_float, parse_int
from api.payload_builders.attentive.timestamps import (
    format_timestamp,
    parse_timestamp,
    resolve_timestamp,
)

__all__ = [
    "DEFAULT_CURRENCY",
    "LineItem",
    "build_line_item",
    "format_timestamp",
    "money",
    "parse_attribute_list",
    "parse_float",
    "parse_int",
    "parse_line_items",
    "parse_timestamp",
    "prune",
    "resolve_timestamp",
]
