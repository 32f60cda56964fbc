"""Protocolos e contratos do core da aplicação."""

from .attentive import AttentiveTransportProtocol, ResourceHandlerProtocol

__all__ = [
    "AttentiveTransportProtocol",
    "ResourceHandlerProtocol",
]
