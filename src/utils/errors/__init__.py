"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ApiError,
    AttentiveError,
    AuthError,
    UnsupportedOperationError,
    ValidationError,
)

__all__ = [
    "ApiError",
    "AttentiveError",
    "AuthError",
    "UnsupportedOperationError",
    "ValidationError",
]
