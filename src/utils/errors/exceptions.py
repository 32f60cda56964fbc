"""Exceções de domínio do conector Attentive.

Todas as falhas sobem até o dispatcher, que é o único ponto de recuperação.
"""

from __future__ import annotations


class AttentiveError(Exception):
    """Base para falhas do conector Attentive."""


class AuthError(AttentiveError):
    """Credencial ausente ou inválida (fatal, sem retry)."""


class ValidationError(AttentiveError, ValueError):
    """Entrada malformada (telefone, timestamp, parâmetro obrigatório)."""


class ApiError(AttentiveError):
    """Resposta não-2xx ou falha de transporte da API Attentive.

    Attributes:
        status_code: Status HTTP upstream (None para falha de transporte)
        upstream_message: Mensagem original antes da classificação
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        upstream_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.upstream_message = upstream_message


class UnsupportedOperationError(AttentiveError):
    """Combinação resource/operation desconhecida (bug de configuração)."""

    def __init__(
        self,
        operation: str,
        resource: str | None = None,
        message: str | None = None,
    ) -> None:
        if message is None and resource:
            message = f"Unsupported operation '{operation}' for resource '{resource}'"
        elif message is None:
            message = f"Unsupported operation: {operation}"
        super().__init__(message)
        self.operation = operation
        self.resource = resource
