"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="attentive-connector")
    logger = get_logger(__name__)

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- timestamp (UTC, milissegundos)

Logs nunca carregam API key nem telefone completo.
"""

from config.logging.config import configure_logging, get_logger, log_api_call
from config.logging.filters import CorrelationIdFilter, SensitiveDataFilter, mask_sensitive
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "SensitiveDataFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_api_call",
    "mask_sensitive",
]
