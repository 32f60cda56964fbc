"""Aviso de uso logado uma única vez por processo."""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)

USAGE_NOTICE = (
    "Attentive connector in use. Requests are sent to the Attentive REST API "
    "with the configured account API key."
)

_lock = threading.Lock()
_notice_logged = False


def log_usage_notice_once() -> bool:
    """Loga o aviso no primeiro uso do processo; nunca é resetado.

    Returns:
        True se esta chamada emitiu o aviso.
    """
    global _notice_logged
    if _notice_logged:
        return False
    with _lock:
        if _notice_logged:
            return False
        _notice_logged = True
    logger.warning("attentive_usage_notice", extra={"notice": USAGE_NOTICE})
    return True
