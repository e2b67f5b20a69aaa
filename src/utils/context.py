"""
Request context variables.

Carries the correlation id and the caller's user id (forwarded by the
authenticating gateway) across async code so every log line can be tied
back to one nearby-search request.
"""

import logging
from contextvars import ContextVar
from typing import Dict, Optional
from uuid import uuid4

logger = logging.getLogger(__name__)

_CONTEXT_VARS: Dict[str, ContextVar] = {
    "correlation_id": ContextVar("correlation_id", default=None),
    "user_id": ContextVar("user_id", default=None),
}


def get_correlation_id() -> Optional[str]:
    """Return the correlation id of the current request, if any."""
    return _CONTEXT_VARS["correlation_id"].get()


def set_correlation_id(correlation_id: str) -> None:
    if not correlation_id:
        logger.warning("Ignoring empty correlation_id")
        return
    _CONTEXT_VARS["correlation_id"].set(correlation_id)


def generate_correlation_id() -> str:
    """Create a UUID4 correlation id, store it in context and return it."""
    correlation_id = str(uuid4())
    set_correlation_id(correlation_id)
    return correlation_id


def set_user_id(user_id: str) -> None:
    _CONTEXT_VARS["user_id"].set(user_id)


def clear_all_context() -> None:
    for var in _CONTEXT_VARS.values():
        var.set(None)


def get_request_context() -> Dict[str, Optional[str]]:
    """Snapshot of every context variable, keyed by name."""
    return {name: var.get() for name, var in _CONTEXT_VARS.items()}
