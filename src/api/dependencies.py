"""
FastAPI dependencies for dependency injection.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from src.modules.nearby_ranking import Orchestrator, get_orchestrator

# Rate limiter, keyed on the client address
limiter = Limiter(key_func=get_remote_address)


def get_orchestrator_dep() -> Orchestrator:
    """Dependency for orchestrator."""
    return get_orchestrator()
