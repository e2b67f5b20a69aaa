from .settings import settings, get_settings
from .constants import ServiceStatus

__all__ = [
    "settings",
    "get_settings",
    "ServiceStatus",
]
