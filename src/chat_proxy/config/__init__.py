"""
Configuration de Chat Proxy.
"""

from .loader import (
    load_config,
    reload_config,
    get_config,
    get_credential,
    get_configured_providers,
)
from .settings import Settings, get_settings

__all__ = [
    "load_config",
    "reload_config",
    "get_config",
    "get_credential",
    "get_configured_providers",
    "Settings",
    "get_settings",
]
