"""
Services métier de Chat Proxy.
"""

from .availability import list_available_models, default_models, PROVIDER_MODELS

__all__ = [
    "list_available_models",
    "default_models",
    "PROVIDER_MODELS",
]
