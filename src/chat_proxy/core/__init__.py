"""
Cœur métier de Chat Proxy.
Modules indépendants sans dépendances externes au package.
"""

from .exceptions import (
    ChatProxyError,
    ConfigurationError,
    BadRequestError,
    UnknownModelError,
    MissingCredentialError,
    UpstreamError,
)
from .constants import (
    PROVIDER_ENV_VARS,
    CORS_HEADERS,
    DEFAULT_STREAM_CONTENT_TYPE,
)
from .models import (
    ChatMessage,
    ChatRequest,
    UpstreamRequest,
    ModelDescriptor,
)

__all__ = [
    # Exceptions
    "ChatProxyError",
    "ConfigurationError",
    "BadRequestError",
    "UnknownModelError",
    "MissingCredentialError",
    "UpstreamError",
    # Constants
    "PROVIDER_ENV_VARS",
    "CORS_HEADERS",
    "DEFAULT_STREAM_CONTENT_TYPE",
    # Models
    "ChatMessage",
    "ChatRequest",
    "UpstreamRequest",
    "ModelDescriptor",
]
