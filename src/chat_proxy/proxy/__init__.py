"""
Logique de proxy HTTP vers les APIs LLM.
"""

from .adapters import (
    ProviderAdapter,
    DeepSeekAdapter,
    OpenAIAdapter,
    GeminiAdapter,
    NebiusAdapter,
    ClaudeAdapter,
    ADAPTERS,
    resolve_adapter,
)
from .transformers import (
    build_gemini_endpoint,
    convert_to_gemini_contents,
    convert_to_claude_messages,
)
from .stream import (
    stream_passthrough,
    build_streaming_response,
)
from .client import create_proxy_client, ProxyClient
from .dispatcher import dispatch

__all__ = [
    "ProviderAdapter",
    "DeepSeekAdapter",
    "OpenAIAdapter",
    "GeminiAdapter",
    "NebiusAdapter",
    "ClaudeAdapter",
    "ADAPTERS",
    "resolve_adapter",
    "build_gemini_endpoint",
    "convert_to_gemini_contents",
    "convert_to_claude_messages",
    "stream_passthrough",
    "build_streaming_response",
    "create_proxy_client",
    "ProxyClient",
    "dispatch",
]
