"""
Adapters par provider: (model, messages, api_key) -> requête upstream.

Un adapter par identifiant de modèle accepté par /api/ai. Aucun état,
aucune logique partagée hormis les headers JSON.
"""
from dataclasses import dataclass
from typing import Dict, Any, List

from ..core.constants import (
    PROVIDER_ENV_VARS,
    DEEPSEEK_URL,
    DEEPSEEK_CHAT_TEMPERATURE,
    OPENAI_URL,
    OPENAI_MODEL,
    NEBIUS_URL,
    NEBIUS_MODEL,
    CLAUDE_URL,
    CLAUDE_MODEL,
    CLAUDE_MAX_TOKENS,
    ANTHROPIC_VERSION,
)
from ..core.exceptions import UnknownModelError
from ..core.models import ChatMessage, UpstreamRequest
from .transformers import (
    build_gemini_endpoint,
    convert_to_gemini_contents,
    convert_to_claude_messages,
)


def _bearer_headers(api_key: str) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }


@dataclass(frozen=True)
class ProviderAdapter:
    """Variante de base: un identifiant de modèle, un provider."""
    model_id: str
    provider: str

    @property
    def env_var(self) -> str:
        """Nom de la variable d'environnement portant la clé API."""
        return PROVIDER_ENV_VARS[self.provider]

    @property
    def check_status(self) -> bool:
        """Si True, un statut upstream non-2xx est renvoyé en JSON au lieu d'être streamé."""
        return False

    def build_request(self, messages: List[ChatMessage], api_key: str) -> UpstreamRequest:
        raise NotImplementedError

    def _request(self, url: str, headers: Dict[str, str], body: Dict[str, Any]) -> UpstreamRequest:
        return UpstreamRequest(
            url=url,
            headers=headers,
            body=body,
            provider=self.provider,
            check_status=self.check_status
        )


@dataclass(frozen=True)
class DeepSeekAdapter(ProviderAdapter):
    """DeepSeek: le sous-modèle est l'identifiant lui-même."""
    provider: str = "deepseek"

    def build_request(self, messages: List[ChatMessage], api_key: str) -> UpstreamRequest:
        body: Dict[str, Any] = {
            "model": self.model_id,
            "messages": messages,
            "stream": True,
        }
        # Le modèle reasoner refuse les paramètres d'échantillonnage
        if self.model_id == "deepseek-chat":
            body["temperature"] = DEEPSEEK_CHAT_TEMPERATURE
        return self._request(DEEPSEEK_URL, _bearer_headers(api_key), body)


@dataclass(frozen=True)
class OpenAIAdapter(ProviderAdapter):
    provider: str = "openai"

    def build_request(self, messages: List[ChatMessage], api_key: str) -> UpstreamRequest:
        body = {
            "model": OPENAI_MODEL,
            "messages": messages,
            "stream": True,
        }
        return self._request(OPENAI_URL, _bearer_headers(api_key), body)


@dataclass(frozen=True)
class GeminiAdapter(ProviderAdapter):
    """
    Gemini generateContent en SSE.

    Chaque variante fixe son modèle upstream, sa version d'API et sa
    generationConfig.
    """
    provider: str = "gemini"
    upstream_model: str = "gemini-2.0-flash"
    api_version: str = "v1"
    temperature: float = 1
    top_p: float = 1
    max_output_tokens: int = 1024
    precheck_status: bool = False

    @property
    def check_status(self) -> bool:
        return self.precheck_status

    def build_request(self, messages: List[ChatMessage], api_key: str) -> UpstreamRequest:
        headers = {
            "Content-Type": "application/json",
            "X-goog-api-key": api_key,
        }
        body = {
            "contents": convert_to_gemini_contents(messages),
            "generationConfig": {
                "temperature": self.temperature,
                "topP": self.top_p,
                "maxOutputTokens": self.max_output_tokens,
            },
            "safetySettings": [],
        }
        url = build_gemini_endpoint(self.api_version, self.upstream_model)
        return self._request(url, headers, body)


@dataclass(frozen=True)
class NebiusAdapter(ProviderAdapter):
    provider: str = "nebius"

    def build_request(self, messages: List[ChatMessage], api_key: str) -> UpstreamRequest:
        body = {
            "model": NEBIUS_MODEL,
            "store": False,
            "messages": messages,
            "max_tokens": 1024,
            "temperature": 1,
            "top_p": 1,
            "n": 1,
            "stream": True,
            "presence_penalty": 0,
            "frequency_penalty": 0,
        }
        return self._request(NEBIUS_URL, _bearer_headers(api_key), body)


@dataclass(frozen=True)
class ClaudeAdapter(ProviderAdapter):
    """Anthropic Messages API: clé dans X-API-Key, pas en Bearer."""
    provider: str = "claude"

    def build_request(self, messages: List[ChatMessage], api_key: str) -> UpstreamRequest:
        headers = {
            "Content-Type": "application/json",
            "X-API-Key": api_key,
            "anthropic-version": ANTHROPIC_VERSION,
        }
        body = {
            "model": CLAUDE_MODEL,
            "messages": convert_to_claude_messages(messages),
            "max_tokens": CLAUDE_MAX_TOKENS,
            "stream": True,
        }
        return self._request(CLAUDE_URL, headers, body)


# Registre: l'ensemble exact des modèles acceptés par le dispatcher
ADAPTERS: Dict[str, ProviderAdapter] = {
    adapter.model_id: adapter
    for adapter in (
        DeepSeekAdapter("deepseek-chat"),
        DeepSeekAdapter("deepseek-reasoner"),
        OpenAIAdapter("gpt-4o-mini"),
        GeminiAdapter("gemini-flash"),
        NebiusAdapter("nebius-studio"),
        ClaudeAdapter("claude"),
        GeminiAdapter(
            "gemini-flash-lite",
            upstream_model="gemini-2.0-flash-lite",
            temperature=0.7,
            top_p=0.9,
            max_output_tokens=500,
            precheck_status=True,
        ),
        GeminiAdapter(
            "gemini-2-5-flash-lite",
            upstream_model="gemini-2-5-flash-lite",
            api_version="v1beta",
            temperature=0.7,
            top_p=0.9,
            max_output_tokens=500,
            precheck_status=True,
        ),
    )
}


def resolve_adapter(model: str) -> ProviderAdapter:
    """
    Trouve l'adapter d'un identifiant de modèle.

    Raises:
        UnknownModelError: Si l'identifiant n'est pas dans le registre
    """
    adapter = ADAPTERS.get(model) if isinstance(model, str) else None
    if adapter is None:
        raise UnknownModelError(model)
    return adapter
