"""
Transformations de format entre messages OpenAI et autres APIs (Gemini, Claude).
"""
from typing import Dict, Any, List

from ..core.constants import GEMINI_BASE_URL
from ..core.models import ChatMessage


def _pick(msg: ChatMessage, keys: Dict[str, str]) -> Dict[str, Any]:
    """Copie les clés présentes en les renommant; une clé absente n'est pas émise."""
    return {target: msg[source] for source, target in keys.items() if source in msg}


def build_gemini_endpoint(
    api_version: str,
    model: str,
    base_url: str = GEMINI_BASE_URL
) -> str:
    """
    Construit l'endpoint Gemini en mode SSE.

    La clé API part dans le header X-goog-api-key, pas dans l'URL.

    Args:
        api_version: Segment de version ("v1", "v1beta")
        model: Nom du modèle Gemini
        base_url: URL de base de l'API

    Returns:
        URL complète
    """
    return f"{base_url}/{api_version}/models/{model}:generateContent?alt=sse"


def convert_to_gemini_contents(messages: List[ChatMessage]) -> List[Dict[str, Any]]:
    """
    Convertit des messages OpenAI en `contents` Gemini.

    Les messages system sont retirés; "user" reste "user", tout autre
    rôle devient "model".

    Args:
        messages: Messages au format OpenAI

    Returns:
        Liste de contents Gemini
    """
    contents = []
    for msg in messages:
        role = msg.get("role")
        if role == "system":
            continue
        contents.append({
            "role": "user" if role == "user" else "model",
            "parts": [_pick(msg, {"content": "text"})]
        })
    return contents


def convert_to_claude_messages(messages: List[ChatMessage]) -> List[Dict[str, Any]]:
    """Ne garde que role/content de chaque message (format Anthropic Messages)."""
    return [_pick(msg, {"role": "role", "content": "content"}) for msg in messages]
