"""
Liste des modèles sélectionnables selon les clés API présentes.
"""
import logging
from typing import List, Tuple

from ..config.loader import get_credential
from ..core.models import ModelDescriptor

logger = logging.getLogger(__name__)

# Ordre d'affichage: provider, puis modèles du provider
PROVIDER_MODELS: List[Tuple[str, List[Tuple[str, str]]]] = [
    ("deepseek", [
        ("deepseek-chat", "DeepSeek-V3"),
        ("deepseek-reasoner", "DeepSeek-R1"),
    ]),
    ("openai", [
        ("gpt-4o-mini", "GPT-4o Mini (OpenAI)"),
    ]),
    ("gemini", [
        ("gemini-flash", "Gemini 2.0 Flash (Google)"),
        ("gemini-flash-lite", "Gemini 2.0 Flash-Lite (Google)"),
    ]),
    ("claude", [
        ("claude", "Claude 3 Sonnet (Anthropic)"),
    ]),
    ("nebius", [
        ("nebius-studio", "Nebius Studio"),
    ]),
]


def default_models() -> List[ModelDescriptor]:
    """Paire DeepSeek renvoyée quand aucune clé n'est configurée ou en cas d'erreur."""
    _, models = PROVIDER_MODELS[0]
    return [ModelDescriptor(value, label) for value, label in models]


def list_available_models() -> List[ModelDescriptor]:
    """
    Construit la liste des modèles dont la clé API est définie.

    Returns:
        Descripteurs dans l'ordre des providers; la paire DeepSeek
        par défaut si aucune clé n'est présente
    """
    result: List[ModelDescriptor] = []
    for provider, models in PROVIDER_MODELS:
        if get_credential(provider) is None:
            continue
        result.extend(ModelDescriptor(value, label) for value, label in models)

    if not result:
        logger.debug("Aucune clé API configurée, liste DeepSeek par défaut")
        return default_models()
    return result
