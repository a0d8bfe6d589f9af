"""
Chat Proxy - Application FastAPI Factory.
Proxy streaming vers DeepSeek, OpenAI, Gemini, Nebius et Claude.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from . import __version__
from .api.router import api_router
from .config.loader import load_config, get_configured_providers

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Factory pour créer l'application FastAPI.

    Returns:
        Instance configurée de FastAPI
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Gestion du cycle de vie de l'application."""
        _startup(app)
        yield
        logger.info("Arrêt du serveur")

    app = FastAPI(
        title="Chat Proxy",
        description="Proxy streaming vers plusieurs providers LLM",
        version=__version__,
        lifespan=lifespan
    )

    # Inclusion des routes API
    app.include_router(api_router)

    return app


def _startup(app: FastAPI):
    """Initialisation au démarrage."""
    app.state.config = load_config()

    providers = get_configured_providers()
    configured = [key for key, ok in providers.items() if ok]
    if configured:
        logger.info("%d provider(s) configuré(s): %s", len(configured), ", ".join(configured))
    else:
        logger.warning("Aucune clé API configurée: /api/ai répondra 500 pour tous les modèles")


# Crée l'application pour uvicorn
app = create_app()
