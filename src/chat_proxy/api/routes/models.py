"""Routes API pour la liste des modèles.

Convention dans ce repo:
- `POST /api/models` : modèles sélectionnables selon les clés API présentes.
- `OPTIONS /api/models` : pré-vol CORS, body vide.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response

from ...core.constants import CORS_HEADERS
from ...services.availability import list_available_models, default_models

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
async def api_post_models() -> JSONResponse:
    """Retourne {"models": [...]} avec headers CORS permissifs."""
    try:
        models = [m.to_dict() for m in list_available_models()]
        return JSONResponse({"models": models}, status_code=200, headers=CORS_HEADERS)
    except Exception as e:
        logger.exception("Erreur lors de la construction de la liste des modèles")
        return JSONResponse(
            {
                "error": str(e) or "Internal error",
                "models": [m.to_dict() for m in default_models()],
            },
            status_code=500,
        )


@router.options("")
async def api_options_models() -> Response:
    """Pré-vol CORS."""
    return Response(status_code=200, headers=CORS_HEADERS)
