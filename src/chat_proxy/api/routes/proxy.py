"""
Route proxy principale /api/ai.
"""
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from ...core.exceptions import ChatProxyError
from ...core.models import ChatRequest
from ...proxy.dispatcher import dispatch

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/ai")
async def proxy_chat(request: Request) -> Response:
    """
    Proxy vers le provider du modèle demandé.

    Body: {"model": str, "messages": [{"role", "content"}, ...]}

    Succès: body upstream streamé tel quel (statut et Content-Type upstream).
    Échec: {"error": message} avec 400, 500 ou le statut upstream.
    """
    try:
        data = await request.json()
        chat_request = ChatRequest.from_dict(data)
        return await dispatch(chat_request.model, chat_request.messages)

    except ChatProxyError as e:
        logger.warning("Requête /api/ai rejetée: %s", e)
        return JSONResponse({"error": e.message}, status_code=e.status_code)

    except Exception as e:
        logger.exception("Erreur proxy /api/ai")
        return JSONResponse({"error": str(e) or "Internal error"}, status_code=500)
