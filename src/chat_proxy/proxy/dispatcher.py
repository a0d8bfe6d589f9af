"""
Dispatch d'une requête chat vers l'adapter du modèle demandé.
"""
import logging
from typing import List, Optional

from fastapi.responses import Response

from ..config.loader import get_credential
from ..config.settings import Settings, get_settings
from ..core.exceptions import BadRequestError, MissingCredentialError, UpstreamError
from ..core.models import ChatMessage
from .adapters import resolve_adapter
from .client import create_proxy_client
from .stream import build_streaming_response

logger = logging.getLogger(__name__)


def _is_absent(messages) -> bool:
    # [] et {} comptent comme présents; false, 0, "" comme absents
    if messages is None:
        return True
    return not messages and not isinstance(messages, (list, dict))


async def dispatch(
    model: Optional[str],
    messages: Optional[List[ChatMessage]],
    settings: Optional[Settings] = None
) -> Response:
    """
    Envoie la requête au provider et relaie son stream.

    Étapes:
    1. Validation des champs
    2. Résolution de l'adapter (registre fixe)
    3. Vérification de la clé API, avant tout appel réseau
    4. POST upstream en streaming
    5. Pré-check du statut pour les adapters qui le demandent

    Args:
        model: Identifiant du modèle
        messages: Messages de la conversation
        settings: Réglages (timeouts); lus depuis la config si absents

    Returns:
        StreamingResponse relayant le body upstream

    Raises:
        BadRequestError: model ou messages absent
        UnknownModelError: model hors registre
        MissingCredentialError: clé API du provider non définie
        UpstreamError: statut non-2xx sur un adapter à pré-check
        httpx.HTTPError: échec réseau à la connexion
    """
    if not model or _is_absent(messages):
        raise BadRequestError()

    adapter = resolve_adapter(model)

    api_key = get_credential(adapter.provider)
    if api_key is None:
        raise MissingCredentialError(adapter.provider, adapter.env_var)

    upstream = adapter.build_request(messages, api_key)
    logger.debug("Requête upstream: %s", upstream.to_dict())

    settings = settings or get_settings()
    client = create_proxy_client(
        timeout=settings.upstream_timeout,
        connect_timeout=settings.connect_timeout
    )
    response = await client.send_streaming(upstream)
    logger.info(
        "%s -> %s: HTTP %d",
        model, upstream.provider, response.status_code
    )

    if upstream.check_status and not response.is_success:
        try:
            await response.aread()
            error_text = response.text
        finally:
            await client.aclose(response)
        raise UpstreamError(error_text, response.status_code, upstream.provider)

    try:
        return build_streaming_response(response, client, upstream.provider)
    except Exception:
        await client.aclose(response)
        raise
