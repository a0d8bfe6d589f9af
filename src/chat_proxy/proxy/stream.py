"""
Relais du stream upstream vers le client, sans buffering ni re-framing.

Pourquoi une gestion d'erreurs ici:
- Une fois les headers envoyés, on ne peut plus renvoyer un JSON d'erreur
- Le provider peut couper la connexion (ReadError) en plein stream
- Le client et la réponse upstream doivent être fermés dans tous les cas
"""
import logging
from datetime import datetime
from typing import AsyncGenerator

import httpx
from fastapi.responses import StreamingResponse

from ..core.constants import DEFAULT_STREAM_CONTENT_TYPE
from .client import ProxyClient

logger = logging.getLogger(__name__)

# Types d'erreurs streaming connus
STREAMING_ERROR_TYPES = {
    "read_error": "Connexion interrompue par le provider",
    "timeout_error": "Timeout lors de la lecture du stream",
    "decode_error": "Erreur de décodage des données",
    "unknown": "Erreur streaming inconnue"
}


async def stream_passthrough(
    response: httpx.Response,
    client: ProxyClient,
    provider: str = "unknown"
) -> AsyncGenerator[bytes, None]:
    """
    Yield les chunks du body upstream tels quels.

    Args:
        response: Réponse HTTPX en streaming
        client: Client propriétaire de la réponse, fermé en fin de stream
        provider: Clé du provider (pour les logs)

    Yields:
        Chunks de la réponse

    Raises:
        Aucune: Les erreurs réseau sont loggées et le stream se termine
    """
    chunk_count = 0
    stream_start_time = datetime.now()

    try:
        async for chunk in response.aiter_bytes():
            chunk_count += 1
            yield chunk

    except httpx.ReadError as e:
        _log_streaming_error("read_error", provider, chunk_count, str(e), stream_start_time)

    except httpx.TimeoutException as e:
        _log_streaming_error("timeout_error", provider, chunk_count, str(e), stream_start_time)

    except httpx.DecodingError as e:
        _log_streaming_error("decode_error", provider, chunk_count, str(e), stream_start_time)

    except httpx.HTTPError as e:
        _log_streaming_error("unknown", provider, chunk_count, str(e), stream_start_time)

    finally:
        await client.aclose(response)
        logger.debug(
            "Stream %s terminé: %d chunk(s) en %.2fs",
            provider, chunk_count, (datetime.now() - stream_start_time).total_seconds()
        )


def _log_streaming_error(
    error_type: str,
    provider: str,
    chunks_received: int,
    error: str,
    start_time: datetime
) -> None:
    """Log structuré d'une erreur streaming."""
    duration = (datetime.now() - start_time).total_seconds()
    error_msg = STREAMING_ERROR_TYPES.get(error_type, STREAMING_ERROR_TYPES["unknown"])

    logger.warning(
        "[STREAM_ERROR] %s (provider=%s, chunks=%d, durée=%.2fs): %s",
        error_msg, provider, chunks_received, duration, error[:200]
    )


class UpstreamStreamingResponse(StreamingResponse):
    """
    StreamingResponse propriétaire de la connexion upstream.

    Le générateur ferme la connexion s'il a démarré; sinon (client parti
    avant le premier chunk) la fermeture se fait à la fin de `__call__`.
    """

    def __init__(self, content, upstream: httpx.Response, client: ProxyClient, **kwargs):
        super().__init__(content, **kwargs)
        self.upstream = upstream
        self.client = client

    async def __call__(self, scope, receive, send) -> None:
        try:
            await super().__call__(scope, receive, send)
        finally:
            await self.client.aclose(self.upstream)


def build_streaming_response(
    response: httpx.Response,
    client: ProxyClient,
    provider: str = "unknown"
) -> StreamingResponse:
    """
    Enveloppe la réponse upstream dans une StreamingResponse.

    Le statut upstream est conservé, le Content-Type aussi (défaut
    application/octet-stream), et la mise en cache est désactivée.
    """
    content_type = response.headers.get("content-type") or DEFAULT_STREAM_CONTENT_TYPE
    return UpstreamStreamingResponse(
        stream_passthrough(response, client, provider),
        upstream=response,
        client=client,
        status_code=response.status_code,
        headers={
            # Pas de media_type: Starlette y ajouterait un charset
            "Content-Type": content_type,
            "Cache-Control": "no-store",
        },
    )
