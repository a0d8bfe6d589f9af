"""
Client HTTPX pour le proxy vers les APIs LLM.

Une requête sortante par appel, pas de retry: un client est ouvert par
appel et fermé quand le stream relayé se termine.
"""
from typing import Optional
import logging

import httpx

from ..core.constants import DEFAULT_CONNECT_TIMEOUT
from ..core.models import UpstreamRequest

logger = logging.getLogger(__name__)


class ProxyClient:
    """
    Client HTTP pour une requête streaming vers un provider.

    Gère:
    - Timeouts (connexion bornée, lecture illimitée par défaut)
    - Cycle de vie du client et de la réponse streamée
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.timeout = timeout
        self.connect_timeout = connect_timeout
        self.transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _create_client(self) -> httpx.AsyncClient:
        timeout = httpx.Timeout(self.timeout, connect=self.connect_timeout)
        return httpx.AsyncClient(timeout=timeout, transport=self.transport)

    def build_request(
        self,
        client: httpx.AsyncClient,
        upstream: UpstreamRequest
    ) -> httpx.Request:
        """Construit la requête POST JSON vers le provider."""
        return client.build_request(
            "POST",
            upstream.url,
            headers=upstream.headers,
            json=upstream.body
        )

    async def send_streaming(self, upstream: UpstreamRequest) -> httpx.Response:
        """
        Envoie la requête en mode streaming.

        Le client reste ouvert après le retour: le body n'est pas encore lu.
        Appeler `aclose()` une fois le stream consommé.

        Raises:
            httpx.HTTPError: Erreur réseau (aucun retry)
        """
        logger.debug("POST %s (provider=%s)", upstream.url, upstream.provider)
        client = self._create_client()
        try:
            request = self.build_request(client, upstream)
            response = await client.send(request, stream=True)
        except Exception:
            await client.aclose()
            raise

        self._client = client
        return response

    async def aclose(self, response: Optional[httpx.Response] = None) -> None:
        """Ferme la réponse streamée puis le client. Idempotent."""
        try:
            if response is not None:
                await response.aclose()
        finally:
            if self._client is not None:
                await self._client.aclose()
                self._client = None


def create_proxy_client(
    timeout: Optional[float] = None,
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
) -> ProxyClient:
    """
    Crée un client proxy.

    Args:
        timeout: Timeout de lecture en secondes (None: illimité)
        connect_timeout: Timeout de connexion en secondes

    Returns:
        Instance de ProxyClient
    """
    return ProxyClient(timeout=timeout, connect_timeout=connect_timeout)
