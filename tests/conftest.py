"""
Configuration des tests pytest.
"""
import pytest
import sys
import os
from typing import Callable, List

import httpx

# Ajoute src au path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from chat_proxy.config import loader  # noqa: E402
from chat_proxy.core.constants import PROVIDER_ENV_VARS  # noqa: E402
from chat_proxy.proxy import dispatcher  # noqa: E402
from chat_proxy.proxy.client import ProxyClient  # noqa: E402


class FakeUpstream:
    """Provider simulé via httpx.MockTransport, enregistre les requêtes reçues."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = self._default_handler

    @staticmethod
    def _default_handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            headers={"content-type": "text/event-stream"},
            content=b'data: {"choices": [{"delta": {"content": "Bonjour"}}]}\n\ndata: [DONE]\n\n'
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Aucune clé API ni config du poste de dev ne fuit dans les tests."""
    for env_var in PROVIDER_ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.delenv("CHAT_PROXY_CONFIG", raising=False)
    loader._clear_config_cache()
    yield
    loader._clear_config_cache()


@pytest.fixture
def fake_upstream(monkeypatch) -> FakeUpstream:
    """Remplace le client sortant du dispatcher par un MockTransport."""
    upstream = FakeUpstream()

    def _fake_create_proxy_client(timeout=None, connect_timeout=10.0):
        return ProxyClient(
            timeout=timeout,
            connect_timeout=connect_timeout,
            transport=httpx.MockTransport(upstream)
        )

    monkeypatch.setattr(dispatcher, "create_proxy_client", _fake_create_proxy_client)
    return upstream


@pytest.fixture
def sample_messages():
    """Fixture pour des messages de test."""
    return [
        {"role": "system", "content": "Tu es un assistant utile."},
        {"role": "user", "content": "Bonjour, comment ça va?"},
        {"role": "assistant", "content": "Je vais bien, merci!"}
    ]
