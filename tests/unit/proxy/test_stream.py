"""
Tests unitaires pour le relais streaming.

Pourquoi: le relais doit transmettre les octets tels quels, survivre
aux coupures réseau et toujours fermer la connexion upstream.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock

import httpx

from chat_proxy.proxy.stream import (
    stream_passthrough,
    build_streaming_response,
    STREAMING_ERROR_TYPES,
)


def _mock_response(chunks, status_code=200, headers=None):
    response = MagicMock()
    response.status_code = status_code
    response.headers = httpx.Headers(headers or {})
    response.aiter_bytes = MagicMock(return_value=chunks)
    return response


class TestStreamPassthrough:
    """Tests du générateur de relais."""

    @pytest.mark.anyio
    async def test_yields_chunks_unchanged(self):
        raw = [b'data: {"a": 1}\n\n', b'data: [DO', b'NE]\n\n']
        response = _mock_response(async_iter(raw))
        client = AsyncMock()

        chunks = [chunk async for chunk in stream_passthrough(response, client, "openai")]

        assert chunks == raw
        client.aclose.assert_awaited_once_with(response)

    @pytest.mark.anyio
    async def test_read_error_ends_stream(self):
        """ReadError: les chunks déjà reçus sont conservés, pas d'exception."""
        async def error_iter():
            yield b'chunk1'
            raise httpx.ReadError("Connexion perdue")

        response = _mock_response(error_iter())
        client = AsyncMock()

        chunks = [chunk async for chunk in stream_passthrough(response, client, "deepseek")]

        assert chunks == [b'chunk1']
        client.aclose.assert_awaited_once_with(response)

    @pytest.mark.anyio
    async def test_timeout_ends_stream(self):
        async def timeout_iter():
            yield b'data'
            raise httpx.ReadTimeout("Timeout")

        response = _mock_response(timeout_iter())
        client = AsyncMock()

        chunks = [chunk async for chunk in stream_passthrough(response, client, "gemini")]

        assert chunks == [b'data']
        client.aclose.assert_awaited_once()

    @pytest.mark.anyio
    async def test_closed_when_consumer_stops(self):
        """Le client est fermé même si le consommateur abandonne le stream."""
        response = _mock_response(async_iter([b'a', b'b', b'c']))
        client = AsyncMock()

        gen = stream_passthrough(response, client, "claude")
        assert await gen.__anext__() == b'a'
        await gen.aclose()

        client.aclose.assert_awaited_once_with(response)


class TestBuildStreamingResponse:
    """Tests des headers de la réponse relayée."""

    def test_content_type_preserved(self):
        response = _mock_response(async_iter([]), headers={"content-type": "text/event-stream"})
        result = build_streaming_response(response, AsyncMock(), "openai")

        assert result.status_code == 200
        assert result.headers["content-type"] == "text/event-stream"
        assert result.headers["cache-control"] == "no-store"

    def test_content_type_default(self):
        response = _mock_response(async_iter([]))
        result = build_streaming_response(response, AsyncMock(), "openai")

        assert result.headers["content-type"] == "application/octet-stream"

    def test_upstream_status_preserved(self):
        response = _mock_response(async_iter([]), status_code=429, headers={"content-type": "application/json"})
        result = build_streaming_response(response, AsyncMock(), "deepseek")

        assert result.status_code == 429


class TestStreamingErrorTypes:

    def test_error_types_defined(self):
        for error_type in ["read_error", "timeout_error", "decode_error", "unknown"]:
            assert isinstance(STREAMING_ERROR_TYPES[error_type], str)


# Helper pour créer un async iterator
def async_iter(items):
    """Crée un async iterator à partir d'une liste."""
    async def _iter():
        for item in items:
            yield item
    return _iter()
