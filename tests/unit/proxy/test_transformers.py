"""
Tests unitaires pour les transformations de format.
"""
from chat_proxy.proxy.transformers import (
    build_gemini_endpoint,
    convert_to_gemini_contents,
    convert_to_claude_messages,
)


class TestGeminiContents:

    def test_drops_system(self):
        messages = [
            {"role": "system", "content": "règles"},
            {"role": "system", "content": "encore"},
        ]
        assert convert_to_gemini_contents(messages) == []

    def test_role_mapping(self):
        messages = [
            {"role": "user", "content": "a"},
            {"role": "assistant", "content": "b"},
            {"role": "tool", "content": "c"},
        ]
        roles = [c["role"] for c in convert_to_gemini_contents(messages)]
        assert roles == ["user", "model", "model"]

    def test_order_preserved(self):
        messages = [{"role": "user", "content": str(i)} for i in range(5)]
        texts = [c["parts"][0]["text"] for c in convert_to_gemini_contents(messages)]
        assert texts == ["0", "1", "2", "3", "4"]

    def test_empty(self):
        assert convert_to_gemini_contents([]) == []


class TestClaudeMessages:

    def test_keeps_role_and_content_only(self):
        messages = [{"role": "assistant", "content": "ok", "name": "bot"}]
        assert convert_to_claude_messages(messages) == [{"role": "assistant", "content": "ok"}]


class TestGeminiEndpoint:

    def test_endpoint(self):
        url = build_gemini_endpoint("v1beta", "gemini-x", base_url="http://localhost:9999")
        assert url == "http://localhost:9999/v1beta/models/gemini-x:generateContent?alt=sse"

    def test_no_key_in_url(self):
        assert "key=" not in build_gemini_endpoint("v1", "gemini-2.0-flash")


class TestMissingKeys:
    """Une clé absente du message n'est pas émise (pas de null)."""

    def test_gemini_missing_content(self):
        contents = convert_to_gemini_contents([{"role": "user"}])
        assert contents == [{"role": "user", "parts": [{}]}]

    def test_gemini_explicit_null_kept(self):
        contents = convert_to_gemini_contents([{"role": "user", "content": None}])
        assert contents[0]["parts"] == [{"text": None}]

    def test_claude_missing_content(self):
        assert convert_to_claude_messages([{"role": "user"}]) == [{"role": "user"}]
