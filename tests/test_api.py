"""API endpoint tests - the HTTP contract consumed by the browser client."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from gamemanual.utils.exceptions import MalformedResponseError, UpstreamError

GENERATE = "gamemanual.services.dispatcher.generate_manual"


def test_health(client, monkeypatch):
    assert client.get("/health").json() == {"status": "ok", "providers_configured": 0}
    monkeypatch.setenv("GEMINI_API_KEY", "g")
    assert client.get("/health").json()["providers_configured"] == 1


class TestProvidersEndpoint:

    def test_empty(self, client):
        resp = client.get("/api/ai-providers")
        assert resp.status_code == 200
        assert resp.json() == {"providers": [], "default": None}

    def test_configured(self, client, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "o")
        monkeypatch.setenv("ZHIPU_API_KEY", "z")

        resp = client.get("/api/ai-providers")

        assert resp.json() == {
            "providers": [
                {"id": "glm", "name": "GLM-4.5-Air"},
                {"id": "openai", "name": "OpenAI"},
            ],
            "default": "glm",
        }


class TestGenerateEndpoint:

    def test_success(self, client, monkeypatch, manual):
        monkeypatch.setenv("DEEPSEEK_API_KEY", "d")
        with patch(GENERATE, new=AsyncMock(return_value=manual)) as gen:
            resp = client.post("/api/ai-generate", json={"word": " ephemeral "})

        assert resp.status_code == 200
        assert resp.json() == {**manual, "provider": "DeepSeek"}
        assert gen.call_args.args[1] == "ephemeral"

    def test_requested_alias(self, client, monkeypatch, manual):
        monkeypatch.setenv("GLM_API_KEY", "z")
        monkeypatch.setenv("OPENAI_API_KEY", "o")
        with patch(GENERATE, new=AsyncMock(return_value=manual)):
            resp = client.post("/api/ai-generate", json={"word": "run", "provider": "GPT-4o"})

        assert resp.json()["provider"] == "OpenAI"

    @pytest.mark.parametrize(
        "body",
        [{}, {"word": ""}, {"word": "   "}, {"word": 7}, {"word": None}],
    )
    def test_invalid_word(self, client, monkeypatch, body):
        monkeypatch.setenv("GLM_API_KEY", "z")
        with patch(GENERATE, new=AsyncMock()) as gen:
            resp = client.post("/api/ai-generate", json=body)

        assert resp.status_code == 400
        assert resp.json() == {
            "error": {"message": "Word is required and must be a non-empty string."}
        }
        gen.assert_not_called()

    def test_non_json_body(self, client):
        resp = client.post(
            "/api/ai-generate",
            content=b"word=ephemeral",
            headers={"Content-Type": "text/plain"},
        )
        assert resp.status_code == 400
        assert "error" in resp.json()

    def test_unavailable_provider_with_suggestion(self, client, monkeypatch):
        monkeypatch.setenv("GLM_API_KEY", "z")
        with patch(GENERATE, new=AsyncMock()) as gen:
            resp = client.post("/api/ai-generate", json={"word": "run", "provider": "gemini"})

        assert resp.status_code == 400
        data = resp.json()
        assert data["error"]["message"] == "Requested provider Gemini is not available on server."
        assert data["available"] == ["glm"]
        assert "gemini" not in data["available"]
        assert data["suggestion"]["action"] == "switch_provider"
        assert data["suggestion"]["recommended"] == "glm"
        assert data["suggestion"]["reason"] == "provider_unavailable"
        gen.assert_not_called()

    def test_no_provider_configured(self, client):
        resp = client.post("/api/ai-generate", json={"word": "ephemeral"})

        assert resp.status_code == 500
        data = resp.json()
        assert data["error"]["message"].startswith("No AI provider API key configured.")
        assert "suggestion" not in data

    def test_upstream_error_suggests_other_provider(self, client, monkeypatch):
        monkeypatch.setenv("GLM_API_KEY", "z")
        monkeypatch.setenv("DEEPSEEK_API_KEY", "d")
        err = UpstreamError(
            "GLM-4.5-Air API Error: 429 Too Many Requests - Rate limited",
            upstream_status=429,
            provider_id="glm",
            provider_name="GLM-4.5-Air",
        )
        with patch(GENERATE, new=AsyncMock(side_effect=err)) as gen:
            resp = client.post("/api/ai-generate", json={"word": "ephemeral"})

        assert resp.status_code == 500
        data = resp.json()
        assert data["error"]["message"] == "GLM-4.5-Air API Error: 429 Too Many Requests - Rate limited"
        assert data["suggestion"]["recommended"] == "deepseek"
        assert data["suggestion"]["reason"] == "provider_error"
        assert gen.await_count == 1

    def test_malformed_response_single_provider(self, client, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "g")
        err = MalformedResponseError(
            "Gemini returned non-JSON content", provider_id="gemini", provider_name="Gemini"
        )
        with patch(GENERATE, new=AsyncMock(side_effect=err)):
            resp = client.post("/api/ai-generate", json={"word": "ephemeral"})

        assert resp.status_code == 500
        assert resp.json() == {"error": {"message": "Gemini returned non-JSON content"}}

    def test_unexpected_error(self, monkeypatch):
        from gamemanual.main import app

        monkeypatch.setenv("OPENAI_API_KEY", "o")
        with patch(GENERATE, new=AsyncMock(side_effect=RuntimeError("kaboom"))):
            with TestClient(app, raise_server_exceptions=False) as test_client:
                resp = test_client.post(
                    "/api/ai-generate",
                    json={"word": "ephemeral"},
                    headers={"Origin": "https://example.org"},
                )

        assert resp.status_code == 500
        assert resp.headers["access-control-allow-origin"] == "*"
        assert resp.json() == {
            "error": {
                "message": "Failed to generate game manual. The service may be temporarily unavailable."
            }
        }


class TestCors:

    def test_preflight(self, client):
        resp = client.options(
            "/api/ai-generate",
            headers={
                "Origin": "https://example.org",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        assert resp.status_code == 200
        assert resp.headers["access-control-allow-origin"] == "*"
        assert "POST" in resp.headers["access-control-allow-methods"]

    def test_simple_request(self, client):
        resp = client.get("/api/ai-providers", headers={"Origin": "https://example.org"})
        assert resp.headers["access-control-allow-origin"] == "*"
