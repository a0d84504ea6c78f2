"""Root conftest — shared test configuration and mock Gemini fixtures."""

import os

# Ensure tests don't accidentally use real API keys or the user's credential store
os.environ["GEMINI_API_KEY"] = ""
os.environ.setdefault("CREDENTIAL_STORE_PATH", "/tmp/kutubi-test/credentials.json")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402

from tests.services.mock_gemini import MockGeminiHandle, make_client  # noqa: E402


@pytest.fixture
def client_for():
    """Factory: client_for(responses, stream=None, delay=0.0) -> (client, handle).

    Builds a real ResilientGeminiClient (0ms retry delay) over a MockGeminiHandle.
    """

    def _build(responses=(), stream=None, delay=0.0):
        handle = MockGeminiHandle(responses, stream=stream, delay=delay)
        return make_client(handle), handle

    return _build


@pytest.fixture
def api_for():
    """Factory: api_for(client) -> httpx.AsyncClient bound to the app with client injected.

    Overrides get_gemini_client (lifespan does not run under ASGITransport).
    """
    import httpx

    from kutubi.api.dependencies import get_gemini_client
    from kutubi.main import app

    def _build(client):
        app.dependency_overrides[get_gemini_client] = lambda: client
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test",
        )

    yield _build
    app.dependency_overrides.clear()
