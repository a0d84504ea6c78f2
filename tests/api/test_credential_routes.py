"""Credential Routes — status, supply, forget, and the re-authentication flow."""

from kutubi.infrastructure.credential_store import API_KEY_ENTRY, CredentialStore
from kutubi.infrastructure.gemini_client import ResilientGeminiClient
from kutubi.infrastructure.gemini_handle import GeminiHandleManager

from tests.services.mock_gemini import MockGeminiHandle

_BASE = "/api/v1/credential"


async def test_status_reports_configured(client_for, api_for):
    client, _ = client_for()
    async with api_for(client) as http:
        resp = await http.get(_BASE)
    assert resp.json() == {"configured": True}


async def test_supply_trims_key(client_for, api_for):
    client, _ = client_for()
    async with api_for(client) as http:
        resp = await http.put(_BASE, json={"api_key": "  new-key  "})
    assert resp.status_code == 204
    assert client.handles.supplied == ["new-key"]


async def test_supply_rejects_blank_key(client_for, api_for):
    client, _ = client_for()
    async with api_for(client) as http:
        resp = await http.put(_BASE, json={"api_key": "   "})
    assert resp.status_code == 400
    assert client.handles.supplied == []


async def test_forget(client_for, api_for):
    client, _ = client_for()
    async with api_for(client) as http:
        resp = await http.delete(_BASE)
    assert resp.status_code == 204
    assert client.handles.forgotten == 1


async def test_reauthentication_flow(tmp_path, api_for):
    """API_KEY_MISSING → PUT key → next call builds a handle with that key."""
    built = []

    def factory(api_key):
        handle = MockGeminiHandle(['["الفقه"]'], api_key=api_key)
        built.append(handle)
        return handle

    store = CredentialStore(tmp_path / "credentials.json")
    client = ResilientGeminiClient(
        GeminiHandleManager(store, client_factory=factory), retry_delay_ms=0,
    )
    async with api_for(client) as http:
        missing = await http.post(
            "/api/v1/documents/keywords", json={"content": "نص"},
        )
        assert missing.status_code == 401
        assert (await http.get(_BASE)).json() == {"configured": False}

        await http.put(_BASE, json={"api_key": "fresh-key"})
        resp = await http.post(
            "/api/v1/documents/keywords", json={"content": "نص"},
        )

    assert resp.json() == ["الفقه"]
    assert [h.api_key for h in built] == ["fresh-key"]
    assert store.get(API_KEY_ENTRY) == "fresh-key"
