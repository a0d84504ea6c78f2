"""Credential Routes — re-authentication flow for the Gemini API key.

Invariants:
    - PUT persists the key and resets the cached handle (next call rebuilds it)
    - DELETE forgets the key and resets the handle
    - GET reports only whether a key resolves — the key itself is never returned
"""

from fastapi import APIRouter, Depends, Response, status

from kutubi.api.dependencies import get_gemini_client
from kutubi.infrastructure.gemini_client import ResilientGeminiClient
from kutubi.schemas.documents import CredentialStatus, CredentialUpdate

router = APIRouter(prefix="/api/v1/credential", tags=["credential"])


@router.get("", response_model=CredentialStatus)
async def get_credential_status(
    client: ResilientGeminiClient = Depends(get_gemini_client),
):
    return CredentialStatus(configured=client.handles.has_credential())


@router.put("", status_code=status.HTTP_204_NO_CONTENT)
async def supply_credential(
    body: CredentialUpdate,
    client: ResilientGeminiClient = Depends(get_gemini_client),
):
    """Store a new API key — used after API_KEY_MISSING errors."""
    client.handles.supply_credential(body.api_key)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def forget_credential(
    client: ResilientGeminiClient = Depends(get_gemini_client),
):
    client.handles.forget_credential()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
