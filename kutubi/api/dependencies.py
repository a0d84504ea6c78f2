"""API Dependencies — construction and lookup of the process-wide Gemini client.

Invariants:
    - Exactly one ResilientGeminiClient per app, built in lifespan, stored on app.state
    - Routes receive it through Depends(get_gemini_client), never via module globals

Design Decisions:
    - Explicit ownership on app.state over a module-level singleton: tests override
      the dependency instead of patching globals
"""

from fastapi import Request

from kutubi.config import Settings
from kutubi.infrastructure.credential_store import CredentialStore
from kutubi.infrastructure.gemini_client import ResilientGeminiClient
from kutubi.infrastructure.gemini_handle import GeminiHandleManager


def build_gemini_client(settings: Settings) -> ResilientGeminiClient:
    """Wire store → handle manager → resilient client from settings."""
    handles = GeminiHandleManager(
        CredentialStore(settings.credential_store_path),
        configured_key=settings.gemini_api_key,
    )
    return ResilientGeminiClient(
        handles,
        model=settings.gemini_model,
        max_attempts=settings.gemini_max_attempts,
        retry_delay_ms=settings.gemini_retry_delay_ms,
    )


def get_gemini_client(request: Request) -> ResilientGeminiClient:
    return request.app.state.gemini_client
