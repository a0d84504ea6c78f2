"""Gemini Handle Manager — lazily builds and memoizes the single genai.Client.

Invariants:
    - At most one handle exists per manager; get_handle() on a cached handle does no IO
    - Credential priority: configured key (GEMINI_API_KEY / supplied) → persisted store
    - No credential from any source → CredentialMissingError
    - Client construction failure → InitializationFailedError, store entry evicted, handle stays absent
    - No retry at this layer: credential problems are not transient

Design Decisions:
    - Double-checked threading.Lock around construction: safe when the manager is
      shared with worker threads, not only with the event loop
    - supply_credential() replaces the configured key in memory AND persists it:
      a key the user just typed must win over a stale environment value
    - Only a stored or supplied key is evicted on failure; the environment is read-only
"""

import logging
import threading
from collections.abc import Callable

from google import genai

from kutubi.core.errors import (
    CredentialMissingError, ErrorKind, InitializationFailedError,
)
from kutubi.infrastructure.credential_store import API_KEY_ENTRY, CredentialStore

logger = logging.getLogger(__name__)


class GeminiHandleManager:
    """Owns the process-lifetime genai.Client and the credential behind it."""

    def __init__(
        self,
        store: CredentialStore,
        configured_key: str = "",
        client_factory: Callable[..., genai.Client] = genai.Client,
    ):
        self.store = store
        self._configured_key = configured_key.strip()
        self._configured_source = "settings"
        self._client_factory = client_factory
        self._handle: genai.Client | None = None
        self._lock = threading.Lock()

    def get_handle(self) -> genai.Client:
        """Return the cached handle, building it on first use."""
        handle = self._handle
        if handle is not None:
            return handle
        with self._lock:
            if self._handle is None:
                self._handle = self._create_handle()
            return self._handle

    def has_credential(self) -> bool:
        return self._resolve_credential()[0] is not None

    def supply_credential(self, api_key: str) -> None:
        """Re-authentication: persist a new key and drop the current handle."""
        api_key = api_key.strip()
        if not api_key:
            raise ValueError("api_key cannot be empty or whitespace")
        with self._lock:
            self.store.set(API_KEY_ENTRY, api_key)
            self._configured_key = api_key
            self._configured_source = "supplied"
            self._handle = None
        logger.info("Gemini credential supplied, handle reset")

    def forget_credential(self) -> None:
        """Remove the persisted key and drop the current handle."""
        with self._lock:
            self.store.remove(API_KEY_ENTRY)
            self._configured_key = ""
            self._handle = None
        logger.info("Gemini credential forgotten")

    def invalidate(self) -> None:
        """Drop the handle so the next call re-resolves credentials."""
        with self._lock:
            self._handle = None
        logger.warning("Gemini handle invalidated")

    def _resolve_credential(self) -> tuple[str | None, str | None]:
        """Return (key, source) for the first non-empty source."""
        if self._configured_key:
            return self._configured_key, self._configured_source
        stored = (self.store.get(API_KEY_ENTRY) or "").strip()
        if stored:
            return stored, "store"
        return None, None

    def _create_handle(self) -> genai.Client:
        api_key, source = self._resolve_credential()
        if api_key is None:
            logger.warning(
                "No Gemini API key configured",
                extra={"error_code": ErrorKind.CREDENTIAL_MISSING.value},
            )
            raise CredentialMissingError()
        try:
            handle = self._client_factory(api_key=api_key)
        except Exception as e:
            logger.error(
                f"Could not initialize Gemini client (key source: {source}): {e}",
            )
            if source != "settings":
                self.store.remove(API_KEY_ENTRY)
                if source == "supplied":
                    self._configured_key = ""
            raise InitializationFailedError() from e
        logger.info(f"Gemini client initialized (key source: {source})")
        return handle
