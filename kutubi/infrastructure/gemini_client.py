"""Resilient Gemini Client — wraps genai.Client with retry, response validation, and error mapping.

Invariants:
    - Handle failures (CredentialMissing / InitializationFailed) propagate immediately, never retried
    - Every other failure consumes one attempt; max_attempts total (default 3)
    - Fixed delay between attempts (default 1000ms), no jitter, no exponential growth
    - Structured results are returned only after JSON decoding AND schema conformance
    - On exhaustion: curated kinds re-raised unchanged, auth rejection → CredentialMissingError,
      anything else → ConnectionExhaustedError chained to the last failure
    - Streaming is never retried; fragments are yielded in arrival order, empty ones dropped

Design Decisions:
    - Wrapper over raw client: isolates retry logic from domain operations (ADR: single responsibility)
    - Auth rejection detected from the SDK's structured error fields (code/status/ErrorInfo reason),
      never from message substrings
    - Auth rejection invalidates the handle: the next call re-resolves credentials,
      which lets a re-supplied key take effect without a restart
"""

import asyncio
import json
import logging
from collections.abc import AsyncIterator
from typing import Any, NoReturn

from google.genai import errors as genai_errors
from google.genai import types

from kutubi.core.default_messages import EMPTY_SUMMARY
from kutubi.core.domain_types import InvocationRequest, OutputShape
from kutubi.core.errors import (
    CURATED_KINDS,
    ConnectionExhaustedError,
    CredentialMissingError,
    EmptyResponseError,
    EmptyStructuredResponseError,
    ErrorContext,
    KutubiError,
    MalformedStructuredResponseError,
    StreamingFailedError,
)
from kutubi.core.structured_output import conforms_to_schema, strip_code_fences
from kutubi.infrastructure.gemini_handle import GeminiHandleManager

logger = logging.getLogger(__name__)

_JSON_MIME_TYPE = "application/json"

_AUTH_STATUS_CODES = frozenset({401, 403})
_AUTH_STATUSES = frozenset({"UNAUTHENTICATED", "PERMISSION_DENIED"})
_AUTH_REASONS = frozenset({"API_KEY_INVALID"})


def is_auth_rejection(error: BaseException | None) -> bool:
    """True if the remote service rejected the API key."""
    if not isinstance(error, genai_errors.ClientError):
        return False
    if error.code in _AUTH_STATUS_CODES or error.status in _AUTH_STATUSES:
        return True
    return any(reason in _AUTH_REASONS for reason in _error_reasons(error.details))


def _error_reasons(details: Any) -> list[str]:
    """Collect google.rpc.ErrorInfo reasons from an error payload."""
    if not isinstance(details, dict):
        return []
    body = details.get("error", details)
    entries = body.get("details") if isinstance(body, dict) else None
    if not isinstance(entries, list):
        return []
    return [
        entry["reason"] for entry in entries
        if isinstance(entry, dict) and isinstance(entry.get("reason"), str)
    ]


class ResilientGeminiClient:
    """Wraps the Gemini handle with retry, validation, and error mapping."""

    def __init__(
        self,
        handles: GeminiHandleManager,
        model: str = "gemini-2.5-flash",
        max_attempts: int = 3,
        retry_delay_ms: int = 1000,
    ):
        self.handles = handles
        self.model = model
        self.max_attempts = max_attempts
        self.retry_delay_ms = retry_delay_ms

    async def invoke(
        self,
        prompt: str,
        schema: types.Schema | None = None,
        *,
        operation: str | None = None,
    ) -> Any:
        """Send one prompt with retry. Returns text, or the decoded JSON when schema is given."""
        request = InvocationRequest(prompt=prompt, schema=schema)
        handle = self.handles.get_handle()

        last_error: Exception | None = None
        for attempt in range(1, self.max_attempts + 1):
            context = ErrorContext(operation=operation, attempt=attempt)
            try:
                result = await self._attempt(handle, request, context)
                self._log_success(operation, attempt)
                return result
            except Exception as e:
                last_error = e
                logger.warning(
                    f"Gemini API error (attempt {attempt}/{self.max_attempts}): {e}",
                    extra={"operation": operation, "attempt": attempt},
                )
                if attempt < self.max_attempts:
                    await asyncio.sleep(self.retry_delay_ms / 1000)

        self._raise_exhausted(last_error, operation)

    async def invoke_streaming(
        self, prompt: str, *, operation: str | None = None,
    ) -> AsyncIterator[str]:
        """Single streaming request; yields non-empty text fragments as they arrive.

        No retry — a partially consumed stream cannot be replayed. Blank prompts
        yield one placeholder fragment without touching the handle.
        """
        if not prompt.strip():
            yield EMPTY_SUMMARY
            return

        handle = self.handles.get_handle()
        context = ErrorContext(operation=operation)
        try:
            stream = await handle.aio.models.generate_content_stream(
                model=self.model, contents=prompt,
            )
            async for chunk in stream:
                text = chunk.text
                if text:
                    yield text
        except KutubiError:
            raise
        except Exception as e:
            logger.error(
                f"Gemini API streaming error: {e}",
                extra={"operation": operation, "model": self.model},
            )
            if is_auth_rejection(e):
                self.handles.invalidate()
                raise CredentialMissingError(context) from e
            raise StreamingFailedError(context) from e

    async def _attempt(
        self, handle, request: InvocationRequest, context: ErrorContext,
    ) -> Any:
        """One request/validate cycle. Raises on any failure."""
        config = None
        if request.output_shape is OutputShape.STRUCTURED:
            config = types.GenerateContentConfig(
                response_mime_type=_JSON_MIME_TYPE,
                response_schema=request.schema,
            )
        response = await handle.aio.models.generate_content(
            model=self.model, contents=request.prompt, config=config,
        )
        text = response.text
        if not text or not text.strip():
            raise EmptyResponseError(context)
        if config is None:
            return text
        return self._decode(text, request.schema, context)

    def _decode(
        self, text: str, schema: types.Schema, context: ErrorContext,
    ) -> Any:
        """Strip fences, parse JSON, check schema shape."""
        cleaned = strip_code_fences(text)
        if not cleaned:
            raise EmptyStructuredResponseError(context)
        try:
            value = json.loads(cleaned)
        except json.JSONDecodeError as e:
            logger.error(
                f"Failed to parse JSON response: {cleaned}",
                extra={"operation": context.operation, "attempt": context.attempt},
            )
            raise MalformedStructuredResponseError(context) from e
        if not conforms_to_schema(value, schema):
            logger.error(
                f"JSON response does not match schema: {cleaned}",
                extra={"operation": context.operation, "attempt": context.attempt},
            )
            raise MalformedStructuredResponseError(context)
        return value

    def _raise_exhausted(
        self, last_error: Exception | None, operation: str | None,
    ) -> NoReturn:
        """Map the final failure to the error the caller sees."""
        if isinstance(last_error, KutubiError) and last_error.kind in CURATED_KINDS:
            raise last_error
        context = ErrorContext(operation=operation, attempt=self.max_attempts)
        if is_auth_rejection(last_error):
            self.handles.invalidate()
            raise CredentialMissingError(context) from last_error
        logger.error(
            f"Gemini API failed after {self.max_attempts} attempts: {last_error}",
            extra={"operation": operation, "attempt": self.max_attempts},
        )
        raise ConnectionExhaustedError(self.max_attempts, context) from last_error

    def _log_success(self, operation: str | None, attempt: int) -> None:
        logger.info(
            "Gemini API success",
            extra={"operation": operation, "attempt": attempt, "model": self.model},
        )
