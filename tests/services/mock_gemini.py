"""Mock Gemini Handle — simulates google.genai async models API for client and handler tests.

Invariants:
    - MockGeminiHandle sequences generate_content responses (one per call)
    - A response entry that is an Exception is raised instead of returned
    - generate_content_stream returns the configured _Stream (or raises a configured Exception)
    - StaticHandleManager replaces GeminiHandleManager and counts get/invalidate calls

Design Decisions:
    - Flat mock classes (no inheritance): simple, explicit, easy to debug
    - Error builders use real google.genai error classes so auth detection is exercised
"""

import asyncio

from google.genai import errors as genai_errors

from kutubi.infrastructure.gemini_client import ResilientGeminiClient


# -- Mock google.genai objects -------------------------------------------------


class _Response:
    """Mock GenerateContentResponse (only .text is read)."""

    def __init__(self, text):
        self.text = text


class _Stream:
    """Mock async iterable of response chunks, optionally failing after the last chunk."""

    def __init__(self, texts, error=None):
        self._chunks = [_Response(t) for t in texts]
        self._error = error
        self._idx = 0
        self.consumed = 0

    def __aiter__(self):
        return self

    async def __anext__(self):
        if self._idx >= len(self._chunks):
            if self._error is not None:
                raise self._error
            raise StopAsyncIteration
        chunk = self._chunks[self._idx]
        self._idx += 1
        self.consumed += 1
        return chunk


class _AsyncModels:
    """Mock client.aio.models."""

    def __init__(self, responses, stream, delay):
        self._responses = list(responses)
        self._stream = stream
        self._delay = delay
        self._idx = 0
        self.calls = []
        self.stream_calls = []

    async def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._idx >= len(self._responses):
            raise RuntimeError(
                f"MockGeminiHandle: no response at index {self._idx} "
                f"(configured {len(self._responses)})",
            )
        resp = self._responses[self._idx]
        self._idx += 1
        if isinstance(resp, Exception):
            raise resp
        return _Response(resp)

    async def generate_content_stream(self, **kwargs):
        self.stream_calls.append(kwargs)
        if isinstance(self._stream, Exception):
            raise self._stream
        return self._stream


class _Aio:
    def __init__(self, models):
        self.models = models


class MockGeminiHandle:
    """Replaces genai.Client. responses: str | None | Exception per call."""

    def __init__(self, responses=(), stream=None, delay=0.0, api_key=None):
        self.api_key = api_key
        self.aio = _Aio(_AsyncModels(responses, stream, delay))

    @property
    def calls(self):
        return self.aio.models.calls

    @property
    def stream_calls(self):
        return self.aio.models.stream_calls


class StaticHandleManager:
    """Replaces GeminiHandleManager with a fixed handle."""

    def __init__(self, handle):
        self.handle = handle
        self.get_calls = 0
        self.invalidations = 0
        self.supplied = []
        self.forgotten = 0
        self.configured = True

    def get_handle(self):
        self.get_calls += 1
        return self.handle

    def invalidate(self):
        self.invalidations += 1

    def has_credential(self):
        return self.configured

    def supply_credential(self, api_key):
        self.supplied.append(api_key)

    def forget_credential(self):
        self.forgotten += 1


# -- Builder helpers -----------------------------------------------------------


def make_client(handle, max_attempts=3, retry_delay_ms=0):
    """ResilientGeminiClient over a StaticHandleManager (no real delay by default)."""
    return ResilientGeminiClient(
        StaticHandleManager(handle),
        model="gemini-test",
        max_attempts=max_attempts,
        retry_delay_ms=retry_delay_ms,
    )


def auth_error():
    """The 400 INVALID_ARGUMENT / API_KEY_INVALID error Gemini returns for a bad key."""
    return genai_errors.ClientError(400, {
        "error": {
            "code": 400,
            "message": "API key not valid. Please pass a valid API key.",
            "status": "INVALID_ARGUMENT",
            "details": [{
                "@type": "type.googleapis.com/google.rpc.ErrorInfo",
                "reason": "API_KEY_INVALID",
                "domain": "googleapis.com",
            }],
        },
    })


def server_error():
    return genai_errors.ServerError(503, {
        "error": {
            "code": 503,
            "message": "The model is overloaded. Please try again later.",
            "status": "UNAVAILABLE",
        },
    })


def bad_request_error():
    return genai_errors.ClientError(400, {
        "error": {
            "code": 400,
            "message": "Request contains an invalid argument.",
            "status": "INVALID_ARGUMENT",
        },
    })
