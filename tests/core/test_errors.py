"""Error Hierarchy — kinds, statuses, and envelopes.

Tests:
    - Every error exposes its ErrorKind value as code
    - CredentialMissingError is the API_KEY_MISSING sentinel with 401
    - Curated kinds are exactly the ones re-raised on retry exhaustion
    - to_response / to_sse_event envelopes
"""

from kutubi.core.errors import (
    CREDENTIAL_KINDS, CURATED_KINDS,
    ConnectionExhaustedError, CredentialMissingError, EmptyResponseError,
    EmptyStructuredResponseError, ErrorCategory, ErrorContext, ErrorKind,
    InitializationFailedError, KutubiError, MalformedDomainResultError,
    MalformedStructuredResponseError, StreamingFailedError,
)


def test_all_errors_are_kutubi_errors():
    errors = [
        CredentialMissingError(), InitializationFailedError(),
        EmptyResponseError(), EmptyStructuredResponseError(),
        MalformedStructuredResponseError(), MalformedDomainResultError("quiz"),
        ConnectionExhaustedError(3), StreamingFailedError(),
    ]
    assert all(isinstance(e, KutubiError) for e in errors)
    assert {e.kind for e in errors} == set(ErrorKind)


def test_credential_missing_is_sentinel():
    err = CredentialMissingError()
    assert err.code == "API_KEY_MISSING"
    assert err.http_status == 401
    assert err.category == ErrorCategory.CREDENTIAL


def test_curated_kinds():
    assert CURATED_KINDS == {
        ErrorKind.CREDENTIAL_MISSING,
        ErrorKind.EMPTY_RESPONSE,
        ErrorKind.EMPTY_STRUCTURED_RESPONSE,
        ErrorKind.MALFORMED_STRUCTURED_RESPONSE,
    }
    assert ErrorKind.CONNECTION_EXHAUSTED not in CURATED_KINDS


def test_credential_kinds():
    assert CREDENTIAL_KINDS == {
        ErrorKind.CREDENTIAL_MISSING, ErrorKind.INITIALIZATION_FAILED,
    }


def test_malformed_domain_result_names_operation():
    err = MalformedDomainResultError("quiz")
    assert err.operation == "quiz"
    assert err.context.operation == "quiz"
    assert "quiz" in err.message


def test_connection_exhausted_records_attempts():
    err = ConnectionExhaustedError(3, ErrorContext(operation="analysis"))
    assert err.attempts == 3
    assert err.context.attempt == 3
    assert err.http_status == 503


def test_to_response_envelope():
    body = EmptyResponseError(ErrorContext(operation="keywords", attempt=2)).to_response()
    assert body["error"]["code"] == "EMPTY_RESPONSE"
    assert body["error"]["category"] == "model_output"
    assert body["error"]["context"] == {"operation": "keywords", "attempt": 2}


def test_to_sse_event_envelope():
    err = StreamingFailedError(ErrorContext(operation="summary"))
    event = err.to_sse_event()
    assert event["type"] == "error"
    assert event["data"]["code"] == "STREAMING_FAILED"
    assert event["data"]["message"] == err.message
    assert event["data"]["operation"] == "summary"
    assert event["data"]["recoverable"] is False


def test_credential_missing_sse_is_recoverable():
    assert CredentialMissingError().to_sse_event()["data"]["recoverable"] is True


def test_error_context_carries_operation_and_attempt_only():
    import dataclasses

    names = [f.name for f in dataclasses.fields(ErrorContext)]
    assert names == ["timestamp", "operation", "attempt"]
