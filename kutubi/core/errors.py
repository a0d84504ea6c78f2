"""Error Hierarchy — typed, categorized exceptions for every Kutubi failure mode.

Invariants:
    - Every error has a kind (ErrorKind), category (ErrorCategory), severity (ErrorSeverity)
    - ErrorKind is the discriminant callers dispatch on — never the message text
    - CredentialMissingError is the sentinel the UI uses to prompt for an API key
    - to_response() produces REST envelope; to_sse_event() produces SSE envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with KutubiError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - User-facing messages in Arabic: the library UI is Arabic-only
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    CREDENTIAL = "credential"
    MODEL_OUTPUT = "model_output"
    DOMAIN_RESULT = "domain_result"
    EXTERNAL_API = "external_api"


class ErrorKind(str, Enum):
    """Closed set of failure kinds. Value doubles as the wire error code."""
    CREDENTIAL_MISSING = "API_KEY_MISSING"
    INITIALIZATION_FAILED = "INITIALIZATION_FAILED"
    EMPTY_RESPONSE = "EMPTY_RESPONSE"
    EMPTY_STRUCTURED_RESPONSE = "EMPTY_STRUCTURED_RESPONSE"
    MALFORMED_STRUCTURED_RESPONSE = "MALFORMED_STRUCTURED_RESPONSE"
    MALFORMED_DOMAIN_RESULT = "MALFORMED_DOMAIN_RESULT"
    CONNECTION_EXHAUSTED = "CONNECTION_EXHAUSTED"
    STREAMING_FAILED = "STREAMING_FAILED"


# Kinds re-raised unchanged when the retry budget runs out
CURATED_KINDS = frozenset({
    ErrorKind.CREDENTIAL_MISSING,
    ErrorKind.EMPTY_RESPONSE,
    ErrorKind.EMPTY_STRUCTURED_RESPONSE,
    ErrorKind.MALFORMED_STRUCTURED_RESPONSE,
})

CREDENTIAL_KINDS = frozenset({
    ErrorKind.CREDENTIAL_MISSING,
    ErrorKind.INITIALIZATION_FAILED,
})


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    attempt: int | None = None


class KutubiError(Exception):
    """Base exception for all Kutubi errors."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def code(self) -> str:
        return self.kind.value

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "attempt": self.context.attempt,
                },
            }
        }

    def to_sse_event(self) -> dict:
        """Convert to SSE error event."""
        return {
            "type": "error",
            "data": {
                "code": self.code,
                "message": self.message,
                "severity": self.severity.value,
                "recoverable": self.severity in (
                    ErrorSeverity.INFO, ErrorSeverity.WARNING,
                ),
                "operation": self.context.operation,
            },
        }


# ─── Credential Errors (never retried) ──────────────────────────

class CredentialMissingError(KutubiError):
    """No API key resolved, or the remote service rejected it."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "مفتاح Gemini API غير متوفر. يرجى إدخال مفتاح صالح.",
            ErrorKind.CREDENTIAL_MISSING, ErrorCategory.CREDENTIAL,
            ErrorSeverity.WARNING, context, 401,
        )


class InitializationFailedError(KutubiError):
    """Client construction rejected the resolved API key."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "فشل في تهيئة Gemini API. يرجى التحقق من صحة مفتاح API الخاص بك.",
            ErrorKind.INITIALIZATION_FAILED, ErrorCategory.CREDENTIAL,
            ErrorSeverity.ERROR, context, 401,
        )


# ─── Model Output Errors (retried) ──────────────────────────────

class EmptyResponseError(KutubiError):
    """Model returned no text or whitespace only."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "أرجع النموذج استجابة فارغة. قد يكون المحتوى غير واضح أو قصير جدًا للتحليل.",
            ErrorKind.EMPTY_RESPONSE, ErrorCategory.MODEL_OUTPUT,
            ErrorSeverity.ERROR, context, 502,
        )


class EmptyStructuredResponseError(KutubiError):
    """Structured response was empty once code fences were stripped."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "أرجع النموذج استجابة JSON فارغة.",
            ErrorKind.EMPTY_STRUCTURED_RESPONSE, ErrorCategory.MODEL_OUTPUT,
            ErrorSeverity.ERROR, context, 502,
        )


class MalformedStructuredResponseError(KutubiError):
    """Structured response failed to decode or to match its schema."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "فشل النموذج في إنشاء استجابة بتنسيق JSON صحيح.",
            ErrorKind.MALFORMED_STRUCTURED_RESPONSE, ErrorCategory.MODEL_OUTPUT,
            ErrorSeverity.ERROR, context, 502,
        )


# ─── Domain Errors (never retried) ──────────────────────────────

class MalformedDomainResultError(KutubiError):
    """Decoded result does not satisfy the operation's shape expectations."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"فشل النموذج في إنتاج نتيجة بالتنسيق الصحيح ({operation}).",
            ErrorKind.MALFORMED_DOMAIN_RESULT, ErrorCategory.DOMAIN_RESULT,
            ErrorSeverity.ERROR, ctx, 502,
        )
        self.operation = operation


# ─── Transport Errors ───────────────────────────────────────────

class ConnectionExhaustedError(KutubiError):
    """Every attempt failed for a reason outside the curated kinds."""
    def __init__(self, attempts: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.attempt = attempts
        super().__init__(
            "فشل الاتصال بـ Gemini API بعد عدة محاولات.",
            ErrorKind.CONNECTION_EXHAUSTED, ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.attempts = attempts


class StreamingFailedError(KutubiError):
    """Streaming request failed during setup or consumption."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "فشل الاتصال بـ Gemini API أثناء التلخيص.",
            ErrorKind.STREAMING_FAILED, ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502,
        )
