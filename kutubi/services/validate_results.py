"""Result Validation — operation-specific shape checks on decoded model output.

Invariants:
    - Validation failure raises MalformedDomainResultError naming the operation
    - Never retried: the request succeeded, a structurally wrong decode would repeat
    - Offending payload logged for diagnosis
"""

import logging
from typing import Any, TypeVar

from pydantic import StrictStr, TypeAdapter, ValidationError

from kutubi.core.errors import MalformedDomainResultError

logger = logging.getLogger(__name__)

T = TypeVar("T")

STRING_LIST: TypeAdapter[list[str]] = TypeAdapter(list[StrictStr])


def validate_result(adapter: TypeAdapter[T], value: Any, operation: str) -> T:
    """Validate a decoded value or raise MalformedDomainResultError."""
    try:
        return adapter.validate_python(value, strict=True)
    except ValidationError as e:
        logger.error(
            f"Invalid {operation} format received from API: {value!r}",
            extra={"operation": operation, "error_code": "MALFORMED_DOMAIN_RESULT"},
        )
        raise MalformedDomainResultError(operation) from e
