"""Structured Output — code-fence stripping and structural checks for JSON responses.

Invariants:
    - strip_code_fences removes one leading ```json / ``` marker and one trailing ``` marker
    - conforms_to_schema checks container shape only: arrays are lists, objects are
      dicts holding every required field; array items are checked the same way
    - Scalar types and object property values are NOT checked here
    - Pure functions: no IO, no logging

Design Decisions:
    - Schema checks walk google.genai types.Schema directly: the same object is sent
      to the model as response_schema, so request and validation never drift apart
    - Field types belong to the operation's strict result model: a wrong index type
      or a non-list options field is a domain failure (MALFORMED_DOMAIN_RESULT,
      not retried), not a transport-level malformed response
"""

import re
from typing import Any

from google.genai import types

_FENCE_PATTERN = re.compile(r"^\s*```(?:json)?\s*|\s*```\s*$", re.IGNORECASE)
_CONTAINER_TYPES = frozenset({types.Type.ARRAY, types.Type.OBJECT})


def strip_code_fences(text: str) -> str:
    """Remove surrounding markdown code-fence markers and trim whitespace."""
    return _FENCE_PATTERN.sub("", text).strip()


def conforms_to_schema(value: Any, schema: types.Schema | None) -> bool:
    """Check a decoded value's container shape and required fields against a Schema."""
    if schema is None or schema.type not in _CONTAINER_TYPES:
        return True
    if value is None:
        return bool(schema.nullable)

    if schema.type == types.Type.ARRAY:
        return isinstance(value, list) and all(
            conforms_to_schema(item, schema.items) for item in value
        )
    return isinstance(value, dict) and all(
        name in value for name in schema.required or []
    )