"""Domain Types — value types shared by the invocation layer and domain operations.

Invariants:
    - InvocationRequest is immutable once constructed
    - STRUCTURED requests always carry a schema; FREE_TEXT requests never do
    - Rating is bounded 1–5 (RATING_MIN..RATING_MAX)
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - Frozen dataclass over pydantic model: internal value, never crosses the API boundary
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum

from google.genai import types


RATING_MIN = 1
RATING_MAX = 5


class OutputShape(str, Enum):
    """What the model is asked to return."""
    FREE_TEXT = "free_text"
    STRUCTURED = "structured"


class Sentiment(str, Enum):
    """Overall sentiment labels the model is instructed to use."""
    POSITIVE = "إيجابي"
    NEGATIVE = "سلبي"
    NEUTRAL = "محايد"


@dataclass(frozen=True)
class InvocationRequest:
    """One prompt plus the output shape it expects."""
    prompt: str
    schema: types.Schema | None = None

    @property
    def output_shape(self) -> OutputShape:
        if self.schema is None:
            return OutputShape.FREE_TEXT
        return OutputShape.STRUCTURED
