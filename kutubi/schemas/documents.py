"""Document Schemas — request bodies and typed results for document operations.

Invariants:
    - Request bodies accept empty content (operations return their fixed defaults)
    - QuizQuestion: exactly 4 string options, integer correctAnswerIndex inside options
    - Result models are validated in strict mode (no str→int coercion)
    - QuizQuestion serializes with camelCase alias (correctAnswerIndex) for the web client

Design Decisions:
    - One module for requests + results: small surface, one import for routes and services
"""

from pydantic import (
    BaseModel, ConfigDict, Field, StrictInt, StrictStr,
    field_validator, model_validator,
)


# --- Requests -----------------------------------------------------------------

class ContentRequest(BaseModel):
    """Document text for any single-input operation."""
    content: str = ""


class QuizRequest(ContentRequest):
    """Quiz generation — content plus desired question count."""
    question_count: int = Field(5, ge=1, le=50)


class VideoDescriptionRequest(BaseModel):
    title: str = ""


class ScriptRequest(BaseModel):
    title: str = ""
    description: str = ""


class CredentialUpdate(BaseModel):
    """Re-authentication — a new Gemini API key."""
    api_key: str = Field(min_length=1, max_length=512)

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("api_key cannot be empty or whitespace")
        return v


class CredentialStatus(BaseModel):
    configured: bool


# --- Results ------------------------------------------------------------------

class QuizQuestion(BaseModel):
    """One multiple-choice question."""
    model_config = ConfigDict(strict=True, populate_by_name=True)

    question: StrictStr
    options: list[StrictStr] = Field(min_length=4, max_length=4)
    correct_answer_index: StrictInt = Field(alias="correctAnswerIndex")

    @model_validator(mode="after")
    def check_index_in_options(self):
        if not 0 <= self.correct_answer_index < len(self.options):
            raise ValueError("correctAnswerIndex must point into options")
        return self


class SentimentResult(BaseModel):
    """Overall sentiment label plus a short explanation."""
    model_config = ConfigDict(strict=True)

    sentiment: StrictStr
    explanation: StrictStr


class ContentRating(BaseModel):
    """Raw model rating before clamping."""
    model_config = ConfigDict(strict=True)

    rating: StrictInt
    review: StrictStr


class DocumentAnalysis(BaseModel):
    """Summary-style analysis plus auxiliary categories."""
    analysis: str
    categories: list[str] = Field(default_factory=list)


class TextResult(BaseModel):
    """Free-text operation output."""
    text: str
