"""Extraction Handlers — extract_keywords, extract_book_title, generate_content_suggestions, rate_content.

Invariants:
    - Keyword and suggestion lists are validated as lists of strings
    - rate_content clamps the model rating into 1–5 before formatting
    - extract_book_title returns stripped text; empty input → "عنوان غير معروف"
"""

from pydantic import TypeAdapter

from kutubi.core.default_messages import EMPTY_RATING, UNKNOWN_TITLE
from kutubi.core.format_rating import format_rating
from kutubi.infrastructure.gemini_client import ResilientGeminiClient
from kutubi.schemas.documents import ContentRating
from kutubi.services import prompt_templates as prompts
from kutubi.services import response_schemas as schemas
from kutubi.services.validate_results import STRING_LIST, validate_result

_RATING = TypeAdapter(ContentRating)


class ExtractionHandlers:
    """Pulls compact facts out of a document: keywords, title, suggestions, rating."""

    def __init__(self, client: ResilientGeminiClient):
        self.client = client

    async def extract_keywords(self, content: str) -> list[str]:
        if not content.strip():
            return []
        prompt = prompts.render(
            prompts.KEYWORDS, content, prompts.FULL_DOCUMENT_LIMIT,
        )
        result = await self.client.invoke(
            prompt, schemas.KEYWORDS, operation="keywords",
        )
        return validate_result(STRING_LIST, result, "keywords")

    async def extract_book_title(self, content: str) -> str:
        """Read the title off the first page, as printed on a cover."""
        if not content.strip():
            return UNKNOWN_TITLE
        prompt = prompts.render(
            prompts.BOOK_TITLE, content, prompts.FIRST_PAGE_LIMIT,
        )
        title = await self.client.invoke(prompt, operation="book_title")
        return title.strip()

    async def generate_content_suggestions(self, content: str) -> list[str]:
        """Single-word Arabic search keywords for library lookups."""
        if not content.strip():
            return []
        prompt = prompts.render(
            prompts.SUGGESTIONS, content, prompts.EXCERPT_LIMIT,
        )
        result = await self.client.invoke(
            prompt, schemas.SUGGESTIONS, operation="suggestions",
        )
        return validate_result(STRING_LIST, result, "suggestions")

    async def rate_content(self, content: str) -> str:
        """Critic-style 1–5 star rating rendered as Markdown."""
        if not content.strip():
            return EMPTY_RATING
        prompt = prompts.render(
            prompts.RATING, content, prompts.FULL_DOCUMENT_LIMIT,
        )
        result = await self.client.invoke(
            prompt, schemas.RATING, operation="rating",
        )
        rating = validate_result(_RATING, result, "rating")
        return format_rating(rating.rating, rating.review)
