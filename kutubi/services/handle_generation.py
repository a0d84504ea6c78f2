"""Generation Handlers — create_quiz, generate_book_description, generate_video_description,
generate_script_from_info.

Invariants:
    - Quiz items have exactly 4 options and an integer correctAnswerIndex into them
    - Descriptions are free text; empty input returns a fixed Arabic placeholder
    - generate_script_from_info needs at least one of title/description
"""

from pydantic import TypeAdapter

from kutubi.core.default_messages import (
    EMPTY_BOOK_DESCRIPTION, EMPTY_SCRIPT, EMPTY_VIDEO_DESCRIPTION,
)
from kutubi.infrastructure.gemini_client import ResilientGeminiClient
from kutubi.schemas.documents import QuizQuestion
from kutubi.services import prompt_templates as prompts
from kutubi.services import response_schemas as schemas
from kutubi.services.validate_results import validate_result

_QUIZ = TypeAdapter(list[QuizQuestion])


class GenerationHandlers:
    """Produces new learning/library material from a document or video metadata."""

    def __init__(self, client: ResilientGeminiClient):
        self.client = client

    async def create_quiz(
        self, content: str, question_count: int = 5,
    ) -> list[QuizQuestion]:
        """Multiple-choice quiz with question_count questions."""
        if not content.strip():
            return []
        prompt = prompts.render(
            prompts.QUIZ, content, prompts.FULL_DOCUMENT_LIMIT,
            question_count=question_count,
        )
        result = await self.client.invoke(
            prompt, schemas.QUIZ, operation="quiz",
        )
        return validate_result(_QUIZ, result, "quiz")

    async def generate_book_description(self, content: str) -> str:
        if not content.strip():
            return EMPTY_BOOK_DESCRIPTION
        prompt = prompts.render(
            prompts.BOOK_DESCRIPTION, content, prompts.FIRST_PAGE_LIMIT,
        )
        return await self.client.invoke(prompt, operation="book_description")

    async def generate_video_description(self, title: str) -> str:
        if not title.strip():
            return EMPTY_VIDEO_DESCRIPTION
        prompt = prompts.render(prompts.VIDEO_DESCRIPTION, title=title)
        return await self.client.invoke(prompt, operation="video_description")

    async def generate_script_from_info(self, title: str, description: str) -> str:
        """Draft a transcript-like video script from title and description."""
        if not title.strip() and not description.strip():
            return EMPTY_SCRIPT
        prompt = prompts.render(
            prompts.VIDEO_SCRIPT, title=title, description=description,
        )
        return await self.client.invoke(prompt, operation="video_script")
