"""Rewriting Handlers — translate_to_english, translate_to_arabic, design_article_from_content.

Invariants:
    - Translations keep the source markdown formatting and are never truncated
    - Output is the model's text unchanged
"""

from kutubi.core.default_messages import EMPTY_ARTICLE, EMPTY_TRANSLATION
from kutubi.infrastructure.gemini_client import ResilientGeminiClient
from kutubi.services import prompt_templates as prompts


class RewritingHandlers:
    """Same content, different form: translations and blog articles."""

    def __init__(self, client: ResilientGeminiClient):
        self.client = client

    async def translate_to_english(self, content: str) -> str:
        if not content.strip():
            return EMPTY_TRANSLATION
        prompt = prompts.render(prompts.TO_ENGLISH, content)
        return await self.client.invoke(prompt, operation="translate_en")

    async def translate_to_arabic(self, content: str) -> str:
        if not content.strip():
            return EMPTY_TRANSLATION
        prompt = prompts.render(prompts.TO_ARABIC, content)
        return await self.client.invoke(prompt, operation="translate_ar")

    async def design_article_from_content(self, content: str) -> str:
        """Blog-ready Markdown article ending with the Darisni signature line."""
        if not content.strip():
            return EMPTY_ARTICLE
        prompt = prompts.render(
            prompts.ARTICLE, content, prompts.FULL_DOCUMENT_LIMIT,
        )
        return await self.client.invoke(prompt, operation="article")
