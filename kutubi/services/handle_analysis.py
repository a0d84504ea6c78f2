"""Analysis Handlers — analyze_text_content, categorize_content, summarize_content, analyze_sentiment.

Invariants:
    - analyze_text_content runs analysis and categorization concurrently (fan-out/join)
    - categorize_content degrades to [] on any non-credential failure (auxiliary enrichment)
    - Credential errors always propagate so the UI can prompt for a key
    - summarize_content streams fragments; empty input yields one placeholder fragment

Design Decisions:
    - asyncio.gather over sequential awaits: wall time ≈ slower of the two calls
    - Categories are never worth failing the primary analysis for (ADR: graceful degradation)
"""

import asyncio
import logging
from collections.abc import AsyncIterator

from pydantic import TypeAdapter

from kutubi.core.default_messages import EMPTY_ANALYSIS, EMPTY_SENTIMENT, EMPTY_SUMMARY
from kutubi.core.domain_types import Sentiment
from kutubi.core.errors import CREDENTIAL_KINDS, KutubiError
from kutubi.infrastructure.gemini_client import ResilientGeminiClient
from kutubi.schemas.documents import DocumentAnalysis, SentimentResult
from kutubi.services import prompt_templates as prompts
from kutubi.services import response_schemas as schemas
from kutubi.services.validate_results import STRING_LIST, validate_result

logger = logging.getLogger(__name__)

_SENTIMENT = TypeAdapter(SentimentResult)


class AnalysisHandlers:
    """Whole-document understanding: analysis, categories, summary, sentiment."""

    def __init__(self, client: ResilientGeminiClient):
        self.client = client

    async def analyze_text_content(self, content: str) -> DocumentAnalysis:
        """Structured analysis plus categories, fetched concurrently."""
        if not content.strip():
            return DocumentAnalysis(analysis=EMPTY_ANALYSIS, categories=[])
        prompt = prompts.render(
            prompts.ANALYSIS, content, prompts.FULL_DOCUMENT_LIMIT,
        )
        analysis, categories = await asyncio.gather(
            self.client.invoke(prompt, operation="analysis"),
            self.categorize_content(content),
        )
        return DocumentAnalysis(analysis=analysis, categories=categories)

    async def categorize_content(self, content: str) -> list[str]:
        if not content.strip():
            return []
        prompt = prompts.render(
            prompts.CATEGORIES, content, prompts.EXCERPT_LIMIT,
        )
        try:
            result = await self.client.invoke(
                prompt, schemas.CATEGORIES, operation="categorize",
            )
            return validate_result(STRING_LIST, result, "categorize")
        except KutubiError as e:
            if e.kind in CREDENTIAL_KINDS:
                raise
            logger.warning(
                f"Failed to generate categories: {e.message}",
                extra={"operation": "categorize", "error_code": e.code},
            )
            return []

    async def summarize_content(self, content: str) -> AsyncIterator[str]:
        """Stream a detailed per-paragraph summary."""
        if not content.strip():
            yield EMPTY_SUMMARY
            return
        prompt = prompts.render(
            prompts.SUMMARY, content, prompts.FULL_DOCUMENT_LIMIT,
        )
        async for fragment in self.client.invoke_streaming(
            prompt, operation="summary",
        ):
            yield fragment

    async def analyze_sentiment(self, content: str) -> SentimentResult:
        if not content.strip():
            return SentimentResult(
                sentiment=Sentiment.NEUTRAL.value, explanation=EMPTY_SENTIMENT,
            )
        prompt = prompts.render(
            prompts.SENTIMENT, content, prompts.FULL_DOCUMENT_LIMIT,
        )
        result = await self.client.invoke(
            prompt, schemas.SENTIMENT, operation="sentiment",
        )
        return validate_result(_SENTIMENT, result, "sentiment")
