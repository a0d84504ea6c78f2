"""Document Routes — one POST endpoint per document operation, SSE for the streaming summary.

Invariants:
    - Every route instantiates its handler with the shared ResilientGeminiClient
    - Free-text results wrapped as {"text": ...}; list results returned as JSON arrays
    - Summary streams summary_chunk events then exactly one done event
    - Credential failures on the summary surface as HTTP 401 before streaming starts;
      later failures become an SSE error event followed by done(error=True)

Design Decisions:
    - StreamingResponse for SSE: event_generator yields formatted SSE lines
    - Handle resolved eagerly for the summary: once headers are sent the status is fixed at 200
"""

import asyncio
import json
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from kutubi.api.dependencies import get_gemini_client
from kutubi.core.errors import KutubiError
from kutubi.infrastructure.gemini_client import ResilientGeminiClient
from kutubi.schemas.documents import (
    ContentRequest, DocumentAnalysis, QuizQuestion, QuizRequest,
    ScriptRequest, SentimentResult, TextResult, VideoDescriptionRequest,
)
from kutubi.services.handle_analysis import AnalysisHandlers
from kutubi.services.handle_extraction import ExtractionHandlers
from kutubi.services.handle_generation import GenerationHandlers
from kutubi.services.handle_rewriting import RewritingHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/documents", tags=["documents"])

# ADR: SSE headers prevent proxy/browser buffering of streamed events.
_SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "X-Accel-Buffering": "no",
    "Connection": "keep-alive",
}


# -- Analysis ------------------------------------------------------------------

@router.post("/analysis", response_model=DocumentAnalysis)
async def analyze_document(
    body: ContentRequest,
    client: ResilientGeminiClient = Depends(get_gemini_client),
):
    return await AnalysisHandlers(client).analyze_text_content(body.content)


@router.post("/categories", response_model=list[str])
async def categorize_document(
    body: ContentRequest,
    client: ResilientGeminiClient = Depends(get_gemini_client),
):
    return await AnalysisHandlers(client).categorize_content(body.content)


@router.post("/summary")
async def summarize_document(
    body: ContentRequest,
    client: ResilientGeminiClient = Depends(get_gemini_client),
):
    """SSE stream of summary fragments."""
    if body.content.strip():
        client.handles.get_handle()
    handlers = AnalysisHandlers(client)

    async def event_generator():
        try:
            async for fragment in handlers.summarize_content(body.content):
                yield _sse_line({"type": "summary_chunk", "data": fragment})
            yield _sse_line(_done_event())
        except KutubiError as e:
            yield _sse_line(e.to_sse_event())
            yield _sse_line(_done_event(error=True))
        except asyncio.CancelledError:
            logger.info("Client disconnected from summary stream")
            raise

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers=_SSE_HEADERS,
    )


@router.post("/sentiment", response_model=SentimentResult)
async def analyze_document_sentiment(
    body: ContentRequest,
    client: ResilientGeminiClient = Depends(get_gemini_client),
):
    return await AnalysisHandlers(client).analyze_sentiment(body.content)


# -- Extraction ----------------------------------------------------------------

@router.post("/keywords", response_model=list[str])
async def extract_document_keywords(
    body: ContentRequest,
    client: ResilientGeminiClient = Depends(get_gemini_client),
):
    return await ExtractionHandlers(client).extract_keywords(body.content)


@router.post("/book-title", response_model=TextResult)
async def extract_title(
    body: ContentRequest,
    client: ResilientGeminiClient = Depends(get_gemini_client),
):
    title = await ExtractionHandlers(client).extract_book_title(body.content)
    return TextResult(text=title)


@router.post("/suggestions", response_model=list[str])
async def suggest_related_content(
    body: ContentRequest,
    client: ResilientGeminiClient = Depends(get_gemini_client),
):
    return await ExtractionHandlers(client).generate_content_suggestions(
        body.content,
    )


@router.post("/rating", response_model=TextResult)
async def rate_document(
    body: ContentRequest,
    client: ResilientGeminiClient = Depends(get_gemini_client),
):
    rating = await ExtractionHandlers(client).rate_content(body.content)
    return TextResult(text=rating)


# -- Generation ----------------------------------------------------------------

@router.post("/quiz", response_model=list[QuizQuestion])
async def create_document_quiz(
    body: QuizRequest,
    client: ResilientGeminiClient = Depends(get_gemini_client),
):
    return await GenerationHandlers(client).create_quiz(
        body.content, body.question_count,
    )


@router.post("/book-description", response_model=TextResult)
async def describe_book(
    body: ContentRequest,
    client: ResilientGeminiClient = Depends(get_gemini_client),
):
    text = await GenerationHandlers(client).generate_book_description(
        body.content,
    )
    return TextResult(text=text)


@router.post("/video-description", response_model=TextResult)
async def describe_video(
    body: VideoDescriptionRequest,
    client: ResilientGeminiClient = Depends(get_gemini_client),
):
    text = await GenerationHandlers(client).generate_video_description(
        body.title,
    )
    return TextResult(text=text)


@router.post("/script", response_model=TextResult)
async def draft_video_script(
    body: ScriptRequest,
    client: ResilientGeminiClient = Depends(get_gemini_client),
):
    text = await GenerationHandlers(client).generate_script_from_info(
        body.title, body.description,
    )
    return TextResult(text=text)


# -- Rewriting -----------------------------------------------------------------

@router.post("/translations/english", response_model=TextResult)
async def translate_document_to_english(
    body: ContentRequest,
    client: ResilientGeminiClient = Depends(get_gemini_client),
):
    text = await RewritingHandlers(client).translate_to_english(body.content)
    return TextResult(text=text)


@router.post("/translations/arabic", response_model=TextResult)
async def translate_document_to_arabic(
    body: ContentRequest,
    client: ResilientGeminiClient = Depends(get_gemini_client),
):
    text = await RewritingHandlers(client).translate_to_arabic(body.content)
    return TextResult(text=text)


@router.post("/article", response_model=TextResult)
async def design_article(
    body: ContentRequest,
    client: ResilientGeminiClient = Depends(get_gemini_client),
):
    text = await RewritingHandlers(client).design_article_from_content(
        body.content,
    )
    return TextResult(text=text)


# -- Helpers -------------------------------------------------------------------

def _done_event(error: bool = False) -> dict:
    return {"type": "done", "data": {"error": error}}


def _sse_line(event: dict) -> str:
    """Format event as SSE data line."""
    return f"data: {json.dumps(event, ensure_ascii=False)}\n\n"
