"""Analysis Handlers — analysis fan-out, category degradation, streaming summary, sentiment.

Tests cover:
    - analyze_text_content issues analysis and categories concurrently
    - Category failures degrade to [] without failing the analysis
    - Credential failures in categorization propagate
    - Empty input returns defaults without any model call
    - summarize_content streams fragments and truncates the document
"""

import time

import pytest

from kutubi.core.default_messages import EMPTY_ANALYSIS, EMPTY_SENTIMENT, EMPTY_SUMMARY
from kutubi.core.errors import CredentialMissingError, MalformedStructuredResponseError
from kutubi.services import prompt_templates as prompts
from kutubi.services.handle_analysis import AnalysisHandlers

from tests.services.mock_gemini import _Stream, auth_error


async def test_analysis_returns_text_and_categories(client_for):
    client, handle = client_for(["تحليل شامل", '["فقه", "عقيدة"]'])
    result = await AnalysisHandlers(client).analyze_text_content("نص المستند")
    assert result.analysis == "تحليل شامل"
    assert result.categories == ["فقه", "عقيدة"]
    assert len(handle.calls) == 2
    assert handle.calls[0]["config"] is None
    assert handle.calls[1]["config"].response_mime_type == "application/json"


async def test_analysis_and_categories_run_concurrently(client_for):
    client, _ = client_for(["تحليل", '["تاريخ"]'], delay=0.3)
    started = time.monotonic()
    result = await AnalysisHandlers(client).analyze_text_content("نص")
    elapsed = time.monotonic() - started
    assert result.categories == ["تاريخ"]
    assert elapsed < 0.55


async def test_category_failure_degrades_to_empty(client_for):
    client, handle = client_for(["تحليل", "not json", "not json", "not json"])
    result = await AnalysisHandlers(client).analyze_text_content("نص")
    assert result.analysis == "تحليل"
    assert result.categories == []
    assert len(handle.calls) == 4


async def test_categories_not_a_string_list_degrade(client_for):
    client, _ = client_for(['[1, 2]'] * 3)
    assert await AnalysisHandlers(client).categorize_content("نص") == []


async def test_categories_credential_error_propagates(client_for):
    client, _ = client_for([auth_error()] * 3)
    with pytest.raises(CredentialMissingError):
        await AnalysisHandlers(client).categorize_content("نص")


async def test_categories_use_excerpt(client_for):
    client, handle = client_for(['["فقه"]'])
    await AnalysisHandlers(client).categorize_content("x" * 20_000)
    prompt = handle.calls[0]["contents"]
    assert "x" * prompts.EXCERPT_LIMIT in prompt
    assert "x" * (prompts.EXCERPT_LIMIT + 1) not in prompt


async def test_empty_input_defaults_without_calls(client_for):
    client, handle = client_for()
    handlers = AnalysisHandlers(client)
    analysis = await handlers.analyze_text_content("  \n ")
    assert analysis.analysis == EMPTY_ANALYSIS
    assert analysis.categories == []
    assert await handlers.categorize_content("") == []
    sentiment = await handlers.analyze_sentiment("")
    assert sentiment.sentiment == "محايد"
    assert sentiment.explanation == EMPTY_SENTIMENT
    assert handle.calls == []
    assert client.handles.get_calls == 0


async def test_summary_streams_fragments(client_for):
    client, handle = client_for(stream=_Stream(["أولاً", "ثانياً"]))
    fragments = [
        f async for f in AnalysisHandlers(client).summarize_content("نص طويل")
    ]
    assert fragments == ["أولاً", "ثانياً"]
    assert "نص طويل" in handle.stream_calls[0]["contents"]


async def test_summary_empty_input_placeholder(client_for):
    client, handle = client_for(stream=_Stream(["unused"]))
    fragments = [f async for f in AnalysisHandlers(client).summarize_content("")]
    assert fragments == [EMPTY_SUMMARY]
    assert handle.stream_calls == []


async def test_sentiment_parsed(client_for):
    client, _ = client_for(['{"sentiment": "إيجابي", "explanation": "نبرة متفائلة"}'])
    result = await AnalysisHandlers(client).analyze_sentiment("نص")
    assert result.sentiment == "إيجابي"
    assert result.explanation == "نبرة متفائلة"


async def test_sentiment_missing_field_is_malformed(client_for):
    client, _ = client_for(['{"sentiment": "إيجابي"}'] * 3)
    with pytest.raises(MalformedStructuredResponseError):
        await AnalysisHandlers(client).analyze_sentiment("نص")
