"""Extraction Handlers — keywords, book title, suggestions, rating.

Tests cover:
    - Structured list results validated as lists of strings
    - Book title is trimmed and reads only the first page
    - Rating is clamped into 1-5 and rendered as stars
    - Non-integer rating → MalformedDomainResultError (not retried)
"""

import pytest

from kutubi.core.default_messages import EMPTY_RATING, UNKNOWN_TITLE
from kutubi.core.errors import MalformedDomainResultError
from kutubi.services import prompt_templates as prompts
from kutubi.services.handle_extraction import ExtractionHandlers


async def test_keywords_returned(client_for):
    client, handle = client_for(['["الصلاة", "الزكاة"]'])
    result = await ExtractionHandlers(client).extract_keywords("نص")
    assert result == ["الصلاة", "الزكاة"]
    assert handle.calls[0]["config"].response_schema is not None


async def test_book_title_trimmed(client_for):
    client, _ = client_for(["  رياض الصالحين \n"])
    assert await ExtractionHandlers(client).extract_book_title("صفحة") == "رياض الصالحين"


async def test_book_title_reads_first_page_only(client_for):
    client, handle = client_for(["عنوان"])
    await ExtractionHandlers(client).extract_book_title("y" * 10_000)
    prompt = handle.calls[0]["contents"]
    assert "y" * prompts.FIRST_PAGE_LIMIT in prompt
    assert "y" * (prompts.FIRST_PAGE_LIMIT + 1) not in prompt


async def test_suggestions_returned(client_for):
    client, _ = client_for(['["الفقه", "السنة"]'])
    result = await ExtractionHandlers(client).generate_content_suggestions("نص")
    assert result == ["الفقه", "السنة"]


@pytest.mark.parametrize("rating, stars", [
    (4, "★★★★☆ (4/5)"),
    (7, "★★★★★ (5/5)"),
    (0, "★☆☆☆☆ (1/5)"),
])
async def test_rating_clamped_and_formatted(client_for, rating, stars):
    client, _ = client_for([f'{{"rating": {rating}, "review": "واضح ومنظم"}}'])
    result = await ExtractionHandlers(client).rate_content("نص")
    assert stars in result
    assert result.endswith("**المراجعة:**\nواضح ومنظم")


async def test_fractional_rating_is_domain_error(client_for):
    client, handle = client_for(['{"rating": 3.5, "review": "جيد"}'])
    with pytest.raises(MalformedDomainResultError) as exc_info:
        await ExtractionHandlers(client).rate_content("نص")
    assert exc_info.value.operation == "rating"
    assert len(handle.calls) == 1


async def test_empty_input_defaults_without_calls(client_for):
    client, handle = client_for()
    handlers = ExtractionHandlers(client)
    assert await handlers.extract_keywords("") == []
    assert await handlers.extract_book_title(" ") == UNKNOWN_TITLE
    assert await handlers.generate_content_suggestions("") == []
    assert await handlers.rate_content("\n") == EMPTY_RATING
    assert handle.calls == []
