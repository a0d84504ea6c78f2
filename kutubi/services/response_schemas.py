"""Response Schemas — google.genai Schema objects sent as response_schema.

Invariants:
    - Every structured operation has exactly one schema here
    - The same Schema object validates the decoded response (core/structured_output.py)
    - Object schemas list every field the domain validator reads as required
"""

from google.genai import types

_STRING = types.Type.STRING


def _string_list(description: str) -> types.Schema:
    return types.Schema(
        type=types.Type.ARRAY,
        items=types.Schema(type=_STRING, description=description),
    )


CATEGORIES = _string_list("A single category, one or two words max.")
KEYWORDS = _string_list("A single keyword or key phrase.")
SUGGESTIONS = _string_list("A single suggested topic or title in Arabic.")

QUIZ = types.Schema(
    type=types.Type.ARRAY,
    items=types.Schema(
        type=types.Type.OBJECT,
        properties={
            "question": types.Schema(
                type=_STRING, description="The quiz question.",
            ),
            "options": types.Schema(
                type=types.Type.ARRAY,
                items=types.Schema(type=_STRING),
                description="An array of 4 possible answers.",
            ),
            "correctAnswerIndex": types.Schema(
                type=types.Type.INTEGER,
                description="The 0-based index of the correct answer in the options array.",
            ),
        },
        required=["question", "options", "correctAnswerIndex"],
    ),
)

SENTIMENT = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "sentiment": types.Schema(
            type=_STRING,
            description='The overall sentiment, must be one of: "إيجابي", "سلبي", "محايد".',
        ),
        "explanation": types.Schema(
            type=_STRING,
            description="A brief explanation for the sentiment analysis.",
        ),
    },
    required=["sentiment", "explanation"],
)

RATING = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "rating": types.Schema(
            type=types.Type.INTEGER,
            description="A numerical rating from 1 to 5.",
        ),
        "review": types.Schema(
            type=_STRING,
            description="A concise review in Arabic explaining the rating.",
        ),
    },
    required=["rating", "review"],
)
