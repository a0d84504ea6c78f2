"""Rating Formatting — clamps a model rating and renders it as Markdown stars.

Invariants:
    - clamp_rating always returns an int in [RATING_MIN, RATING_MAX]
    - format_rating output always contains exactly RATING_MAX star marks (filled + empty)
"""

from kutubi.core.domain_types import RATING_MAX, RATING_MIN

FILLED_STAR = "★"
EMPTY_STAR = "☆"


def clamp_rating(rating: int) -> int:
    return max(RATING_MIN, min(RATING_MAX, rating))


def format_rating(rating: int, review: str) -> str:
    """Render a clamped rating and its review as a Markdown block."""
    clamped = clamp_rating(rating)
    stars = FILLED_STAR * clamped + EMPTY_STAR * (RATING_MAX - clamped)
    return (
        "### تقييم المحتوى\n\n"
        f"**التقييم:** {stars} ({clamped}/{RATING_MAX})\n\n"
        f"**المراجعة:**\n{review}"
    )
