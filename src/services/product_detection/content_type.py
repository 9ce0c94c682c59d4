"""Local content-type classification used when the deep extractor gives no answer."""

import re

from constants.text_patterns import (
    COMPARISON_INDICATORS,
    HOW_TO_INDICATORS,
    LISTICLE_PATTERNS,
    REVIEW_INDICATORS,
)
from services.product_detection.config import DEFAULT_CONTENT_TYPE

LISTICLE_MIN_ITEMS = 5


def _mentions_any(text: str, indicators: list[str]) -> bool:
    return any(re.search(rf"(?<!\w){re.escape(indicator)}(?!\w)", text) for indicator in indicators)


def detect_content_type(text: str) -> str:
    """Classify as comparison, listicle, review, how-to or informational, checked in that order."""
    if not text:
        return DEFAULT_CONTENT_TYPE

    lowered = text.lower()
    if _mentions_any(lowered, COMPARISON_INDICATORS):
        return "comparison"

    list_items = sum(len(pattern.findall(text)) for pattern in LISTICLE_PATTERNS)
    if list_items >= LISTICLE_MIN_ITEMS:
        return "listicle"

    if _mentions_any(lowered, REVIEW_INDICATORS):
        return "review"
    if _mentions_any(lowered, HOW_TO_INDICATORS):
        return "how-to"
    return DEFAULT_CONTENT_TYPE
