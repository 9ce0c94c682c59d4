"""
Text normalization and name comparison utilities.

The normalized key and the name similarity defined here decide which
candidates are merged, so both are kept as standalone pure functions.
"""

import re
from functools import lru_cache
from typing import Optional

from bs4 import BeautifulSoup

from constants import BRAND_ALIAS_MAP, BRAND_DATABASE
from services.product_detection.config import (
    CONTAINMENT_BONUS,
    NORMALIZED_KEY_MAX_WORDS,
    QUOTE_CONTEXT_CHARS,
)

_APOSTROPHES = re.compile(r"['’‘]")
_PUNCTUATION = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text or "").strip()


def strip_html(markup: str) -> str:
    """Plain text of a markup fragment, whitespace collapsed."""
    if not markup:
        return ""
    text = BeautifulSoup(markup, "html.parser").get_text(" ")
    return collapse_whitespace(text)


def normalized_key(name: str) -> str:
    """Lower-case, drop apostrophes and punctuation, keep the first five words."""
    lowered = _APOSTROPHES.sub("", (name or "").lower())
    spaced = _PUNCTUATION.sub(" ", lowered)
    words = [w for w in collapse_whitespace(spaced).split(" ") if len(w) > 1]
    return " ".join(words[:NORMALIZED_KEY_MAX_WORDS])


def name_similarity(a: str, b: str) -> float:
    """Jaccard similarity of normalized-key words plus a containment bonus, capped at 1.0."""
    key_a = normalized_key(a)
    key_b = normalized_key(b)
    if not key_a or not key_b:
        return 0.0
    if key_a == key_b:
        return 1.0

    words_a = set(key_a.split(" "))
    words_b = set(key_b.split(" "))
    jaccard = len(words_a & words_b) / len(words_a | words_b)

    shorter, longer = sorted((key_a, key_b), key=len)
    containment = CONTAINMENT_BONUS if shorter in longer else 0.0

    return min(jaccard + containment, 1.0)


def extract_quote(text: str, position: int, match_length: int) -> str:
    start = max(0, position - QUOTE_CONTEXT_CHARS)
    end = min(len(text), position + match_length + QUOTE_CONTEXT_CHARS)
    return text[start:end].strip()


@lru_cache(maxsize=1)
def _alias_patterns() -> list[tuple[re.Pattern, str]]:
    # Longer aliases first so "philips hue" wins over "hue".
    aliases = sorted(BRAND_ALIAS_MAP.items(), key=lambda item: len(item[0]), reverse=True)
    return [
        (re.compile(rf"(?<![\w-]){re.escape(alias)}(?![\w-])", re.IGNORECASE), brand)
        for alias, brand in aliases
    ]


def detect_brand_from_name(name: str) -> Optional[str]:
    """Knowledge-base brand key whose alias appears as a whole word in the name."""
    if not name:
        return None
    for pattern, brand in _alias_patterns():
        if pattern.search(name):
            return brand
    return None


def resolve_brand(brand: Optional[str]) -> Optional[str]:
    """Map a brand string (key or alias, any case) to its knowledge-base key."""
    if not brand:
        return None
    lowered = collapse_whitespace(brand).lower()
    if lowered in BRAND_DATABASE:
        return lowered
    return BRAND_ALIAS_MAP.get(lowered)
