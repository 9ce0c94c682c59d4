"""
Lexical candidate extraction over segmented block text.

Five strategies look at every block independently:

1. Standalone product lines that identify themselves without a brand.
2. Brand alias followed by a model token, from the brand knowledge base.
3. Bare model numbers behind one or two capitalized words.
4. Headings (levels 2-4) that read like a product name.
5. Emphasized inline text that reads like a product name.

Matches are deduplicated within this stage by normalized key. A recurrence
in another block adds that block and a source to the existing candidate;
merging across stages happens later in clustering.
"""

import logging
import re
from typing import Dict, List, Optional

from bs4 import BeautifulSoup

from constants import BRAND_DATABASE, COMPILED_STANDALONE_PATTERNS, LINKING_WORDS, MODEL_NUMBER_PATTERN
from constants.text_patterns import (
    CAPITALIZED_PRODUCT_SIGNAL,
    EMPHASIS_STOPWORD_PATTERN,
    HEADING_LEAD_PATTERN,
    HEADING_SUFFIX_PATTERN,
    ORDINAL_PREFIX_PATTERN,
)
from services.product_detection.config import (
    BRAND_MODEL_LENGTH,
    EMPHASIS_LENGTH,
    EMPHASIS_MAX_WORDS,
    HEADING_LEVELS,
    HEADING_NAME_LENGTH,
    MIN_STANDALONE_LENGTH,
    MODEL_NUMBER_LENGTH,
    SOURCE_CONFIDENCE,
)
from services.product_detection.models import (
    DetectedCandidate,
    DetectionSource,
    ParagraphBlock,
    SourceKind,
)
from services.product_detection.text_utils import (
    collapse_whitespace,
    detect_brand_from_name,
    extract_quote,
    normalized_key,
)

logger = logging.getLogger(__name__)

_TRAILING_PUNCTUATION = re.compile(r"[.,!?;:]+$")
_DIGIT = re.compile(r"\d")


def _compile_brand_model_patterns() -> List[tuple[re.Pattern, str, str]]:
    linking = "|".join(LINKING_WORDS)
    patterns = []
    for brand, entry in BRAND_DATABASE.items():
        for alias in entry["aliases"]:
            pattern = re.compile(
                rf"\b({re.escape(alias)})\s+([A-Za-z0-9][\w\s\-\.&']{{1,50}}?)"
                rf"(?=[\.,!?;:\)\]\"'<]|\s+(?:{linking})\b|\s*$)",
                re.IGNORECASE,
            )
            patterns.append((pattern, brand, entry["category"]))
    return patterns


BRAND_MODEL_PATTERNS = _compile_brand_model_patterns()


class _StageRegistry:
    """Candidates of one extraction run, keyed by normalized name."""

    def __init__(self):
        self.candidates: List[DetectedCandidate] = []
        self._by_key: Dict[str, DetectedCandidate] = {}

    def add(
        self,
        name: str,
        kind: SourceKind,
        block: ParagraphBlock,
        position: int,
        first_mention: str,
        brand: Optional[str] = None,
        model: Optional[str] = None,
        category: str = "",
    ) -> None:
        key = normalized_key(name)
        if not key:
            return

        source = DetectionSource(
            kind=kind,
            confidence=SOURCE_CONFIDENCE[kind],
            raw_match=name,
            position=position,
        )

        existing = self._by_key.get(key)
        if existing is not None:
            if existing.add_paragraph(block.index):
                existing.sources.append(source)
            return

        candidate = DetectedCandidate(
            canonical_name=name,
            name_variants=[name],
            brand=brand,
            model=model,
            paragraph_indices=[block.index],
            sources=[source],
            search_query=name,
            first_mention=first_mention,
            best_placement_index=block.index,
            category_hint=category,
        )
        self._by_key[key] = candidate
        self.candidates.append(candidate)


def extract_lexical_candidates(paragraphs: List[ParagraphBlock]) -> List[DetectedCandidate]:
    registry = _StageRegistry()

    for block in paragraphs:
        _extract_standalone(block, registry)
        _extract_brand_model(block, registry)
        _extract_model_numbers(block, registry)
        _extract_heading(block, registry)
        _extract_emphasis(block, registry)

    logger.info(f"[Lexical] {len(registry.candidates)} candidates from {len(paragraphs)} blocks")
    return registry.candidates


def _extract_standalone(block: ParagraphBlock, registry: _StageRegistry) -> None:
    text = block.text
    for pattern, category in COMPILED_STANDALONE_PATTERNS:
        for match in pattern.finditer(text):
            name = (match.group(1) or "").strip()
            if len(name) < MIN_STANDALONE_LENGTH:
                continue
            registry.add(
                name,
                SourceKind.STANDALONE_PATTERN,
                block,
                match.start(),
                extract_quote(text, match.start(), len(name)),
                brand=detect_brand_from_name(name),
                category=category,
            )


def _extract_brand_model(block: ParagraphBlock, registry: _StageRegistry) -> None:
    text = block.text
    min_len, max_len = BRAND_MODEL_LENGTH
    for pattern, brand, category in BRAND_MODEL_PATTERNS:
        for match in pattern.finditer(text):
            full = _TRAILING_PUNCTUATION.sub("", match.group(0).strip())
            if not min_len <= len(full) <= max_len:
                continue
            registry.add(
                full,
                SourceKind.BRAND_MODEL_PATTERN,
                block,
                match.start(),
                extract_quote(text, match.start(), len(full)),
                brand=brand,
                model=match.group(2).strip(),
                category=category,
            )


def _extract_model_numbers(block: ParagraphBlock, registry: _StageRegistry) -> None:
    text = block.text
    min_len, max_len = MODEL_NUMBER_LENGTH
    for match in MODEL_NUMBER_PATTERN.finditer(text):
        full = match.group(0).strip()
        if not min_len <= len(full) <= max_len:
            continue
        registry.add(
            full,
            SourceKind.MODEL_NUMBER_PATTERN,
            block,
            match.start(),
            extract_quote(text, match.start(), len(full)),
            brand=match.group(1),
            model=match.group(2),
        )


def _extract_heading(block: ParagraphBlock, registry: _StageRegistry) -> None:
    low, high = HEADING_LEVELS
    if not block.is_heading or not low <= block.heading_level <= high:
        return

    name = clean_heading_text(block.text)
    min_len, max_len = HEADING_NAME_LENGTH
    if not min_len <= len(name) <= max_len or not has_product_signal(name):
        return

    registry.add(
        name,
        SourceKind.HEADING,
        block,
        0,
        name,
        brand=detect_brand_from_name(name),
    )


def _extract_emphasis(block: ParagraphBlock, registry: _StageRegistry) -> None:
    if not block.has_emphasis:
        return

    min_len, max_len = EMPHASIS_LENGTH
    soup = BeautifulSoup(block.html, "html.parser")
    for tag in soup.find_all(["strong", "b"]):
        name = collapse_whitespace(tag.get_text(" "))
        if not min_len <= len(name) <= max_len:
            continue
        if len(name.split(" ")) > EMPHASIS_MAX_WORDS:
            continue
        if EMPHASIS_STOPWORD_PATTERN.match(name) or not has_product_signal(name):
            continue
        registry.add(
            name,
            SourceKind.EMPHASIS,
            block,
            max(block.text.find(name), 0),
            name,
            brand=detect_brand_from_name(name),
        )


def clean_heading_text(text: str) -> str:
    """Drop ordinal prefixes, editorial lead words and "- Full Review" style suffixes."""
    cleaned = ORDINAL_PREFIX_PATTERN.sub("", text)
    cleaned = HEADING_LEAD_PATTERN.sub("", cleaned)
    cleaned = HEADING_SUFFIX_PATTERN.sub("", cleaned)
    return cleaned.strip()


def has_product_signal(name: str) -> bool:
    return bool(
        CAPITALIZED_PRODUCT_SIGNAL.search(name)
        or _DIGIT.search(name)
        or detect_brand_from_name(name)
    )
