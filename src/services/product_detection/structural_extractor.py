"""
Structural extraction of marketplace identifiers from raw HTML.

Identifiers embedded in links and attributes are the only evidence trusted
without corroboration, so every candidate produced here carries a single
link-id source at full confidence.
"""

import logging
import re
from typing import List, Optional

from services.product_detection.config import ANCHOR_TEXT_LENGTH, SOURCE_CONFIDENCE
from services.product_detection.models import (
    DetectedCandidate,
    DetectionSource,
    ParagraphBlock,
    SourceKind,
)
from services.product_detection.text_utils import strip_html

logger = logging.getLogger(__name__)

_ID = r"([A-Z0-9]{8,12})(?![A-Za-z0-9])"

IDENTIFIER_PATTERNS = [
    re.compile(rf"amazon\.[a-z.]+/(?:dp|gp/product|gp/aw/d|exec/obidos/ASIN)/{_ID}", re.IGNORECASE),
    re.compile(rf"/dp/{_ID}", re.IGNORECASE),
    re.compile(r"/(B0[A-Z0-9]{8})(?=[/?\s\"'&<]|$)", re.IGNORECASE),
    re.compile(r"data-asin=[\"']([A-Z0-9]{8,12})[\"']", re.IGNORECASE),
    re.compile(rf"\basin[=:][\"']?{_ID}", re.IGNORECASE),
]


def extract_identifier_candidates(html: str, paragraphs: List[ParagraphBlock]) -> List[DetectedCandidate]:
    """One candidate per distinct marketplace identifier found in the markup."""
    candidates: List[DetectedCandidate] = []
    if not html:
        return candidates

    seen: set[str] = set()
    for pattern in IDENTIFIER_PATTERNS:
        for match in pattern.finditer(html):
            identifier = match.group(1).upper()
            if identifier in seen:
                continue
            seen.add(identifier)

            anchor_text = find_anchor_text(html, identifier)
            paragraph_index = find_paragraph_for_position(match.start(), html, paragraphs)
            candidates.append(_build_candidate(identifier, anchor_text, match, paragraph_index))

    logger.info(f"[Structural] {len(candidates)} identifier candidates: {sorted(seen)}")
    return candidates


def find_anchor_text(html: str, identifier: str) -> Optional[str]:
    """Readable text of the first link whose href contains the identifier."""
    link_pattern = re.compile(
        rf"<a\b[^>]*href=[\"'][^\"']*{re.escape(identifier)}[^\"']*[\"'][^>]*>([\s\S]{{1,300}}?)</a>",
        re.IGNORECASE,
    )
    match = link_pattern.search(html)
    if not match:
        return None
    text = strip_html(match.group(1))
    min_len, max_len = ANCHOR_TEXT_LENGTH
    if min_len <= len(text) <= max_len:
        return text
    return None


def find_paragraph_for_position(position: int, html: str, paragraphs: List[ParagraphBlock]) -> int:
    """Index of the block whose markup span contains the offset, 0 when none does."""
    cursor = 0
    for block in paragraphs:
        start = html.find(block.html, cursor)
        if start == -1:
            continue
        end = start + len(block.html)
        if start <= position <= end:
            return block.index
        cursor = end
    return 0


def _build_candidate(
    identifier: str,
    anchor_text: Optional[str],
    match: re.Match,
    paragraph_index: int,
) -> DetectedCandidate:
    name = anchor_text or identifier
    variants = [anchor_text, identifier] if anchor_text else [identifier]
    return DetectedCandidate(
        canonical_name=name,
        name_variants=variants,
        identifier=identifier,
        paragraph_indices=[paragraph_index],
        sources=[
            DetectionSource(
                kind=SourceKind.LINK_ID,
                confidence=SOURCE_CONFIDENCE[SourceKind.LINK_ID],
                raw_match=match.group(0),
                position=match.start(),
            )
        ],
        search_query=name,
        first_mention=name,
        best_placement_index=paragraph_index,
    )
