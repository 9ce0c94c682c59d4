"""
HTML segmentation into paragraph blocks.

Blocks are addressed by their zero-based index in document order; every
later stage uses that index to mean "this paragraph".
"""

import logging
from typing import List

from constants.text_patterns import (
    BLOCK_SPLIT_PATTERN,
    EMPHASIS_TAG_PATTERN,
    HEADING_TAG_PATTERN,
    IMAGE_TAG_PATTERN,
    LINK_TAG_PATTERN,
    LIST_TAG_PATTERN,
    PRICE_PATTERN,
    RATING_PATTERN,
)
from services.product_detection.config import MIN_BLOCK_MARKUP_LENGTH, MIN_BLOCK_TEXT_LENGTH
from services.product_detection.models import ParagraphBlock
from services.product_detection.text_utils import strip_html

logger = logging.getLogger(__name__)


def parse_into_paragraphs(html: str) -> List[ParagraphBlock]:
    """Split raw HTML into ordered paragraph blocks with structural flags."""
    if not html:
        return []

    parts = [p for p in BLOCK_SPLIT_PATTERN.split(html) if p and len(p.strip()) > MIN_BLOCK_MARKUP_LENGTH]

    blocks: List[ParagraphBlock] = []
    for part in parts:
        text = strip_html(part)
        if len(text) < MIN_BLOCK_TEXT_LENGTH:
            continue
        blocks.append(_build_block(len(blocks), part, text))

    logger.debug(f"[Segmenter] {len(blocks)} blocks from {len(html)} chars of HTML")
    return blocks


def _build_block(index: int, part: str, text: str) -> ParagraphBlock:
    heading = HEADING_TAG_PATTERN.search(part)
    return ParagraphBlock(
        index=index,
        html=part,
        text=text,
        is_heading=heading is not None,
        heading_level=int(heading.group(1)) if heading else 0,
        has_emphasis=bool(EMPHASIS_TAG_PATTERN.search(part)),
        has_list=bool(LIST_TAG_PATTERN.search(part)),
        has_link=bool(LINK_TAG_PATTERN.search(part)),
        has_image=bool(IMAGE_TAG_PATTERN.search(part)),
        has_price_like=bool(PRICE_PATTERN.search(text)),
        has_rating_like=bool(RATING_PATTERN.search(text)),
    )
