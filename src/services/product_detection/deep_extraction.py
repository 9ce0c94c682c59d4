"""
Deep extraction step.

The external extractor is untrusted and best effort. Any failure, whether
the call itself or an unusable answer, degrades to zero extra candidates and
a locally classified content type; it never fails the pipeline.
"""

import logging
from typing import List, Protocol

from services.product_detection.config import DEFAULT_CONTENT_TYPE
from services.product_detection.content_type import detect_content_type
from services.product_detection.models import (
    DeepExtractionOutcome,
    DetectedCandidate,
    DetectionSource,
    ExternalCandidate,
    ExternalExtraction,
    ParagraphBlock,
    SourceKind,
)
from services.product_detection.text_utils import detect_brand_from_name

logger = logging.getLogger(__name__)


class DeepExtractor(Protocol):
    async def extract(
        self,
        title: str,
        numbered_paragraphs: str,
        pre_detected_summary: str,
    ) -> ExternalExtraction:
        ...


def build_numbered_paragraphs(paragraphs: List[ParagraphBlock], max_chars: int) -> str:
    numbered = "\n\n".join(f"[P{block.index}] {block.text}" for block in paragraphs)
    return numbered[:max_chars]


def build_pre_detected_summary(candidates: List[DetectedCandidate]) -> str:
    if not candidates:
        return "None pre-detected"
    lines = []
    for i, candidate in enumerate(candidates, start=1):
        kind = candidate.sources[0].kind.value if candidate.sources else "unknown"
        provisional = candidate.confidence if candidate.confidence is not None else candidate.best_source_confidence()
        lines.append(f'{i}. "{candidate.canonical_name}" ({kind}, conf: {provisional})')
    return "\n".join(lines)


async def run_deep_extraction(
    extractor: DeepExtractor,
    title: str,
    paragraphs: List[ParagraphBlock],
    candidates: List[DetectedCandidate],
    max_chars: int = 15000,
    min_confidence: float = 50,
) -> DeepExtractionOutcome:
    numbered = build_numbered_paragraphs(paragraphs, max_chars)
    summary = build_pre_detected_summary(candidates)

    try:
        extraction = await extractor.extract(title, numbered, summary)
    except Exception as e:
        logger.warning(f"[DeepExtraction] Extractor failed, continuing with pattern results: {e}")
        return _fallback_outcome(paragraphs)

    converted = [
        to_detected_candidate(item, len(paragraphs))
        for item in extraction.candidates
        if item.confidence >= min_confidence and item.name.strip()
    ]
    dropped = len(extraction.candidates) - len(converted)
    logger.info(
        f"[DeepExtraction] {len(converted)} candidates accepted, {dropped} below confidence {min_confidence}"
    )
    return DeepExtractionOutcome(
        candidates=converted,
        content_type=extraction.content_type or DEFAULT_CONTENT_TYPE,
        comparison_detected=extraction.comparison_detected,
    )


def to_detected_candidate(item: ExternalCandidate, paragraph_count: int) -> DetectedCandidate:
    name = item.name.strip()
    paragraph = clamp_paragraph(item.paragraph_number, paragraph_count)
    return DetectedCandidate(
        canonical_name=name,
        name_variants=[name],
        brand=item.brand or detect_brand_from_name(name),
        model=item.model or None,
        paragraph_indices=[paragraph],
        sources=[
            DetectionSource(
                kind=SourceKind.EXTERNAL_EXTRACTION,
                confidence=min(int(round(item.confidence)), 100),
                raw_match=name,
                position=0,
            )
        ],
        search_query=item.search_query or name,
        first_mention=name,
        best_placement_index=paragraph,
    )


def clamp_paragraph(number, paragraph_count: int) -> int:
    if not number or paragraph_count <= 0:
        return 0
    return min(max(int(number), 0), paragraph_count - 1)


def _fallback_outcome(paragraphs: List[ParagraphBlock]) -> DeepExtractionOutcome:
    content_type = detect_content_type("\n".join(block.text for block in paragraphs))
    return DeepExtractionOutcome(
        candidates=[],
        content_type=content_type,
        comparison_detected=content_type == "comparison",
        succeeded=False,
    )
