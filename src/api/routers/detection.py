"""API router for product candidate detection."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from config import settings
from models.schemas import CandidateResponse, DetectionRequest, DetectionResponse, SourceResponse
from services.product_detection import DetectedCandidate, LLMDeepExtractor, ProductDetectionPipeline
from services.product_detection.deep_extraction import DeepExtractor

logger = logging.getLogger(__name__)

router = APIRouter()


def get_deep_extractor() -> Optional[DeepExtractor]:
    if not settings.llm_api_key:
        return None
    return LLMDeepExtractor()


def get_pipeline(deep_extractor: Optional[DeepExtractor] = Depends(get_deep_extractor)) -> ProductDetectionPipeline:
    return ProductDetectionPipeline(deep_extractor=deep_extractor)


@router.post("/candidates", response_model=DetectionResponse)
async def detect_candidates(
    request: DetectionRequest,
    pipeline: ProductDetectionPipeline = Depends(get_pipeline),
) -> DetectionResponse:
    """
    Detect and score product candidates in an article without verifying them.

    Args:
        request: Article title and HTML plus detection options
        pipeline: Detection pipeline with the configured deep extractor

    Returns:
        Calibrated candidates sorted by confidence, highest first
    """
    detection = await pipeline.detect_candidates(
        request.title,
        request.html,
        skip_external=request.skip_external,
    )

    threshold = request.min_confidence
    if threshold is None:
        threshold = settings.detection_min_confidence
    candidates = [c for c in detection.candidates if (c.confidence or 0) >= threshold]

    logger.info(
        f"Detection for '{request.title}': {len(candidates)}/{len(detection.candidates)} "
        f"candidates at confidence >= {threshold}"
    )
    return DetectionResponse(
        title=request.title,
        content_type=detection.content_type,
        comparison_detected=detection.comparison_detected,
        paragraph_count=len(detection.paragraphs),
        candidate_count=len(detection.candidates),
        candidates=[_to_response(c) for c in candidates],
    )


def _to_response(candidate: DetectedCandidate) -> CandidateResponse:
    return CandidateResponse(
        canonical_name=candidate.canonical_name,
        name_variants=candidate.name_variants,
        identifier=candidate.identifier,
        brand=candidate.brand,
        model=candidate.model,
        paragraph_indices=candidate.paragraph_indices,
        sources=[
            SourceResponse(
                kind=source.kind.value,
                confidence=source.confidence,
                raw_match=source.raw_match,
                position=source.position,
            )
            for source in candidate.sources
        ],
        confidence=candidate.confidence or 0,
        search_query=candidate.search_query,
        first_mention=candidate.first_mention,
        best_placement_index=candidate.best_placement_index,
        category_hint=candidate.category_hint,
    )
