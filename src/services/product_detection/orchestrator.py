"""
Main orchestration for the product detection pipeline.

Stages run in a fixed order:

1. Segment the HTML into paragraph blocks
2. Structural extraction of marketplace identifiers
3. Lexical extraction (brands, models, headings, emphasis)
4. Merge structural + lexical candidates
5. Optional deep extraction, re-merged with the candidates so far
6. Calibrate, sort, filter, then verify against the marketplace

Each run owns its paragraphs and candidates; the pipeline object only holds
the injected collaborators and settings.
"""

import asyncio
import logging
from typing import List, Optional

from config import Settings, settings as app_settings
from services.product_detection.calibration import apply_calibration
from services.product_detection.clustering import merge_candidates
from services.product_detection.config import DEFAULT_CONTENT_TYPE, ENABLE_DEEP_EXTRACTION
from services.product_detection.content_type import detect_content_type
from services.product_detection.deep_extraction import DeepExtractor, run_deep_extraction
from services.product_detection.lexical_extractor import extract_lexical_candidates
from services.product_detection.models import (
    CandidateDetection,
    ComparisonGroup,
    DetectedCandidate,
    DetectionResult,
    ProgressCallback,
    RunOptions,
    SleepFn,
    VerifiedProduct,
)
from services.product_detection.segmenter import parse_into_paragraphs
from services.product_detection.structural_extractor import extract_identifier_candidates
from services.product_detection.verifier import MarketplaceLookup, verify_candidates

logger = logging.getLogger(__name__)

TOTAL_STEPS = 6


class ProductDetectionPipeline:
    def __init__(
        self,
        deep_extractor: Optional[DeepExtractor] = None,
        lookup: Optional[MarketplaceLookup] = None,
        settings: Optional[Settings] = None,
        verification_delay: Optional[float] = None,
        sleep: SleepFn = asyncio.sleep,
    ):
        self.deep_extractor = deep_extractor
        self.lookup = lookup
        self.settings = settings or app_settings
        self.verification_delay = (
            verification_delay if verification_delay is not None else self.settings.verification_delay_seconds
        )
        self._sleep = sleep

    async def detect_candidates(
        self,
        title: str,
        html: str,
        skip_external: bool = False,
        on_progress: Optional[ProgressCallback] = None,
    ) -> CandidateDetection:
        """Everything up to and including calibration, sorted by confidence."""
        report = on_progress or _noop_progress

        report("Parsing content structure...", 0, TOTAL_STEPS)
        paragraphs = parse_into_paragraphs(html)
        if not paragraphs:
            logger.info(f"[Pipeline] No usable blocks in '{title}', nothing to detect")
            return CandidateDetection(paragraphs=[], candidates=[], content_type=DEFAULT_CONTENT_TYPE)

        report("Extracting structural signals...", 1, TOTAL_STEPS)
        structural = extract_identifier_candidates(html, paragraphs)

        report("Pattern matching brands & models...", 2, TOTAL_STEPS)
        lexical = extract_lexical_candidates(paragraphs)

        threshold = self.settings.merge_similarity_threshold
        candidates = merge_candidates(structural + lexical, threshold)

        if self._deep_extraction_enabled(skip_external):
            report("AI deep analysis...", 3, TOTAL_STEPS)
            outcome = await run_deep_extraction(
                self.deep_extractor,
                title,
                paragraphs,
                candidates,
                max_chars=self.settings.deep_extraction_max_chars,
                min_confidence=self.settings.external_min_confidence,
            )
            candidates = merge_candidates(candidates + outcome.candidates, threshold)
            content_type = outcome.content_type
            comparison_detected = outcome.comparison_detected
        else:
            content_type = detect_content_type(f"{title}\n" + "\n".join(p.text for p in paragraphs))
            comparison_detected = content_type == "comparison"

        report("Calibrating confidence scores...", 4, TOTAL_STEPS)
        apply_calibration(candidates, paragraphs)
        candidates = sorted(candidates, key=lambda c: c.confidence, reverse=True)

        logger.info(
            f"[Pipeline] '{title}': {len(paragraphs)} blocks, {len(structural)} structural, "
            f"{len(lexical)} lexical, {len(candidates)} merged candidates ({content_type})"
        )
        return CandidateDetection(
            paragraphs=paragraphs,
            candidates=candidates,
            content_type=content_type,
            comparison_detected=comparison_detected,
        )

    async def run(self, title: str, html: str, options: Optional[RunOptions] = None) -> DetectionResult:
        options = options or RunOptions()
        if self.lookup is None:
            raise ValueError("A marketplace lookup is required to verify products")
        report = options.on_progress or _noop_progress

        detection = await self.detect_candidates(
            title,
            html,
            skip_external=options.skip_external_extraction,
            on_progress=options.on_progress,
        )
        if not detection.paragraphs:
            return DetectionResult(
                products=[],
                comparison=None,
                content_type=detection.content_type,
                candidate_count=0,
            )

        viable = self.filter_viable(detection.candidates)

        report("Verifying with marketplace...", 5, TOTAL_STEPS)
        products = await verify_candidates(
            viable,
            self.lookup,
            max_candidates=self.settings.detection_max_verified,
            delay=self.verification_delay,
            sleep=self._sleep,
            on_progress=lambda current, total: report(f"Verifying product {current}/{total}...", 5, TOTAL_STEPS),
        )

        report("Detection complete", TOTAL_STEPS, TOTAL_STEPS)
        return DetectionResult(
            products=products,
            comparison=self.build_comparison(title, products),
            content_type=detection.content_type,
            candidate_count=len(detection.candidates),
            comparison_detected=detection.comparison_detected,
        )

    def filter_viable(self, candidates: List[DetectedCandidate]) -> List[DetectedCandidate]:
        threshold = self.settings.detection_min_confidence
        return [c for c in candidates if (c.confidence or 0) >= threshold]

    def build_comparison(self, title: str, products: List[VerifiedProduct]) -> Optional[ComparisonGroup]:
        if len(products) < self.settings.comparison_min_products:
            return None
        return ComparisonGroup(
            title=f"{title} - Product Comparison",
            product_ids=[p.id for p in products[: self.settings.comparison_max_products]],
        )

    def _deep_extraction_enabled(self, skip_external: bool) -> bool:
        return ENABLE_DEEP_EXTRACTION and not skip_external and self.deep_extractor is not None


def _noop_progress(stage: str, current: int, total: int) -> None:
    pass
