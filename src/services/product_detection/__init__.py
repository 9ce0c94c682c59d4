"""
Product detection pipeline.

This package finds mentions of purchasable products in free-form HTML
articles, consolidates them into one candidate per real product, scores each
candidate's confidence and verifies the survivors against a marketplace
lookup.
"""

from services.product_detection.models import (
    CandidateDetection,
    ComparisonGroup,
    DetectedCandidate,
    DetectionResult,
    DetectionSource,
    ExternalCandidate,
    ExternalExtraction,
    FAQItem,
    ParagraphBlock,
    ProductRecord,
    RunOptions,
    SourceKind,
    VerifiedProduct,
)
from services.product_detection.errors import (
    DeepExtractionError,
    MarketplaceAuthError,
    MarketplaceLookupError,
    ProductDetectionError,
)
from services.product_detection.orchestrator import ProductDetectionPipeline
from services.product_detection.segmenter import parse_into_paragraphs
from services.product_detection.structural_extractor import (
    extract_identifier_candidates,
    find_paragraph_for_position,
)
from services.product_detection.lexical_extractor import extract_lexical_candidates
from services.product_detection.context_scoring import score_context
from services.product_detection.clustering import build_search_query, merge_candidates
from services.product_detection.calibration import apply_calibration, calibrate_confidence
from services.product_detection.deep_extraction import DeepExtractor, run_deep_extraction
from services.product_detection.llm_extractor import LLMDeepExtractor
from services.product_detection.verifier import MarketplaceLookup, verify_candidates
from services.product_detection.content_type import detect_content_type
from services.product_detection.text_utils import name_similarity, normalized_key
from services.product_detection.config import ENABLE_DEEP_EXTRACTION

__all__ = [
    # Models
    "CandidateDetection",
    "ComparisonGroup",
    "DetectedCandidate",
    "DetectionResult",
    "DetectionSource",
    "ExternalCandidate",
    "ExternalExtraction",
    "FAQItem",
    "ParagraphBlock",
    "ProductRecord",
    "RunOptions",
    "SourceKind",
    "VerifiedProduct",
    # Errors
    "DeepExtractionError",
    "MarketplaceAuthError",
    "MarketplaceLookupError",
    "ProductDetectionError",
    # Pipeline
    "ProductDetectionPipeline",
    "parse_into_paragraphs",
    "extract_identifier_candidates",
    "find_paragraph_for_position",
    "extract_lexical_candidates",
    "score_context",
    "merge_candidates",
    "build_search_query",
    "calibrate_confidence",
    "apply_calibration",
    "DeepExtractor",
    "run_deep_extraction",
    "LLMDeepExtractor",
    "MarketplaceLookup",
    "verify_candidates",
    "detect_content_type",
    "name_similarity",
    "normalized_key",
    # Config
    "ENABLE_DEEP_EXTRACTION",
]
