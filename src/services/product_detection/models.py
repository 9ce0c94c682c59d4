"""
Data models for product detection.

This module contains the core data structures passed between the detection
stages: segmented paragraph blocks, detection evidence, provisional
candidates, verified products and the final pipeline result.
"""

import enum
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, List, Optional

from pydantic import BaseModel, Field

ProgressCallback = Callable[[str, int, int], None]
VerifyProgressCallback = Callable[[int, int], None]
SleepFn = Callable[[float], Awaitable[None]]


class SourceKind(str, enum.Enum):
    LINK_ID = "link-id"
    ANCHOR_TEXT = "anchor-text"
    HEADING = "heading"
    EMPHASIS = "emphasis"
    NUMBERED_LIST = "numbered-list"
    BRAND_MODEL_PATTERN = "brand-model-pattern"
    STANDALONE_PATTERN = "standalone-pattern"
    MODEL_NUMBER_PATTERN = "model-number-pattern"
    EXTERNAL_EXTRACTION = "external-extraction"
    CONTEXTUAL = "contextual"


@dataclass(frozen=True)
class ParagraphBlock:
    """One segmented block of the document, addressed by its index."""
    index: int
    html: str
    text: str
    is_heading: bool = False
    heading_level: int = 0
    has_emphasis: bool = False
    has_list: bool = False
    has_link: bool = False
    has_image: bool = False
    has_price_like: bool = False
    has_rating_like: bool = False


@dataclass
class DetectionSource:
    """One piece of evidence for a candidate."""
    kind: SourceKind
    confidence: int
    raw_match: str
    position: int = 0


@dataclass
class DetectedCandidate:
    """A provisional product mention, uncalibrated until confidence is set."""
    canonical_name: str
    name_variants: List[str] = field(default_factory=list)
    identifier: Optional[str] = None
    brand: Optional[str] = None
    model: Optional[str] = None
    paragraph_indices: List[int] = field(default_factory=list)
    sources: List[DetectionSource] = field(default_factory=list)
    confidence: Optional[int] = None
    search_query: str = ""
    first_mention: str = ""
    best_placement_index: int = 0
    category_hint: str = ""

    @property
    def is_calibrated(self) -> bool:
        return self.confidence is not None

    def best_source_confidence(self) -> int:
        return max((s.confidence for s in self.sources), default=0)

    def source_kinds(self) -> set:
        return {s.kind for s in self.sources}

    def add_paragraph(self, index: int) -> bool:
        if index in self.paragraph_indices:
            return False
        self.paragraph_indices.append(index)
        return True


@dataclass(frozen=True)
class FAQItem:
    question: str
    answer: str


@dataclass
class ProductRecord:
    """Product data returned by a marketplace lookup. Missing identifier means unresolved."""
    identifier: Optional[str] = None
    title: Optional[str] = None
    price: Optional[str] = None
    image_url: Optional[str] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None
    brand: Optional[str] = None
    category: Optional[str] = None
    prime: Optional[bool] = None
    description: Optional[str] = None
    claims: List[str] = field(default_factory=list)
    faqs: List[FAQItem] = field(default_factory=list)
    specs: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class VerifiedProduct:
    """Final output record, created only by the verifier."""
    id: str
    title: str
    identifier: str
    price: str
    image_url: str
    rating: float
    review_count: int
    brand: str
    category: str
    description: str
    claims: List[str]
    faqs: List[FAQItem]
    specs: Dict[str, str]
    prime: bool
    confidence: int
    first_mention: str
    placement_index: int
    paragraph_index: int


@dataclass(frozen=True)
class ComparisonGroup:
    title: str
    product_ids: List[str]
    specs: List[str] = field(default_factory=lambda: ["Price", "Rating", "Reviews"])


@dataclass
class DetectionResult:
    products: List[VerifiedProduct]
    comparison: Optional[ComparisonGroup]
    content_type: str
    candidate_count: int
    comparison_detected: bool = False


@dataclass
class CandidateDetection:
    """Everything the pipeline knows before verification."""
    paragraphs: List[ParagraphBlock]
    candidates: List[DetectedCandidate]
    content_type: str
    comparison_detected: bool = False


@dataclass
class DeepExtractionOutcome:
    candidates: List[DetectedCandidate]
    content_type: str
    comparison_detected: bool = False
    succeeded: bool = True


@dataclass
class RunOptions:
    skip_external_extraction: bool = False
    on_progress: Optional[ProgressCallback] = None


class ExternalCandidate(BaseModel):
    """A product reported by the deep extractor, as it answers."""
    name: str = Field(..., min_length=1)
    brand: Optional[str] = None
    model: Optional[str] = None
    search_query: Optional[str] = Field(default=None, alias="searchQuery")
    paragraph_number: Optional[int] = Field(default=0, alias="paragraphNumber")
    confidence: float = 0.0

    model_config = {"populate_by_name": True, "extra": "ignore"}


class ExternalExtraction(BaseModel):
    candidates: List[ExternalCandidate] = Field(default_factory=list, alias="products")
    content_type: str = Field(default="informational", alias="contentType")
    comparison_detected: bool = Field(default=False, alias="comparisonDetected")

    model_config = {"populate_by_name": True, "extra": "ignore"}
