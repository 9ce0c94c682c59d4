from typing import List, Optional

from pydantic import BaseModel, Field


class DetectionRequest(BaseModel):
    title: str = Field(default="", max_length=500)
    html: str = Field(..., description="Raw article HTML")
    skip_external: bool = Field(default=False, description="Skip the LLM deep extraction step")
    min_confidence: Optional[int] = Field(
        default=None,
        ge=0,
        le=100,
        description="Only return candidates at or above this confidence (defaults to the pipeline threshold)",
    )


class SourceResponse(BaseModel):
    kind: str
    confidence: int
    raw_match: str
    position: int


class CandidateResponse(BaseModel):
    canonical_name: str
    name_variants: List[str]
    identifier: Optional[str]
    brand: Optional[str]
    model: Optional[str]
    paragraph_indices: List[int]
    sources: List[SourceResponse]
    confidence: int
    search_query: str
    first_mention: str
    best_placement_index: int
    category_hint: str

    model_config = {"from_attributes": True}


class DetectionResponse(BaseModel):
    title: str
    content_type: str
    comparison_detected: bool
    paragraph_count: int
    candidate_count: int
    candidates: List[CandidateResponse]
