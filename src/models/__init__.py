from models.schemas import (
    CandidateResponse,
    DetectionRequest,
    DetectionResponse,
    SourceResponse,
)

__all__ = [
    "CandidateResponse",
    "DetectionRequest",
    "DetectionResponse",
    "SourceResponse",
]
