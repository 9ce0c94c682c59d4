"""
Confidence calibration.

A candidate's score is the sum of independently capped components, clamped
to [5, 100]:

    source quality   40 with an identifier, else 35/28/20/12 by best source
    brand            15 known, 8 unrecognized, 0 none
    name quality     +7 digit, +4 uppercase acronym, +4 for 2-6 words
    context          block scores over the candidate's paragraphs, max 20
    frequency        3 per paragraph, max 10
    multi-source     +5 for 2+ source kinds, +5 more for 3+
"""

import logging
import re
from typing import List

from services.product_detection.context_scoring import score_context
from services.product_detection.models import DetectedCandidate, ParagraphBlock
from services.product_detection.text_utils import resolve_brand

logger = logging.getLogger(__name__)

MIN_CONFIDENCE = 5
MAX_CONFIDENCE = 100

_DIGIT = re.compile(r"\d")
_ACRONYM = re.compile(r"[A-Z]{2,}")


def source_quality_score(candidate: DetectedCandidate) -> int:
    if candidate.identifier:
        return 40
    best = candidate.best_source_confidence()
    if best >= 90:
        return 35
    if best >= 80:
        return 28
    if best >= 70:
        return 20
    return 12


def brand_score(candidate: DetectedCandidate) -> int:
    if not candidate.brand:
        return 0
    return 15 if resolve_brand(candidate.brand) else 8


def name_quality_score(name: str) -> int:
    score = 0
    if _DIGIT.search(name):
        score += 7
    if _ACRONYM.search(name):
        score += 4
    if 2 <= len(name.split()) <= 6:
        score += 4
    return score


def context_score(candidate: DetectedCandidate, paragraphs: List[ParagraphBlock]) -> int:
    total = 0
    for index in candidate.paragraph_indices:
        if 0 <= index < len(paragraphs):
            total += score_context(paragraphs[index])
    return min(total, 20)


def frequency_score(candidate: DetectedCandidate) -> int:
    return min(len(set(candidate.paragraph_indices)) * 3, 10)


def multi_source_bonus(candidate: DetectedCandidate) -> int:
    kinds = len(candidate.source_kinds())
    bonus = 0
    if kinds >= 2:
        bonus += 5
    if kinds >= 3:
        bonus += 5
    return bonus


def calibrate_confidence(candidate: DetectedCandidate, paragraphs: List[ParagraphBlock]) -> int:
    score = (
        source_quality_score(candidate)
        + brand_score(candidate)
        + name_quality_score(candidate.canonical_name)
        + context_score(candidate, paragraphs)
        + frequency_score(candidate)
        + multi_source_bonus(candidate)
    )
    return min(max(score, MIN_CONFIDENCE), MAX_CONFIDENCE)


def apply_calibration(candidates: List[DetectedCandidate], paragraphs: List[ParagraphBlock]) -> List[DetectedCandidate]:
    """Set confidence on every uncalibrated candidate. Calibrated ones keep their score."""
    for candidate in candidates:
        if candidate.is_calibrated:
            continue
        candidate.confidence = calibrate_confidence(candidate, paragraphs)
        logger.debug(f"[Calibrate] {candidate.canonical_name!r} -> {candidate.confidence}")
    return candidates
