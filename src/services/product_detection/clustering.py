"""
Cross-stage merging of candidates.

Merging is a single left-to-right pass. Each candidate that has not been
absorbed yet takes in every later candidate that is similar to its current
canonical name, or that shares its marketplace identifier. The pass does not
compute a transitive closure: if A absorbs B, a later C that matched only B
stays separate.
"""

import logging
import re
from dataclasses import replace
from typing import List

from constants import BRAND_DATABASE, SEARCH_QUERY_STOPWORDS
from services.product_detection.config import SEARCH_QUERY_MAX_WORDS
from services.product_detection.models import DetectedCandidate
from services.product_detection.text_utils import collapse_whitespace, name_similarity

logger = logging.getLogger(__name__)

_PARENTHETICAL = re.compile(r"\([^)]*\)")
_DASHES = re.compile(r"[-–—]")


def is_same_product(primary: DetectedCandidate, other: DetectedCandidate, threshold: float) -> bool:
    if primary.identifier and other.identifier and primary.identifier == other.identifier:
        return True
    return name_similarity(primary.canonical_name, other.canonical_name) >= threshold


def merge_candidates(candidates: List[DetectedCandidate], threshold: float = 0.6) -> List[DetectedCandidate]:
    """Consolidate near-duplicate candidates; inputs are not mutated."""
    merged: List[DetectedCandidate] = []
    consumed: set[int] = set()

    for i, candidate in enumerate(candidates):
        if i in consumed:
            continue

        primary = replace(
            candidate,
            name_variants=list(candidate.name_variants),
            sources=list(candidate.sources),
            paragraph_indices=list(candidate.paragraph_indices),
        )

        for j in range(i + 1, len(candidates)):
            if j in consumed:
                continue
            other = candidates[j]
            if is_same_product(primary, other, threshold):
                consumed.add(j)
                _absorb(primary, other)

        primary.name_variants = list(dict.fromkeys(primary.name_variants))
        primary.paragraph_indices.sort()
        primary.search_query = build_search_query(primary)
        merged.append(primary)

    logger.info(f"[Merge] {len(candidates)} candidates -> {len(merged)} after merging")
    return merged


def _absorb(primary: DetectedCandidate, other: DetectedCandidate) -> None:
    primary.name_variants.extend(other.name_variants)
    primary.sources.extend(other.sources)
    for index in other.paragraph_indices:
        primary.add_paragraph(index)

    if not primary.identifier and other.identifier:
        primary.identifier = other.identifier
    if not primary.brand and other.brand:
        primary.brand = other.brand
    if len(other.canonical_name) > len(primary.canonical_name):
        primary.canonical_name = other.canonical_name
    if not primary.category_hint and other.category_hint:
        primary.category_hint = other.category_hint


def build_search_query(candidate: DetectedCandidate) -> str:
    """Marketplace search text: brand + model when both are known, else the cleaned name."""
    if candidate.brand and candidate.model:
        entry = BRAND_DATABASE.get(candidate.brand)
        brand_name = entry["aliases"][0] if entry else candidate.brand
        return f"{brand_name} {candidate.model}".strip()

    query = _PARENTHETICAL.sub("", candidate.canonical_name)
    query = collapse_whitespace(_DASHES.sub(" ", query))
    words = [w for w in query.split(" ") if w and w.lower() not in SEARCH_QUERY_STOPWORDS]
    return " ".join(words[:SEARCH_QUERY_MAX_WORDS])
