"""
Marketplace verification.

Candidates are resolved one at a time, in confidence order, against an
injected lookup. A rejected credential stops the whole run; any other lookup
failure only skips the current candidate. Products collected before a fatal
stop are still returned; the error surfaces only when nothing was verified.
"""

import asyncio
import logging
from typing import List, Optional, Protocol

from services.product_detection.config import (
    DEFAULT_CATEGORY,
    DEFAULT_PRICE,
    DEFAULT_RATING,
    PLACEHOLDER_PRICE,
)
from services.product_detection.errors import MarketplaceAuthError
from services.product_detection.models import (
    DetectedCandidate,
    FAQItem,
    ProductRecord,
    SleepFn,
    VerifiedProduct,
    VerifyProgressCallback,
)

logger = logging.getLogger(__name__)



class MarketplaceLookup(Protocol):
    async def lookup_by_identifier(self, identifier: str) -> Optional[ProductRecord]:
        ...

    async def search(self, query: str) -> Optional[ProductRecord]:
        ...


async def verify_candidates(
    candidates: List[DetectedCandidate],
    lookup: MarketplaceLookup,
    max_candidates: int = 15,
    delay: float = 0.15,
    sleep: SleepFn = asyncio.sleep,
    on_progress: Optional[VerifyProgressCallback] = None,
) -> List[VerifiedProduct]:
    batch = candidates[:max_candidates]
    total = len(batch)
    products: List[VerifiedProduct] = []
    verified_ids: set[str] = set()
    fatal_message: Optional[str] = None

    for i, candidate in enumerate(batch):
        if on_progress:
            on_progress(i + 1, total)

        try:
            record = await resolve_candidate(candidate, lookup)
        except MarketplaceAuthError as e:
            fatal_message = e.message
            logger.error(f"[Verify] Lookup credential rejected, stopping verification: {e.message}")
            break

        if record is None or not record.identifier:
            logger.debug(f"[Verify] No marketplace match for {candidate.canonical_name!r}")
        elif record.identifier in verified_ids:
            logger.debug(f"[Verify] {candidate.canonical_name!r} resolved to already verified {record.identifier}")
        else:
            verified_ids.add(record.identifier)
            products.append(build_verified_product(candidate, record))

        if i < total - 1:
            await sleep(delay)

    if fatal_message is not None and not products:
        raise MarketplaceAuthError(fatal_message)

    logger.info(f"[Verify] {len(products)}/{total} candidates verified")
    return products


async def resolve_candidate(candidate: DetectedCandidate, lookup: MarketplaceLookup) -> Optional[ProductRecord]:
    """Identifier lookup first, then free-text search. Auth errors propagate."""
    record: Optional[ProductRecord] = None

    if candidate.identifier:
        try:
            record = await lookup.lookup_by_identifier(candidate.identifier)
        except MarketplaceAuthError:
            raise
        except Exception as e:
            logger.warning(f"[Verify] Identifier lookup failed for {candidate.identifier}: {e}")
            record = None

    if record is not None and record.identifier:
        return record

    query = candidate.search_query or candidate.canonical_name
    try:
        return await lookup.search(query)
    except MarketplaceAuthError:
        raise
    except Exception as e:
        logger.warning(f"[Verify] Search failed for {query!r}: {e}")
        return None


def build_verified_product(candidate: DetectedCandidate, record: ProductRecord) -> VerifiedProduct:
    title = record.title or candidate.canonical_name
    price = record.price if record.price and record.price != PLACEHOLDER_PRICE else DEFAULT_PRICE
    return VerifiedProduct(
        id=f"prod-{record.identifier}",
        title=title,
        identifier=record.identifier,
        price=price,
        image_url=record.image_url or "",
        rating=record.rating or DEFAULT_RATING,
        review_count=record.review_count or 0,
        brand=record.brand or candidate.brand or "",
        category=candidate.category_hint or DEFAULT_CATEGORY,
        description=record.description or default_description(title),
        claims=list(record.claims) or default_claims(),
        faqs=list(record.faqs) or default_faqs(title),
        specs=dict(record.specs),
        prime=record.prime if record.prime is not None else True,
        confidence=candidate.confidence or 0,
        first_mention=candidate.first_mention,
        placement_index=candidate.best_placement_index,
        paragraph_index=candidate.paragraph_indices[0] if candidate.paragraph_indices else 0,
    )


def default_description(title: str) -> str:
    name = " ".join(title.split()[:4])
    return (
        f"Engineered for users who demand excellence, the {name} delivers professional-grade "
        "performance with meticulous attention to detail. Backed by thousands of verified reviews "
        "and trusted by industry professionals worldwide."
    )


def default_claims() -> List[str]:
    return [
        "Premium build quality with attention to detail",
        "Industry-leading performance metrics",
        "Backed by comprehensive warranty",
        "Trusted by thousands of verified buyers",
    ]


def default_faqs(title: str) -> List[FAQItem]:
    name = " ".join(title.split()[:3])
    return [
        FAQItem(
            question="Is this product covered by warranty?",
            answer="Yes, this product comes with a comprehensive manufacturer warranty for complete peace of mind.",
        ),
        FAQItem(
            question="How fast is shipping?",
            answer="Prime eligible for fast, free delivery with easy returns within 30 days.",
        ),
        FAQItem(
            question="Is this worth the investment?",
            answer=f"Based on thousands of positive reviews, the {name} is a proven choice for discerning buyers.",
        ),
    ]
