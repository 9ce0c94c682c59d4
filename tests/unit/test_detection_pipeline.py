import pytest

from conftest import StubDeepExtractor, StubLookup, no_sleep
from services.product_detection.errors import DeepExtractionError, MarketplaceAuthError
from services.product_detection.models import (
    DetectedCandidate,
    ExternalCandidate,
    ExternalExtraction,
    RunOptions,
    SourceKind,
)
from services.product_detection.orchestrator import ProductDetectionPipeline

THREE_PRODUCTS = """
<h2>Travel gear we packed</h2>
<p>Start with the <a href="https://www.amazon.com/dp/ALPHA00001">Acme Rocket 100</a> for flights.</p>
<p>Evenings went better with the <a href="https://www.amazon.com/dp/BRAVO00002">Zephyr Lantern 5</a> nearby.</p>
<p>Coffee came from the <a href="https://www.amazon.com/dp/CHARL00003">Nimbus Kettle 2</a> every morning.</p>
"""


def make_pipeline(lookup=None, deep_extractor=None):
    return ProductDetectionPipeline(
        deep_extractor=deep_extractor,
        lookup=lookup or StubLookup(),
        verification_delay=0,
        sleep=no_sleep,
    )


@pytest.mark.asyncio
async def test_linked_and_emphasized_product_becomes_one_candidate(widget_article):
    detection = await make_pipeline().detect_candidates("Widget review", widget_article)

    assert len(detection.paragraphs) == 4
    (candidate,) = detection.candidates
    assert candidate.canonical_name == "Widget Pro 3000"
    assert candidate.identifier == "WIDGET123"
    assert candidate.paragraph_indices == [0, 1, 2, 3]
    assert candidate.source_kinds() == {SourceKind.LINK_ID, SourceKind.HEADING, SourceKind.EMPHASIS}
    # 40 identifier + 11 name + 20 context + 10 frequency + 10 multi-source
    assert candidate.confidence == 91
    assert candidate.search_query == "Widget Pro 3000"


@pytest.mark.asyncio
async def test_lone_link_without_corroboration_scores_lower():
    html = '<p>We use the <a href="https://www.amazon.com/dp/WIDGET123">Widget Pro 3000</a> at home.</p>'

    detection = await make_pipeline().detect_candidates("Desk setup", html)

    (candidate,) = detection.candidates
    assert candidate.identifier == "WIDGET123"
    # 40 identifier + 11 name + 15 link context + 3 frequency
    assert candidate.confidence == 69


@pytest.mark.asyncio
async def test_run_verifies_the_linked_product(widget_article, record_factory):
    lookup = StubLookup(by_identifier={"WIDGET123": record_factory("WIDGET123", "Widget Pro 3000 (2024)", price="$49.99")})

    result = await make_pipeline(lookup).run("Widget review", widget_article)

    assert result.candidate_count == 1
    (product,) = result.products
    assert product.id == "prod-WIDGET123"
    assert product.price == "$49.99"
    assert product.confidence == 91
    assert product.placement_index == 0
    assert result.comparison is None
    assert result.content_type == "review"
    assert lookup.calls == [("identifier", "WIDGET123")]


@pytest.mark.asyncio
async def test_prose_without_products_yields_nothing(plain_article):
    lookup = StubLookup()

    result = await make_pipeline(lookup).run("Sleep better", plain_article)

    assert result.products == []
    assert result.comparison is None
    assert result.candidate_count == 0
    assert lookup.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("html", ["", "<p></p>", "   "])
async def test_empty_documents_are_not_errors(html):
    result = await make_pipeline().run("Nothing here", html)

    assert result.products == []
    assert result.candidate_count == 0
    assert result.content_type == "informational"


@pytest.mark.asyncio
async def test_run_requires_a_lookup(widget_article):
    pipeline = ProductDetectionPipeline(sleep=no_sleep)

    with pytest.raises(ValueError):
        await pipeline.run("Widget review", widget_article)


@pytest.mark.asyncio
async def test_candidate_indices_point_into_the_document(widget_article):
    html = widget_article + THREE_PRODUCTS

    detection = await make_pipeline().detect_candidates("Gear", html)

    count = len(detection.paragraphs)
    assert detection.candidates
    for candidate in detection.candidates:
        assert 0 <= candidate.best_placement_index < count
        assert all(0 <= i < count for i in candidate.paragraph_indices)
        assert 5 <= candidate.confidence <= 100
    confidences = [c.confidence for c in detection.candidates]
    assert confidences == sorted(confidences, reverse=True)


@pytest.mark.asyncio
async def test_progress_sequence_without_deep_extraction(widget_article, record_factory):
    events = []
    lookup = StubLookup(by_identifier={"WIDGET123": record_factory("WIDGET123")})
    options = RunOptions(on_progress=lambda stage, current, total: events.append((stage, current, total)))

    await make_pipeline(lookup).run("Widget review", widget_article, options)

    assert events == [
        ("Parsing content structure...", 0, 6),
        ("Extracting structural signals...", 1, 6),
        ("Pattern matching brands & models...", 2, 6),
        ("Calibrating confidence scores...", 4, 6),
        ("Verifying with marketplace...", 5, 6),
        ("Verifying product 1/1...", 5, 6),
        ("Detection complete", 6, 6),
    ]


@pytest.mark.asyncio
async def test_deep_extraction_results_are_merged(widget_article):
    extractor = StubDeepExtractor(
        ExternalExtraction(
            products=[
                ExternalCandidate(name="Widget Pro 3000", paragraphNumber=2, confidence=95),
                ExternalCandidate(name="Gizmo Deluxe 12", paragraphNumber=3, confidence=80),
            ],
            contentType="comparison",
            comparisonDetected=True,
        )
    )
    stages = []

    detection = await make_pipeline(deep_extractor=extractor).detect_candidates(
        "Widget review", widget_article, on_progress=lambda stage, current, total: stages.append(stage)
    )

    assert "AI deep analysis..." in stages
    assert detection.content_type == "comparison"
    assert detection.comparison_detected is True
    names = [c.canonical_name for c in detection.candidates]
    assert names == ["Widget Pro 3000", "Gizmo Deluxe 12"]
    widget = detection.candidates[0]
    assert SourceKind.EXTERNAL_EXTRACTION in widget.source_kinds()
    assert widget.identifier == "WIDGET123"

    (title, numbered, summary) = extractor.calls[0]
    assert title == "Widget review"
    assert numbered.startswith("[P0] Widget Pro 3000")
    assert '"Widget Pro 3000"' in summary


@pytest.mark.asyncio
async def test_skip_external_bypasses_deep_extraction(widget_article):
    extractor = StubDeepExtractor()

    detection = await make_pipeline(deep_extractor=extractor).detect_candidates(
        "Widget review", widget_article, skip_external=True
    )

    assert extractor.calls == []
    assert len(detection.candidates) == 1


@pytest.mark.asyncio
async def test_feature_flag_disables_deep_extraction(widget_article, monkeypatch):
    monkeypatch.setattr("services.product_detection.orchestrator.ENABLE_DEEP_EXTRACTION", False)
    extractor = StubDeepExtractor()

    await make_pipeline(deep_extractor=extractor).detect_candidates("Widget review", widget_article)

    assert extractor.calls == []


@pytest.mark.asyncio
async def test_deep_extraction_failure_keeps_local_candidates(widget_article):
    extractor = StubDeepExtractor(error=DeepExtractionError("not json"))

    detection = await make_pipeline(deep_extractor=extractor).detect_candidates("Widget review", widget_article)

    assert [c.canonical_name for c in detection.candidates] == ["Widget Pro 3000"]
    assert detection.content_type == "informational"


@pytest.mark.asyncio
async def test_comparison_needs_three_verified_products(record_factory):
    lookup = StubLookup(
        by_identifier={
            "ALPHA00001": record_factory("ALPHA00001"),
            "BRAVO00002": record_factory("BRAVO00002"),
            "CHARL00003": record_factory("CHARL00003"),
        }
    )

    result = await make_pipeline(lookup).run("Travel gear", THREE_PRODUCTS)

    assert [p.id for p in result.products] == ["prod-ALPHA00001", "prod-BRAVO00002", "prod-CHARL00003"]
    assert result.comparison.title == "Travel gear - Product Comparison"
    assert result.comparison.product_ids == ["prod-ALPHA00001", "prod-BRAVO00002", "prod-CHARL00003"]
    assert result.comparison.specs == ["Price", "Rating", "Reviews"]


@pytest.mark.asyncio
async def test_two_products_get_no_comparison(record_factory):
    lookup = StubLookup(
        by_identifier={
            "ALPHA00001": record_factory("ALPHA00001"),
            "BRAVO00002": record_factory("BRAVO00002"),
        }
    )

    result = await make_pipeline(lookup).run("Travel gear", THREE_PRODUCTS)

    assert len(result.products) == 2
    assert result.comparison is None


@pytest.mark.asyncio
async def test_rejected_credential_surfaces_when_nothing_verified(widget_article, auth_error):
    lookup = StubLookup(by_identifier={"WIDGET123": auth_error})

    with pytest.raises(MarketplaceAuthError):
        await make_pipeline(lookup).run("Widget review", widget_article)


@pytest.mark.asyncio
async def test_rejected_credential_after_first_product_returns_partial_result(auth_error, record_factory):
    html = THREE_PRODUCTS + (
        '<p>Blend smoothies in the <a href="https://www.amazon.com/dp/DELTA00004">Orbit Blender 7</a> daily.</p>'
        '<p>Sleep well on the <a href="https://www.amazon.com/dp/ECHOX00005">Quartz Pillow 9</a> tonight.</p>'
    )
    lookup = StubLookup(
        by_identifier={
            "ALPHA00001": record_factory("ALPHA00001"),
            "BRAVO00002": auth_error,
            "CHARL00003": record_factory("CHARL00003"),
            "DELTA00004": record_factory("DELTA00004"),
            "ECHOX00005": record_factory("ECHOX00005"),
        }
    )
    pipeline = make_pipeline(lookup)

    detection = await pipeline.detect_candidates("Travel gear", html)
    assert len(pipeline.filter_viable(detection.candidates)) == 5

    result = await pipeline.run("Travel gear", html)

    assert [p.id for p in result.products] == ["prod-ALPHA00001"]
    assert result.comparison is None
    assert lookup.calls == [("identifier", "ALPHA00001"), ("identifier", "BRAVO00002")]


def test_filter_viable_uses_minimum_confidence():
    pipeline = make_pipeline()
    candidates = [
        DetectedCandidate(canonical_name="kept", confidence=35),
        DetectedCandidate(canonical_name="dropped", confidence=34),
        DetectedCandidate(canonical_name="uncalibrated"),
    ]

    assert [c.canonical_name for c in pipeline.filter_viable(candidates)] == ["kept"]
