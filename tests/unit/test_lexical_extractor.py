from services.product_detection.lexical_extractor import (
    clean_heading_text,
    extract_lexical_candidates,
    has_product_signal,
)
from services.product_detection.models import SourceKind
from services.product_detection.segmenter import parse_into_paragraphs


def _extract(html: str):
    return extract_lexical_candidates(parse_into_paragraphs(html))


def _by_name(candidates, name):
    matches = [c for c in candidates if c.canonical_name == name]
    assert matches, f"{name!r} not in {[c.canonical_name for c in candidates]}"
    return matches[0]


def test_standalone_product_line():
    candidates = _extract("<p>I love my AirPods Pro 2 for commuting.</p>")

    assert len(candidates) == 1
    candidate = candidates[0]
    assert candidate.canonical_name == "AirPods Pro 2"
    assert candidate.sources[0].kind == SourceKind.STANDALONE_PATTERN
    assert candidate.sources[0].confidence == 92
    assert candidate.category_hint == "Audio"
    assert "AirPods Pro 2" in candidate.first_mention


def test_brand_model_stops_at_linking_word():
    candidates = _extract("<p>Garmin Forerunner 265 features a bright screen.</p>")

    candidate = _by_name(candidates, "Garmin Forerunner 265")
    assert candidate.brand == "garmin"
    assert candidate.model == "Forerunner 265"
    assert candidate.category_hint == "Fitness"
    assert candidate.sources[0].kind == SourceKind.BRAND_MODEL_PATTERN
    assert candidate.sources[0].confidence == 85


def test_brand_model_stops_at_punctuation():
    candidates = _extract("<p>Nothing tops the Sony WH-1000XM5, at least for now.</p>")

    candidate = _by_name(candidates, "Sony WH-1000XM5")
    assert candidate.brand == "sony"
    assert candidate.model == "WH-1000XM5"


def test_brand_alias_maps_to_brand_key():
    candidates = _extract("<p>My Logi MX Master 3S is great.</p>")

    candidate = _by_name(candidates, "Logi MX Master 3S")
    assert candidate.brand == "logitech"


def test_bare_model_number():
    candidates = _extract("<p>We paired it with the Roland TD-17 kit last week.</p>")

    candidate = _by_name(candidates, "Roland TD-17")
    assert candidate.brand == "Roland"
    assert candidate.model == "TD-17"
    assert candidate.sources[0].kind == SourceKind.MODEL_NUMBER_PATTERN
    assert candidate.sources[0].confidence == 82


def test_heading_is_cleaned_into_product_name():
    candidates = _extract("<h3>1) The Acme Rocket 9 - In-Depth Guide</h3>")

    assert len(candidates) == 1
    candidate = candidates[0]
    assert candidate.canonical_name == "Acme Rocket 9"
    assert candidate.sources[0].kind == SourceKind.HEADING
    assert candidate.sources[0].confidence == 90
    assert candidate.paragraph_indices == [0]


def test_only_heading_levels_two_to_four_count():
    assert _extract("<h1>Acme Rocket 9</h1>") == []
    assert _extract("<h5>Acme Rocket 9</h5>") == []


def test_heading_without_product_signal_is_ignored():
    assert _extract("<h2>final thoughts on sleep</h2>") == []


def test_emphasis_with_product_signal():
    candidates = _extract("<p>Our favourite is the <strong>Acme Rocket 9</strong> overall.</p>")

    candidate = _by_name(candidates, "Acme Rocket 9")
    assert candidate.sources[0].kind == SourceKind.EMPHASIS
    assert candidate.sources[0].confidence == 78


def test_emphasis_starting_with_stopword_is_ignored():
    candidates = _extract("<p><strong>The best choice 2024</strong> follows below.</p>")

    assert all(SourceKind.EMPHASIS not in c.source_kinds() for c in candidates)


def test_long_emphasis_is_ignored():
    candidates = _extract("<p><b>Acme Rocket 9 is simply the one we would buy again</b></p>")

    assert all(SourceKind.EMPHASIS not in c.source_kinds() for c in candidates)


def test_recurrence_adds_paragraph_and_source():
    html = "<p><strong>Acme Rocket 9</strong> is great.</p><p>Later the <b>Acme Rocket 9</b> again.</p>"

    candidates = _extract(html)

    assert len(candidates) == 1
    candidate = candidates[0]
    assert candidate.paragraph_indices == [0, 1]
    assert [s.kind for s in candidate.sources] == [SourceKind.EMPHASIS, SourceKind.EMPHASIS]
    assert candidate.best_placement_index == 0


def test_same_name_in_same_block_is_one_candidate():
    candidates = _extract("<h2>Theragun Prime</h2>")

    assert len(candidates) == 1
    assert candidates[0].brand == "theragun"
    assert len(candidates[0].sources) == 1


def test_plain_prose_yields_nothing():
    html = "<p>getting enough sleep helps recovery and focus.</p><p>most adults need seven hours.</p>"

    assert _extract(html) == []


def test_clean_heading_text():
    assert clean_heading_text("2. Best Dyson V15 Detect - Full Review") == "Dyson V15 Detect"
    assert clean_heading_text("Why Kindle Paperwhite") == "Kindle Paperwhite"


def test_has_product_signal():
    assert has_product_signal("Acme Rocket 9")
    assert has_product_signal("Widget Pro")
    assert has_product_signal("bose headphones")
    assert not has_product_signal("great value pick")
