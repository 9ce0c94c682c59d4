"""
Configuration and constants for product detection.

Feature flags come from the environment; thresholds that operators tune
live on `config.Settings`. The weights below are part of the scoring
contract and are not meant to be overridden per deployment.
"""

import os

from services.product_detection.models import SourceKind


ENABLE_DEEP_EXTRACTION = os.getenv("ENABLE_DEEP_EXTRACTION", "true").lower() == "true"

MIN_BLOCK_MARKUP_LENGTH = 5
MIN_BLOCK_TEXT_LENGTH = 3

SOURCE_CONFIDENCE = {
    SourceKind.LINK_ID: 100,
    SourceKind.STANDALONE_PATTERN: 92,
    SourceKind.HEADING: 90,
    SourceKind.BRAND_MODEL_PATTERN: 85,
    SourceKind.MODEL_NUMBER_PATTERN: 82,
    SourceKind.EMPHASIS: 78,
}

CONTEXT_WEIGHTS = {
    "is_heading": 25,
    "has_emphasis": 10,
    "has_list": 5,
    "has_link": 15,
    "has_price_like": 20,
    "has_rating_like": 20,
    "has_image": 10,
}

MIN_STANDALONE_LENGTH = 4
BRAND_MODEL_LENGTH = (5, 70)
MODEL_NUMBER_LENGTH = (5, 60)
HEADING_NAME_LENGTH = (5, 100)
EMPHASIS_LENGTH = (5, 80)
EMPHASIS_MAX_WORDS = 8
HEADING_LEVELS = (2, 4)

ANCHOR_TEXT_LENGTH = (4, 100)
QUOTE_CONTEXT_CHARS = 15

NORMALIZED_KEY_MAX_WORDS = 5
CONTAINMENT_BONUS = 0.3
SEARCH_QUERY_MAX_WORDS = 7

DEFAULT_CONTENT_TYPE = "informational"
DEFAULT_PRICE = "See Price"
PLACEHOLDER_PRICE = "$XX.XX"
DEFAULT_RATING = 4.5
DEFAULT_CATEGORY = "General"
