from constants.known_brands import BRAND_ALIAS_MAP, BRAND_DATABASE, KNOWN_BRANDS
from constants.product_lines import COMPILED_STANDALONE_PATTERNS, STANDALONE_PRODUCT_PATTERNS
from constants.text_patterns import (
    BLOCK_SPLIT_PATTERN,
    LINKING_WORDS,
    MODEL_NUMBER_PATTERN,
    SEARCH_QUERY_STOPWORDS,
)

__all__ = [
    "BRAND_ALIAS_MAP",
    "BRAND_DATABASE",
    "KNOWN_BRANDS",
    "STANDALONE_PRODUCT_PATTERNS",
    "COMPILED_STANDALONE_PATTERNS",
    "BLOCK_SPLIT_PATTERN",
    "LINKING_WORDS",
    "MODEL_NUMBER_PATTERN",
    "SEARCH_QUERY_STOPWORDS",
]
