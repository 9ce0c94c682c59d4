import re

BLOCK_TAGS = ["p", "h[1-6]", "div", "li", "tr", "blockquote", "figcaption", "dt", "dd"]

_BLOCK_TAG_GROUP = "|".join(BLOCK_TAGS)

BLOCK_SPLIT_PATTERN = re.compile(
    rf"(<(?:{_BLOCK_TAG_GROUP})\b[^>]*>[\s\S]*?</(?:{_BLOCK_TAG_GROUP})>)",
    re.IGNORECASE,
)

HEADING_TAG_PATTERN = re.compile(r"<h([1-6])\b", re.IGNORECASE)
EMPHASIS_TAG_PATTERN = re.compile(r"<(?:strong|b)\b", re.IGNORECASE)
LIST_TAG_PATTERN = re.compile(r"<(?:ul|ol|li)\b", re.IGNORECASE)
LINK_TAG_PATTERN = re.compile(r"<a\b", re.IGNORECASE)
IMAGE_TAG_PATTERN = re.compile(r"<img\b", re.IGNORECASE)

PRICE_PATTERN = re.compile(r"\$\d+(?:\.\d{2})?|\d+\.\d{2}\s*(?:USD|dollars?)", re.IGNORECASE)
RATING_PATTERN = re.compile(r"\d+(?:\.\d+)?\s*(?:/\s*5|stars?|⭐|★)", re.IGNORECASE)

LINKING_WORDS = [
    "is", "are", "was", "were", "has", "have", "had", "with", "for", "and", "or", "but",
    "features", "offers", "comes", "includes", "provides", "delivers", "boasts",
    "review", "vs", "versus", "compared",
]

MODEL_QUALIFIERS = ["Pro", "Max", "Plus", "Ultra", "Mini", "SE", r"Gen\s*\d+"]

MODEL_NUMBER_PATTERN = re.compile(
    r"\b([A-Z][a-z]+(?:\s+[A-Z][a-z]+)?)\s+"
    r"((?:[A-Z]{1,4}-?\d{2,5}[A-Za-z]*|\d{3,5}[A-Za-z]+)"
    rf"(?:\s*(?:{'|'.join(MODEL_QUALIFIERS)}))?)\b"
)

ORDINAL_PREFIX_PATTERN = re.compile(r"^\d+[.)]\s*")
HEADING_LEAD_PATTERN = re.compile(r"^(?:Best|Top|Our|The|Why|How)\s+", re.IGNORECASE)
HEADING_SUFFIX_PATTERN = re.compile(
    r"\s*[-–—]\s*(?:Best|Review|Comparison|Guide|Honest|Complete|Full|In-Depth).*$",
    re.IGNORECASE,
)

CAPITALIZED_PRODUCT_SIGNAL = re.compile(r"[A-Z][a-z]+\s+[A-Z0-9]")

EMPHASIS_STOPWORD_PATTERN = re.compile(
    r"^(?:the|this|that|these|those|what|why|how|our|my|your)\b", re.IGNORECASE
)

SEARCH_QUERY_STOPWORDS = {
    "the", "a", "an", "new", "best", "top", "review", "our", "my", "your",
    "this", "that", "with", "for",
}

COMPARISON_INDICATORS = ["vs", "versus", "compared to", "comparison", "which is better", "difference between"]
REVIEW_INDICATORS = ["review", "tested", "hands-on", "verdict", "pros and cons", "our take", "final thoughts"]
HOW_TO_INDICATORS = ["how to", "step by step", "tutorial", "guide", "instructions", "steps:"]

LISTICLE_PATTERNS = [
    re.compile(r"\b(?:top|best)\s+\d+\b", re.IGNORECASE),
    re.compile(r"\d+\s+(?:best|top|must-have)", re.IGNORECASE),
    re.compile(r"(?:^|\n)\s*(?:\d+[.)]|[*\-•])\s*[A-Z]", re.MULTILINE),
]
