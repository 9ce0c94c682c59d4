from services.product_detection.config import CONTEXT_WEIGHTS
from services.product_detection.models import ParagraphBlock


def score_context(block: ParagraphBlock) -> int:
    """Sum of the fixed weights for every structural flag set on the block."""
    return sum(weight for flag, weight in CONTEXT_WEIGHTS.items() if getattr(block, flag))
