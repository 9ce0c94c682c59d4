import json
import logging
import re
from typing import Dict, List, Optional

from pydantic import ValidationError

from services.base_llm import BaseLLMService, OpenAICompatibleService
from services.product_detection.errors import DeepExtractionError
from services.product_detection.models import ExternalCandidate, ExternalExtraction
from services.product_detection.prompts import build_extraction_prompts

logger = logging.getLogger(__name__)


class LLMDeepExtractor:
    """Deep extractor backed by an OpenAI-compatible chat completion API."""

    def __init__(self, llm: Optional[BaseLLMService] = None):
        self.llm = llm or OpenAICompatibleService()

    async def extract(
        self,
        title: str,
        numbered_paragraphs: str,
        pre_detected_summary: str,
    ) -> ExternalExtraction:
        system_prompt, user_prompt = build_extraction_prompts(title, numbered_paragraphs, pre_detected_summary)
        answer, tokens_in, tokens_out, latency = await self.llm.query(
            user_prompt,
            system_prompt=system_prompt,
            json_mode=True,
        )
        logger.info(f"[DeepExtraction] LLM answered in {latency:.1f}s ({tokens_in} in / {tokens_out} out)")
        return _parse_extraction_response(answer)


def _parse_extraction_response(response: str) -> ExternalExtraction:
    """Parse the extractor's JSON answer, tolerating code fences and prose around it."""
    parsed = _load_json_object(response)
    if parsed is None:
        raise DeepExtractionError(f"Unparsable extraction response: {response[:200]!r}")

    raw_products = parsed.get("products") or []
    if not isinstance(raw_products, list):
        raise DeepExtractionError("Extraction response 'products' is not a list")

    candidates: List[ExternalCandidate] = []
    for item in raw_products:
        if not isinstance(item, dict):
            continue
        try:
            candidates.append(ExternalCandidate.model_validate(item))
        except ValidationError as e:
            logger.debug(f"[DeepExtraction] Skipping invalid product entry {item!r}: {e}")

    return ExternalExtraction(
        products=candidates,
        contentType=parsed.get("contentType") or "informational",
        comparisonDetected=bool(parsed.get("comparisonDetected")),
    )


def _load_json_object(response: str) -> Optional[Dict]:
    response = (response or "").strip()

    if response.startswith("```"):
        parts = response.split("```")
        if len(parts) >= 2:
            response = parts[1]
            if response.startswith("json"):
                response = response[4:]
    response = response.strip()

    try:
        parsed = json.loads(response)
    except json.JSONDecodeError:
        match = re.search(r"\{[\s\S]*\}", response)
        if not match:
            return None
        try:
            parsed = json.loads(match.group(0))
        except json.JSONDecodeError:
            return None

    return parsed if isinstance(parsed, dict) else None
