from .base_llm import BaseLLMService, OpenAICompatibleService
from .product_detection import LLMDeepExtractor, ProductDetectionPipeline

__all__ = [
    "BaseLLMService",
    "LLMDeepExtractor",
    "OpenAICompatibleService",
    "ProductDetectionPipeline",
]
