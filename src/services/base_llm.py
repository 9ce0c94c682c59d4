import logging
import time
from abc import ABC, abstractmethod
from typing import Optional

import httpx
from openai import AsyncOpenAI

from config import settings

logger = logging.getLogger(__name__)


class BaseLLMService(ABC):
    provider: str = "openai-compatible"
    default_model: str
    api_base: str

    def __init__(self, api_key: Optional[str] = None, api_base: Optional[str] = None, model: Optional[str] = None):
        self._api_key = api_key
        self.api_base = api_base or settings.llm_api_base
        self.default_model = model or settings.llm_model

    def _get_api_key(self) -> str:
        if self._api_key:
            return self._api_key
        if settings.llm_api_key:
            return settings.llm_api_key
        raise ValueError(f"No {self.provider} API key configured (set LLM_API_KEY)")

    def _build_messages(self, prompt: str, system_prompt: Optional[str] = None) -> list[dict]:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})
        return messages

    @abstractmethod
    async def query(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        model_name: Optional[str] = None,
        json_mode: bool = False,
    ) -> tuple[str, int, int, float]:
        """Return (answer, tokens_in, tokens_out, latency_seconds)."""


class OpenAICompatibleService(BaseLLMService):
    temperature: float = settings.llm_temperature
    max_tokens: Optional[int] = settings.llm_max_tokens
    timeout: float = settings.llm_timeout

    async def query(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        model_name: Optional[str] = None,
        json_mode: bool = False,
    ) -> tuple[str, int, int, float]:
        api_key = self._get_api_key()
        model = model_name or self.default_model

        request_kwargs = {"model": model, "messages": self._build_messages(prompt, system_prompt)}
        if self.temperature is not None:
            request_kwargs["temperature"] = self.temperature
        if self.max_tokens is not None:
            request_kwargs["max_tokens"] = self.max_tokens
        if json_mode:
            request_kwargs["response_format"] = {"type": "json_object"}

        start_time = time.time()
        async with httpx.AsyncClient(timeout=self.timeout) as http_client:
            client = AsyncOpenAI(api_key=api_key, base_url=self.api_base, http_client=http_client)
            try:
                response = await client.chat.completions.create(**request_kwargs)
            except Exception as e:
                logger.error(f"{self.provider} API error: {e}")
                raise
        latency = time.time() - start_time
        return self._parse_openai_response(response, latency)

    def _parse_openai_response(self, response, latency: float) -> tuple[str, int, int, float]:
        answer = response.choices[0].message.content or ""
        tokens_in = response.usage.prompt_tokens if response.usage else 0
        tokens_out = response.usage.completion_tokens if response.usage else 0
        return answer, tokens_in, tokens_out, latency
