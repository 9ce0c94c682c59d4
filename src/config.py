from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "ProductLens"
    debug: bool = False

    llm_api_key: Optional[str] = None
    llm_api_base: str = "https://api.openai.com/v1"
    llm_model: str = "gpt-4o-mini"
    llm_temperature: float = 0.2
    llm_max_tokens: int = 4096
    llm_timeout: float = 120.0

    detection_min_confidence: int = 35
    detection_max_verified: int = 15
    external_min_confidence: int = 50
    merge_similarity_threshold: float = 0.6
    deep_extraction_max_chars: int = 15000
    verification_delay_seconds: float = 0.15
    comparison_min_products: int = 3
    comparison_max_products: int = 10

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False


settings = Settings()
