"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    LLM keys are optional; a missing key surfaces as an estimation
    configuration error when a meal is analyzed.
    """

    supabase_url: str
    supabase_service_key: str
    llm_provider: Literal["gemini", "openai"] = "gemini"
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.0-flash"
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o"
    fdc_api_key: str = "DEMO_KEY"
    fdc_base_url: str = "https://api.nal.usda.gov/fdc/v1"
    history_similarity_threshold: float = 0.9
    trust_reported_calories: bool = True
    food_context_limit: int = 10
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def debug(self) -> bool:
        """Whether error responses may include debug detail."""
        return self.environment == "local"
