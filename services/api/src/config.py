"""API service configuration.

Requires: DATABASE_URL
Optional: OPENAI_API_KEY / OPEN_ROUTER_KEY (generation fails without the key
of the selected provider), LLM_* tuning, GENERATION_PROFILE, PROJECT_LIMIT, PORT
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from shared.config import BaseSettings, database_url_field, llm_api_key_field


class Settings(BaseSettings):
    """API service settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Required
    database_url: str = database_url_field()

    # LLM provider
    llm_provider: Literal["openai", "openrouter"] = Field(
        default="openai",
        description="Provider used for page generation",
    )
    openai_api_key: str = llm_api_key_field("OPENAI_API_KEY")
    open_router_key: str = llm_api_key_field("OPEN_ROUTER_KEY")
    llm_model: str = Field(default="gpt-4.1", description="Model identifier")
    llm_max_output_tokens: int = Field(default=8000, ge=1, description="Output token budget")
    llm_temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    llm_timeout_seconds: float = Field(default=120.0, gt=0)

    # Generation
    generation_profile: Literal["react", "static"] = Field(
        default="react",
        description="react: reactComponent/previewHtml, static: html/css",
    )
    project_limit: int = Field(default=5, ge=1, description="Max projects per user")

    port: int = Field(default=3000, ge=1, le=65535)

    @property
    def llm_api_key(self) -> str:
        """Key of the selected provider (empty when not configured)."""
        if self.llm_provider == "openrouter":
            return self.open_router_key
        return self.openai_api_key


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Validates required env vars on first call.
    Raises ValidationError if DATABASE_URL is missing.
    """
    return Settings()
