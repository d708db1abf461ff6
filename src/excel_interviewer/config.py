"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str
    openai_model: str = "gpt-4.1-mini"
    openai_reasoning_effort: str | None = None
    openai_store: bool = False
    max_response_tokens: int = 500
    model_timeout_seconds: float = 60.0
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    interview_store_path: str = "db.json"
    api_prefix: str = "/api"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def uses_supabase(self) -> bool:
        """Return true when both Supabase credentials are configured."""
        return bool(self.supabase_url and self.supabase_service_key)
