"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - The API key comes from the environment or .env (never hardcoded); empty means "not configured"
    - get_settings() is cached (lru_cache) — single instance per process
    - Retry budget defaults to 3 attempts with a fixed 1000ms delay

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Persisted credential path is a setting so tests and deployments can relocate it
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Gemini
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    gemini_max_attempts: int = Field(3, ge=1)
    gemini_retry_delay_ms: int = Field(1000, ge=0)

    # Credential store: fallback source when GEMINI_API_KEY is unset
    credential_store_path: Path = Path.home() / ".kutubi" / "credentials.json"

    @field_validator("gemini_api_key", mode="before")
    @classmethod
    def strip_api_key(cls, v):
        """Whitespace-only keys count as absent."""
        if isinstance(v, str):
            return v.strip()
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
