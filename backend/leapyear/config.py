"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - max_range_span is strictly positive

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for every setting: works out-of-the-box with no .env
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # API
    cors_origins: list[str] = ["http://localhost:5173"]
    max_range_span: int = 10_000

    @field_validator("max_range_span")
    @classmethod
    def require_positive_span(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_range_span must be positive")
        return v

    # Demo
    demo_years: list[int] = [1900, 2000, 2023, 2024]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
