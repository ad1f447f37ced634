"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Settings built once per app (create_app) and attached to app.state
    - get_settings() is cached (lru_cache): single default instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box with no environment
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Service
    service_name: str = "users-api"
    service_version: str = "1.0.0"

    # Error responses: empty 4xx bodies when disabled
    problem_details_enabled: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept any casing ("debug", "Info") but only known level names."""
        level = str(v).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
