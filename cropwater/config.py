"""Application settings loaded from environment variables via pydantic-settings."""

from enum import StrEnum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(StrEnum):
    json = "json"
    console = "console"


class Settings(BaseSettings):
    """Central configuration — all values sourced from env vars or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── API ─────────────────────────────────────────────────────────────────
    api_prefix: str = "/api/v1"

    # ── Water demand defaults ───────────────────────────────────────────────
    # Used when the caller has no ET₀ reading from its weather provider.
    default_et0_mm_day: float = Field(default=4.5, ge=0, allow_inf_nan=False)
    kc_curve_step_days: float = Field(default=1.0, gt=0, allow_inf_nan=False)

    # ── Observability ───────────────────────────────────────────────────────
    log_level: str = "info"
    log_format: LogFormat = LogFormat.json


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance (cached after first call)."""
    return Settings()
