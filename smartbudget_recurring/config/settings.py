from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ._utils import resolve_env_file_path


class Settings(BaseSettings):
    """Recurring detection configuration."""

    log_level: str = "INFO"

    # Thresholds handed to both detectors by the orchestrator and the CLI.
    # The detector functions themselves never read settings.
    min_occurrences: int = Field(default=4, ge=1)
    min_confidence: float = Field(default=0.75, ge=0.0, le=1.0)

    # Matches the 18 month window the bank-import side queries with
    lookback_months: int = Field(default=18, ge=1)

    model_config = SettingsConfigDict(
        env_file=resolve_env_file_path(),
        env_file_encoding="utf-8",
        env_prefix="SMARTBUDGET_RECURRING_",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
