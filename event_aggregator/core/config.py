"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from event_aggregator.core.config import get_settings

    settings = get_settings()
    if settings.use_json_logs:
        # Machine-readable log output
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from event_aggregator.core.enums import Environment

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
EVENT_AGGREGATOR_TYPES = ("in-process",)


class Settings(BaseSettings):
    """
    Main settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Configuration loaded from environment.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool | None = Field(
        default=None,
        description="Force JSON (true) or console (false) log rendering. "
        "Defaults to JSON in testing/ci and console elsewhere.",
    )
    event_aggregator_type: str = Field(
        default="in-process",
        description="Aggregator adapter built by the container (in-process)",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate log level name.

        Args:
            v: Level name from environment.

        Returns:
            Upper-cased level name.

        Raises:
            ValueError: If level is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)} (got {v!r})"
            )
        return level

    @field_validator("event_aggregator_type")
    @classmethod
    def normalize_event_aggregator_type(cls, v: str) -> str:
        """Normalize the aggregator adapter name (checked by the container)."""
        return v.strip().lower()

    @property
    def is_testing(self) -> bool:
        """Check if running in testing or CI environment."""
        return self.environment in (Environment.TESTING, Environment.CI)

    @property
    def use_json_logs(self) -> bool:
        """Whether log output should be rendered as JSON."""
        if self.log_json is not None:
            return self.log_json
        return self.is_testing


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
