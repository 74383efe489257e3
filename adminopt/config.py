"""
Configuration for the administration tool.

Every setting has a default that reproduces the plain interactive program,
so running without any environment variables is the normal case. Values can
be overridden with ``ADMINOPT_*`` environment variables or a ``.env`` file.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="ADMINOPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    report_delay_seconds: float = Field(
        default=2.0,
        ge=0.0,
        description="Pause before a requested report is printed",
    )
    currency_symbol: str = Field(
        default="R",
        description="Prefix rendered in front of every amount",
    )
    log_level: str = Field(
        default="WARNING",
        description="Level for the structured log written to stderr",
    )
    log_json: bool = Field(
        default=False,
        description="Render log events as JSON lines",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unsupported log level: {v}")
        return v


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload after the environment changes.
    """
    return Settings()
