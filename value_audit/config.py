"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Threshold and action label are overridable without code change
    - get_settings() is cached (lru_cache) - single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: the pipeline works with no environment at all
"""

from decimal import Decimal
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from value_audit.core.domain_types import (
    DEFAULT_AUDIT_ACTION_LABEL, DEFAULT_HIGH_VALUE_THRESHOLD,
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Classification
    high_value_threshold: Decimal = DEFAULT_HIGH_VALUE_THRESHOLD
    audit_action_label: str = DEFAULT_AUDIT_ACTION_LABEL

    @field_validator("high_value_threshold")
    @classmethod
    def threshold_not_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("high_value_threshold must be >= 0")
        return v

    @field_validator("audit_action_label")
    @classmethod
    def label_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("audit_action_label must not be blank")
        return v

    # Database
    database_url: str = (
        "postgresql+asyncpg://valueaudit:valueaudit@db:5432/valueaudit"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres often hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
