"""Centralized configuration for the CRediT role taxonomy."""
from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Taxonomy configuration loaded from environment variables."""

    log_level: str = "info"
    log_json: bool = False
    # Level for the credit_taxonomy loggers; falls back to log_level.
    library_log_level: str | None = None

    # Run the catalog integrity check when the default registry is built.
    strict_catalog: bool = False

    model_config = {"env_prefix": "CREDIT_TAXONOMY_", "env_file": ".env", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
