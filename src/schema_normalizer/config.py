"""Configuration for schema normalization.

Values load from the environment with the SCHEMA_NORMALIZER_ prefix, e.g.
SCHEMA_NORMALIZER_ALLOW_VALUES_ARRAYS=true.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SchemaNormalizerConfig(BaseSettings):
    """Settings consulted when the caller does not pass them explicitly."""

    model_config = SettingsConfigDict(env_prefix="SCHEMA_NORMALIZER_", extra="ignore")

    allow_values_arrays: bool = Field(
        default=False,
        description="Accept the deprecated array-of-properties shape and rewrite it into a mapping",
    )
    log_level: str = Field(default="INFO", description="Log level for the CLI")


@lru_cache
def get_config() -> SchemaNormalizerConfig:
    """Return the process-wide configuration, loaded once."""
    return SchemaNormalizerConfig()


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads the environment."""
    get_config.cache_clear()
