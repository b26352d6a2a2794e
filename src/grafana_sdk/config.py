"""
Application settings.

Values come from environment variables (or a ``.env`` file in the working
directory).  ``get_settings()`` caches the instance for the process.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration backed by environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    app_name: str = Field(default="grafana-sdk", validation_alias="APP_NAME")
    app_env: str = Field(default="development", validation_alias="APP_ENV")
    debug: bool = Field(default=False, validation_alias="DEBUG")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_json: bool = Field(default=False, validation_alias="LOG_JSON")

    grafana_url: str = Field(
        default="http://localhost:3000",
        validation_alias="GRAFANA_URL",
        description="Base URL of the Grafana instance.",
    )
    grafana_auth: str | None = Field(
        default=None,
        validation_alias="GRAFANA_AUTH",
        description="API key, or 'user:password' for basic auth.",
    )
    grafana_org_id: int = Field(
        default=0,
        validation_alias="GRAFANA_ORG_ID",
        description="Organization to scope calls to; 0 uses the caller's current org.",
    )
    request_timeout: float = Field(default=30, validation_alias="GRAFANA_TIMEOUT")
    max_retries: int = Field(
        default=0,
        validation_alias="GRAFANA_MAX_RETRIES",
        description="Retries for idempotent reads on transient errors.",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
