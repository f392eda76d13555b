"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    SKILL_LOG_LEVEL: str = Field(default="info")
    SKILL_LOG_DIR: Path | None = Field(default=None)
    # Serverless hosts only offer a read-only filesystem, so file logging is opt-in
    SKILL_LOG_TO_FILE: bool = Field(default=False)
    SKILL_LOG_SCHEMA_VERSION: str = Field(default="1.0.0")

    # When set, events from any other skill application id are rejected
    SKILL_APPLICATION_ID: str | None = Field(default=None)

    ENABLE_SKILL_AUTH: bool = Field(default=False)
    SKILL_API_TOKEN: str | None = Field(default=None)
    HEALTHCHECK_API_TOKEN: str | None = Field(default=None)

    DATA_DIR: Path = Field(default=Path("/data"))


settings = Settings()
config = settings  # Alias for backward compatibility


__all__ = ["Settings", "settings", "config"]
