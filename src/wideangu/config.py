"""Application configuration via environment variables.

Uses pydantic-settings to load config from env vars with the WIDEANGU_
prefix. The listening port also honours the bare PORT variable, which is
what most hosting platforms set. A local .env file is read if present.

Learn: pydantic-settings auto-loads from environment, validates types,
provides defaults. validation_alias lets one field answer to several
env var names.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """All app configuration. Set via WIDEANGU_* env vars (or PORT)."""

    # Server
    environment: str = "development"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = Field(
        default=3000,
        validation_alias=AliasChoices("PORT", "WIDEANGU_PORT"),
    )
    log_level: str = "INFO"

    service_name: str = "Wide Angu Media Professionals API"

    # CORS: open policy, every origin allowed
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_prefix="WIDEANGU_",
        env_file=".env",
        extra="ignore",
    )


# Singleton — import this everywhere
settings = Settings()
