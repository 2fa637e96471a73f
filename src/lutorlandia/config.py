"""Application configuration for the Lutorlandia backend."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings, read from the environment or a ``.env`` file."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    database_url: str | None = Field(
        default=None,
        description="SQLAlchemy URL; leave unset to run on the in-memory store",
    )
    database_echo: bool = Field(default=False, description="Log every SQL statement")
    database_pool_size: int = Field(default=10, ge=1)
    database_max_overflow: int = Field(default=5, ge=0)
    database_pool_recycle: int = Field(
        default=1800, description="Seconds before a pooled connection is recycled"
    )
    database_pool_timeout: int = Field(
        default=20, description="Seconds to wait for a pooled connection"
    )

    session_secret: str | None = Field(
        default=None,
        min_length=8,
        description="Key used to sign the session cookie; a random per-process key when unset",
    )
    session_max_age_seconds: int = Field(default=24 * 60 * 60, gt=0)
    session_https_only: bool = Field(
        default=False, description="Only send the session cookie over HTTPS"
    )

    admin_username: str = Field(default="lutorlandia", min_length=1)
    admin_password: str | None = Field(
        default=None,
        description="When set, the operator account is created at startup if missing",
    )

    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call the HTTP API",
    )
    log_level: str = Field(default="INFO")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
