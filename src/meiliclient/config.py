from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseModel):
    """Application-specific configuration values."""

    log_level: str = "INFO"


class ClientConfig(BaseModel):
    """Search service connection values."""

    # May carry the API key as userinfo, e.g. "http://key@localhost:7700"
    uri: str = "http://localhost:7700"
    timeout: float = 30.0
    verify_ssl: bool = True


class Settings(BaseSettings):
    """Top-level settings loaded from environment variables and .env only."""

    model_config = SettingsConfigDict(
        env_prefix="MEILI_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    app: AppConfig = AppConfig()
    client: ClientConfig = ClientConfig()


def load_settings() -> Settings:
    """Load settings from environment variables and .env only."""
    return Settings()  # type: ignore[call-arg]


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Apply a log level to the package logger, defaulting to the configured one.

    Handlers are left to the application; only the level is set here.
    """
    logger = logging.getLogger("meiliclient")
    logger.setLevel((level or load_settings().app.log_level).upper())
    return logger
