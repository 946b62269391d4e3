"""
Application configuration loaded from environment variables.
Uses pydantic-settings for typed, validated config.
"""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    """All environment variables read by the application (once, at startup)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Server ────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 5000

    # ── MongoDB ───────────────────────────────────────────────
    mongo_url: str = "mongodb://localhost:27017"
    mongo_db: str = "PracticeDB"
    mongo_collection: str = "users"

    # ── Store ─────────────────────────────────────────────────
    store_backend: Literal["mongo", "memory"] = "mongo"
    store_timeout_ms: int = 5000     # bounds every store round trip

    # ── App ───────────────────────────────────────────────────
    app_name: str = "users.api"
    debug: bool = False
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def get_settings() -> Settings:
    return Settings()
