"""
Central configuration loader.
Reads from environment variables (via .env); never logs secret values.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# ---------------------------------------------------------------------------
# Load .env from the working directory or its parents (if present)
# ---------------------------------------------------------------------------
load_dotenv(find_dotenv(usecwd=True))


DEFAULT_MAX_CONNECTIONS = 1


def get_db_path() -> Path:
    return Path.cwd() / "data" / "peers.db"


def default_database_url() -> str:
    return f"sqlite:///{get_db_path().as_posix()}"


class Settings(BaseSettings):
    """Database settings loaded from environment variables"""

    model_config = SettingsConfigDict(case_sensitive=True, extra="ignore")

    DATABASE_URL: str = Field(
        default_factory=default_database_url,
        validation_alias="DATABASE_URL",
    )
    MAX_DATABASE_CONNECTIONS: int = Field(
        default=DEFAULT_MAX_CONNECTIONS, validation_alias="MAX_DATABASE_CONNECTIONS"
    )
    DATABASE_POOL_TIMEOUT: float = Field(default=30.0, validation_alias="DATABASE_POOL_TIMEOUT")
    DATABASE_CREATE_SCHEMA: bool = Field(default=False, validation_alias="DATABASE_CREATE_SCHEMA")
    DATABASE_ECHO: bool = Field(default=False, validation_alias="DATABASE_ECHO")

    @field_validator("MAX_DATABASE_CONNECTIONS", mode="before")
    @classmethod
    def _lenient_pool_size(cls, value: Any) -> int:
        # Garbage or non-positive values fall back to a single connection.
        try:
            size = int(str(value).strip())
        except (TypeError, ValueError):
            return DEFAULT_MAX_CONNECTIONS
        return size if size > 0 else DEFAULT_MAX_CONNECTIONS


def get_settings(**overrides: Any) -> Settings:
    """Build a fresh ``Settings`` from the current environment."""
    return Settings(**overrides)
