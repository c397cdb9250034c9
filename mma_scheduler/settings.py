"""Environment-driven configuration for the MMA Scheduler web application."""

from __future__ import annotations

import logging
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Read a local .env before AppSettings so uvicorn and tests see the same values.
load_dotenv()

DEFAULT_SQLITE_DATABASE_URL = "sqlite+aiosqlite:///./data/app.db"
POSTGRES_ASYNC_PREFIX = "postgresql+psycopg://"
POSTGRES_SYNC_PREFIXES = ("postgres://", "postgresql://")
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_FIGHTERS_PAGE_SIZE = 10
DEFAULT_EVENTS_PAGE_SIZE = 10
DEFAULT_FIGHT_HISTORY_PAGE_SIZE = 3
DEFAULT_UPCOMING_EVENTS_LIMIT = 4


def to_async_database_url(url: str) -> str:
    """Rewrite a hosted ``postgres://`` URL for the async psycopg driver.

    Already-async PostgreSQL URLs and ``sqlite+aiosqlite`` URLs pass through.
    """

    url = url.strip()
    scheme = next((prefix for prefix in POSTGRES_SYNC_PREFIXES if url.startswith(prefix)), None)
    if scheme is not None:
        return POSTGRES_ASYNC_PREFIX + url[len(scheme):]
    if url.startswith((POSTGRES_ASYNC_PREFIX, "sqlite+aiosqlite")):
        return url
    raise RuntimeError(f"Unsupported database URL scheme: {url}")


class AppSettings(BaseSettings):
    """Application configuration.

    Values come from keyword arguments, then the process environment, then
    ``.env``. Each field also accepts its upper-case environment name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    database_url: str | None = Field(
        default=None,
        alias="DATABASE_URL",
        description="Hosted PostgreSQL connection string (sync or async scheme).",
    )
    use_sqlite: bool = Field(
        default=False,
        alias="USE_SQLITE",
        description="Ignore DATABASE_URL and read the local SQLite file.",
    )
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, alias="LOG_LEVEL")
    slow_query_threshold: float = Field(
        default=0.1,
        alias="SLOW_QUERY_THRESHOLD",
        description="Seconds after which a store query is logged as slow.",
    )
    fighters_page_size: int = Field(
        default=DEFAULT_FIGHTERS_PAGE_SIZE,
        alias="FIGHTERS_PAGE_SIZE",
        description="Default ``limit`` for the fighter browser endpoints.",
    )
    events_page_size: int = Field(
        default=DEFAULT_EVENTS_PAGE_SIZE,
        alias="EVENTS_PAGE_SIZE",
        description="Default ``limit`` for the yearly event schedule.",
    )
    fight_history_page_size: int = Field(
        default=DEFAULT_FIGHT_HISTORY_PAGE_SIZE,
        alias="FIGHT_HISTORY_PAGE_SIZE",
        description="Fights rendered on the profile before 'Load More'.",
    )
    upcoming_events_limit: int = Field(
        default=DEFAULT_UPCOMING_EVENTS_LIMIT,
        alias="UPCOMING_EVENTS_LIMIT",
    )
    cors_allow_origins_raw: str | None = Field(
        default=None,
        alias="CORS_ALLOW_ORIGINS",
        description="Comma-separated origins allowed to call the JSON API.",
    )

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper() or DEFAULT_LOG_LEVEL

    @property
    def resolved_database_url(self) -> str:
        """The async database URL, or the SQLite fallback."""

        if self.use_sqlite or not self.database_url:
            return DEFAULT_SQLITE_DATABASE_URL
        return to_async_database_url(self.database_url)

    @property
    def database_type(self) -> str:
        if self.resolved_database_url.startswith("sqlite"):
            return "sqlite"
        return "postgresql"

    @property
    def cors_allow_origins(self) -> list[str]:
        """Origins from ``CORS_ALLOW_ORIGINS`` without blanks or trailing slashes."""

        raw = self.cors_allow_origins_raw or ""
        return [origin.strip().rstrip("/") for origin in raw.split(",") if origin.strip("/ ")]

    @property
    def log_level_numeric(self) -> int:
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.INFO

    def optional_config_warnings(self) -> list[str]:
        """Describe optional settings that were left unset, for the startup log."""

        warnings: list[str] = []
        if not self.database_url and not self.use_sqlite:
            warnings.append(
                "DATABASE_URL is not set - falling back to the local SQLite "
                "database at ./data/app.db"
            )
        if not self.cors_allow_origins:
            warnings.append(
                "CORS_ALLOW_ORIGINS is not set - the JSON API only accepts "
                "same-origin browser requests"
            )
        return warnings


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Process-wide settings for the module-level ASGI app."""

    return AppSettings()


__all__ = [
    "AppSettings",
    "DEFAULT_EVENTS_PAGE_SIZE",
    "DEFAULT_FIGHTERS_PAGE_SIZE",
    "DEFAULT_FIGHT_HISTORY_PAGE_SIZE",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_SQLITE_DATABASE_URL",
    "DEFAULT_UPCOMING_EVENTS_LIMIT",
    "POSTGRES_ASYNC_PREFIX",
    "POSTGRES_SYNC_PREFIXES",
    "get_settings",
    "to_async_database_url",
]
