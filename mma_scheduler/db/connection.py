from __future__ import annotations

import logging

from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from mma_scheduler.monitoring import setup_query_monitoring
from mma_scheduler.settings import AppSettings

logger = logging.getLogger(__name__)

SUPPORTED_DRIVERS = ("postgresql+psycopg", "sqlite+aiosqlite")


def _parse_url(database_url: str) -> URL:
    try:
        return make_url(database_url.strip())
    except ArgumentError as exc:
        raise RuntimeError(f"DATABASE_URL could not be parsed: {exc}") from exc


def validate_database_url(database_url: str) -> str:
    """Validate the async database URL produced by :class:`AppSettings`.

    PostgreSQL URLs must carry a host and a database name; SQLite URLs are
    accepted as-is for local development and tests.
    """

    if not database_url.strip():
        raise RuntimeError("DATABASE_URL is set but empty.")

    url = _parse_url(database_url)
    if url.drivername not in SUPPORTED_DRIVERS:
        raise RuntimeError(
            f"Unsupported database driver {url.drivername!r}; expected one of "
            f"{', '.join(SUPPORTED_DRIVERS)}."
        )
    if url.drivername.startswith("postgresql") and not (url.host and url.database):
        raise RuntimeError("DATABASE_URL must name both a host and a database.")

    return database_url.strip()


def sanitize_database_url(database_url: str) -> str:
    """Mask the password of ``database_url`` for log output."""

    try:
        return _parse_url(database_url).render_as_string(hide_password=True)
    except RuntimeError:
        return "<unparsable database URL>"


def create_engine(settings: AppSettings) -> AsyncEngine:
    """Create the async engine for the configured database.

    The hosted PostgreSQL database gets a small warm pool; SQLite keeps the
    driver defaults.
    """

    url = validate_database_url(settings.resolved_database_url)
    pool_options: dict[str, object] = {}
    if settings.database_type == "postgresql":
        pool_options = {
            "pool_size": 10,
            "max_overflow": 20,
            "pool_pre_ping": True,  # hosted poolers drop idle connections
            "pool_recycle": 1800,
            "pool_timeout": 30,
        }

    engine = create_async_engine(url, **pool_options)
    setup_query_monitoring(engine, slow_query_threshold=settings.slow_query_threshold)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
