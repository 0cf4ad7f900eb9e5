"""PostgreSQL engine and session factory.

One engine per process, created the first time a repository needs it and
disposed by the API lifespan on shutdown. DATABASE_URL may use any of the
usual postgres schemes; it is rewritten for the asyncpg driver. Set
SQLALCHEMY_ECHO=1 to log every statement.
"""

from __future__ import annotations

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from structlog import get_logger

from showvote.config._env import get_bool_env

ASYNC_DRIVER = "postgresql+asyncpg"
_SYNC_DRIVERS = frozenset({"postgres", "postgresql", "postgresql+psycopg2", "postgresql+psycopg"})

logger = get_logger()

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def to_async_url(url: str) -> str:
    """Point a postgres URL at the asyncpg driver."""
    parsed = make_url(url)
    if parsed.drivername in _SYNC_DRIVERS:
        parsed = parsed.set(drivername=ASYNC_DRIVER)
    return parsed.render_as_string(hide_password=False)


def masked_url(url: str) -> str:
    return make_url(url).render_as_string(hide_password=True)


def get_session_factory(url: str) -> async_sessionmaker[AsyncSession]:
    """Return the process-wide session factory, creating the engine once."""
    global _engine, _session_factory

    if _session_factory is None:
        async_url = to_async_url(url)
        _engine = create_async_engine(
            async_url,
            echo=get_bool_env("SQLALCHEMY_ECHO", False),
            pool_pre_ping=True,
        )
        _session_factory = async_sessionmaker(_engine, expire_on_commit=False)
        logger.info("database_engine_created", url=masked_url(async_url))

    return _session_factory


async def close_database_engine() -> None:
    global _engine, _session_factory
    if _engine is None:
        return
    await _engine.dispose()
    _engine = None
    _session_factory = None
    logger.info("database_engine_disposed")
