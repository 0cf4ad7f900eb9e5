"""
Integration test configuration with testcontainers.

- PostgreSQL 16 container, started once per session
- Schema created once; tables truncated between tests

Note: Docker must be running for these fixtures to work.
"""

from collections.abc import AsyncGenerator, Generator

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from testcontainers.postgres import PostgresContainer

from showvote.bootstrap.database import to_async_url
from showvote.infrastructure.adapters.persistence import create_schema


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    """Session-scoped PostgreSQL 16 container."""
    with PostgresContainer("postgres:16-alpine") as postgres:
        yield postgres


@pytest.fixture(scope="session")
def postgres_async_url(postgres_container: PostgresContainer) -> str:
    """postgresql+asyncpg:// URL for the container."""
    return to_async_url(postgres_container.get_connection_url())


@pytest.fixture
async def session_factory(
    postgres_async_url: str,
) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Per-test session factory over an empty schema."""
    engine = create_async_engine(postgres_async_url, echo=False)
    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    await create_schema(factory)
    async with factory() as session, session.begin():
        await session.execute(
            text("TRUNCATE votes, daily_selection_shows, daily_selections, shows")
        )

    yield factory

    await engine.dispose()
