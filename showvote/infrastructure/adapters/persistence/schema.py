"""PostgreSQL schema for Show Vote.

The uniqueness invariants live here, not in the services:
- daily_selections.selection_date is UNIQUE (one slate per day)
- votes (user_id, vote_date) is UNIQUE (one vote per viewer per day)

Concurrent writers that lose a race hit ON CONFLICT DO NOTHING and the
repository turns the empty RETURNING into the matching domain error.
"""

from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from structlog import get_logger

logger = get_logger()

# asyncpg prepares each statement, so DDL runs one statement at a time
SCHEMA_STATEMENTS: tuple[str, ...] = (
    """
    CREATE TABLE IF NOT EXISTS shows (
        id UUID PRIMARY KEY,
        title TEXT NOT NULL,
        description TEXT NOT NULL,
        image_url TEXT,
        genre TEXT,
        created_at TIMESTAMPTZ NOT NULL DEFAULT now()
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS daily_selections (
        id UUID PRIMARY KEY,
        selection_date DATE NOT NULL,
        created_at TIMESTAMPTZ NOT NULL DEFAULT now(),
        CONSTRAINT daily_selections_one_per_day UNIQUE (selection_date)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS daily_selection_shows (
        selection_id UUID NOT NULL REFERENCES daily_selections (id),
        position INTEGER NOT NULL,
        show_id UUID NOT NULL REFERENCES shows (id),
        PRIMARY KEY (selection_id, position),
        CONSTRAINT daily_selection_shows_distinct UNIQUE (selection_id, show_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS votes (
        id UUID PRIMARY KEY,
        show_id UUID NOT NULL REFERENCES shows (id),
        user_id TEXT NOT NULL,
        voted_at TIMESTAMPTZ NOT NULL,
        vote_date DATE NOT NULL,
        CONSTRAINT votes_one_per_user_per_day UNIQUE (user_id, vote_date)
    )
    """,
    "CREATE INDEX IF NOT EXISTS votes_vote_date_idx ON votes (vote_date)",
)


async def create_schema(session_factory: async_sessionmaker[AsyncSession]) -> None:
    """Create tables and constraints if they do not exist yet."""
    async with session_factory() as session, session.begin():
        for statement in SCHEMA_STATEMENTS:
            await session.execute(text(statement))
    logger.info("database_schema_ready", tables=4)
