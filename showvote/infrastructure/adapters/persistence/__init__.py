"""PostgreSQL persistence adapters (SQLAlchemy async + asyncpg)."""

from showvote.infrastructure.adapters.persistence.postgres_daily_selection_repository import (
    PostgresDailySelectionRepository,
)
from showvote.infrastructure.adapters.persistence.postgres_show_repository import (
    PostgresShowRepository,
)
from showvote.infrastructure.adapters.persistence.postgres_vote_repository import (
    PostgresVoteRepository,
)
from showvote.infrastructure.adapters.persistence.schema import create_schema

__all__: list[str] = [
    "PostgresDailySelectionRepository",
    "PostgresShowRepository",
    "PostgresVoteRepository",
    "create_schema",
]
