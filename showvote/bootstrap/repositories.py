"""Repository bootstrap.

Picks the storage backend from AppConfig: PostgreSQL when DATABASE_URL is
set, in-memory stubs otherwise (development and tests).
"""

from __future__ import annotations

from dataclasses import dataclass

from structlog import get_logger

from showvote.application.ports.daily_selection_repository import (
    DailySelectionRepositoryProtocol,
)
from showvote.application.ports.show_repository import ShowRepositoryProtocol
from showvote.application.ports.vote_repository import VoteRepositoryProtocol
from showvote.bootstrap.database import get_session_factory
from showvote.config.app_config import AppConfig
from showvote.infrastructure.adapters.persistence import (
    PostgresDailySelectionRepository,
    PostgresShowRepository,
    PostgresVoteRepository,
    create_schema,
)
from showvote.infrastructure.stubs import (
    DailySelectionRepositoryStub,
    ShowRepositoryStub,
    VoteRepositoryStub,
)

logger = get_logger()


@dataclass(frozen=True)
class Repositories:
    """The three repositories the services share."""

    shows: ShowRepositoryProtocol
    selections: DailySelectionRepositoryProtocol
    votes: VoteRepositoryProtocol


def build_repositories(config: AppConfig) -> Repositories:
    """Build repositories for the configured backend."""
    if config.database_url:
        session_factory = get_session_factory(config.database_url)
        logger.info("repositories_configured", backend="postgresql")
        return Repositories(
            shows=PostgresShowRepository(session_factory),
            selections=PostgresDailySelectionRepository(session_factory),
            votes=PostgresVoteRepository(session_factory),
        )

    logger.warning("repositories_configured", backend="in_memory")
    return Repositories(
        shows=ShowRepositoryStub(),
        selections=DailySelectionRepositoryStub(),
        votes=VoteRepositoryStub(),
    )


async def prepare_storage(config: AppConfig) -> None:
    """Create the database schema when a database is configured."""
    if config.database_url:
        await create_schema(get_session_factory(config.database_url))
