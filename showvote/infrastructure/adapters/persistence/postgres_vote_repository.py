"""PostgreSQL vote repository."""

from __future__ import annotations

from datetime import date

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from showvote.domain.errors import AlreadyVotedError
from showvote.domain.models.show_result import VoteCount
from showvote.domain.models.vote import Vote


class PostgresVoteRepository:
    """VoteRepositoryProtocol backed by the votes table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def add(self, vote: Vote) -> None:
        async with self._session_factory() as session, session.begin():
            result = await session.execute(
                text("""
                    INSERT INTO votes (id, show_id, user_id, voted_at, vote_date)
                    VALUES (:id, :show_id, :user_id, :voted_at, :vote_date)
                    ON CONFLICT (user_id, vote_date) DO NOTHING
                    RETURNING id
                """),
                {
                    "id": vote.id,
                    "show_id": vote.show_id,
                    "user_id": vote.user_id,
                    "voted_at": vote.timestamp,
                    "vote_date": vote.day,
                },
            )
            if result.scalar() is None:
                raise AlreadyVotedError(vote.user_id)

    async def has_voted(self, user_id: str, day: date) -> bool:
        async with self._session_factory() as session:
            result = await session.execute(
                text("""
                    SELECT 1 FROM votes
                    WHERE user_id = :user_id AND vote_date = :day
                    LIMIT 1
                """),
                {"user_id": user_id, "day": day},
            )
            return result.scalar() is not None

    async def count_by_show(self, day: date) -> list[VoteCount]:
        async with self._session_factory() as session:
            result = await session.execute(
                text("""
                    SELECT show_id, COUNT(*) AS votes
                    FROM votes
                    WHERE vote_date = :day
                    GROUP BY show_id
                """),
                {"day": day},
            )
            rows = result.fetchall()
        return [VoteCount(show_id=row.show_id, votes=int(row.votes)) for row in rows]
