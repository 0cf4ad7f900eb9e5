"""Vote repository stub implementation.

In-memory implementation of VoteRepositoryProtocol. Votes are keyed by
(user_id, day), mirroring the database unique constraint.
"""

from __future__ import annotations

import asyncio
from collections import Counter
from datetime import date
from uuid import UUID

from showvote.application.ports.vote_repository import VoteRepositoryProtocol
from showvote.domain.errors import AlreadyVotedError
from showvote.domain.models.show_result import VoteCount
from showvote.domain.models.vote import Vote


class VoteRepositoryStub(VoteRepositoryProtocol):
    """In-memory votes.

    Attributes:
        _votes: Dictionary mapping (user_id, day) to Vote.
    """

    def __init__(self) -> None:
        self._votes: dict[tuple[str, date], Vote] = {}
        # Lock for simulating the unique index on (user_id, vote_date)
        self._lock = asyncio.Lock()

    async def add(self, vote: Vote) -> None:
        """Store vote unless the user already voted that day.

        Raises:
            AlreadyVotedError: If (user_id, day) is taken.
        """
        key = (vote.user_id, vote.day)
        async with self._lock:
            if key in self._votes:
                raise AlreadyVotedError(vote.user_id)
            self._votes[key] = vote

    async def has_voted(self, user_id: str, day: date) -> bool:
        return (user_id, day) in self._votes

    async def count_by_show(self, day: date) -> list[VoteCount]:
        tally: Counter[UUID] = Counter(
            vote.show_id for vote in self._votes.values() if vote.day == day
        )
        return [VoteCount(show_id=show_id, votes=n) for show_id, n in tally.items()]

    # Test helpers

    def all_votes(self) -> list[Vote]:
        return list(self._votes.values())

    def clear(self) -> None:
        self._votes.clear()
