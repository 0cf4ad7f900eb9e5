"""Vote repository port.

The storage layer owns the one-vote-per-user-per-day invariant: add() MUST
reject a second vote for the same (user_id, day), even under concurrent
submission.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

from showvote.domain.models.show_result import VoteCount
from showvote.domain.models.vote import Vote


class VoteRepositoryProtocol(Protocol):
    """Protocol for vote persistence.

    Methods:
        add: Store a new vote (unique per user and day)
        has_voted: Check whether a user voted on a day
        count_by_show: Tally a day's votes per show
    """

    async def add(self, vote: Vote) -> None:
        """Store a new vote.

        Args:
            vote: The vote to store.

        Raises:
            AlreadyVotedError: If vote.user_id already voted on vote.day.
        """
        ...

    async def has_voted(self, user_id: str, day: date) -> bool:
        """Return True if user_id has a vote on day."""
        ...

    async def count_by_show(self, day: date) -> list[VoteCount]:
        """Count votes cast on day, grouped by show.

        Only shows with at least one vote appear. Order is unspecified.
        """
        ...
