"""Results tally models."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from showvote.domain.models.show import Show


@dataclass(frozen=True)
class VoteCount:
    """Number of votes one show received on one day."""

    show_id: UUID
    votes: int


@dataclass(frozen=True)
class ShowResult:
    """A ranked results row: the show and its vote count."""

    show: Show
    votes: int


def rank_counts(counts: list[VoteCount]) -> list[VoteCount]:
    """Order counts by votes descending.

    Ties are broken by show id so the ranking is stable across requests.
    Groups with no votes are dropped.
    """
    return sorted(
        (c for c in counts if c.votes > 0),
        key=lambda c: (-c.votes, str(c.show_id)),
    )
