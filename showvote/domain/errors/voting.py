"""Voting domain errors.

These errors represent the expected reasons a ballot is refused. They are
surfaced to the voter with a specific status and message and are never
retried.
"""

from __future__ import annotations

from uuid import UUID

from showvote.domain.exceptions import ShowVoteError
from showvote.domain.models.voting_window import format_hour


class VotingError(ShowVoteError):
    """Base error for vote submission failures."""

    pass


class VotingClosedError(VotingError):
    """Raised when a vote arrives outside the voting window.

    Attributes:
        opens_at_hour: Hour the window opens.
        closes_at_hour: Hour the window closes.
    """

    def __init__(self, opens_at_hour: int = 6, closes_at_hour: int = 18) -> None:
        self.opens_at_hour = opens_at_hour
        self.closes_at_hour = closes_at_hour
        super().__init__(
            f"Voting is closed. Voting is open from "
            f"{format_hour(opens_at_hour)} to {format_hour(closes_at_hour)}."
        )


class AlreadyVotedError(VotingError):
    """Raised when a voter already has a ballot for the day.

    Attributes:
        user_id: The anonymous voter identifier.
    """

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__("You have already voted today.")


class InvalidShowError(VotingError):
    """Raised when the chosen show is not on today's slate.

    Also raised when no slate exists yet for today.

    Attributes:
        show_id: The show the voter picked.
    """

    def __init__(self, show_id: object) -> None:
        self.show_id = show_id
        super().__init__("Invalid show selection.")

