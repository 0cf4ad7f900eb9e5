"""Results domain errors."""

from __future__ import annotations

from datetime import date, datetime

from showvote.domain.exceptions import ShowVoteError
from showvote.domain.models.voting_window import format_hour


class ResultsError(ShowVoteError):
    """Base error for results retrieval failures."""

    pass


class ResultsNotYetAvailableError(ResultsError):
    """Raised when results are requested before the reveal hour.

    Attributes:
        available_at: When today's results will be revealed.
    """

    def __init__(self, available_at: datetime) -> None:
        self.available_at = available_at
        super().__init__(
            f"Results will be available at {format_hour(available_at.hour)}."
        )


class NoSelectionTodayError(ResultsError):
    """Raised when there is no slate for the requested day.

    Attributes:
        day: The calendar day without a slate.
    """

    def __init__(self, day: date) -> None:
        self.day = day
        super().__init__("No shows were selected today.")
