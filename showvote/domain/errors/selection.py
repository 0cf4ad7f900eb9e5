"""Daily selection domain errors."""

from __future__ import annotations

from datetime import date

from showvote.domain.exceptions import ShowVoteError


class DailySelectionAlreadyExistsError(ShowVoteError):
    """Raised by a repository when a slate for the day is already stored.

    The storage layer enforces one slate per date. Callers that lose the
    creation race should re-read the stored slate.

    Attributes:
        day: The calendar day that already has a slate.
    """

    def __init__(self, day: date) -> None:
        self.day = day
        super().__init__(f"A daily selection already exists for {day.isoformat()}")
