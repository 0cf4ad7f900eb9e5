"""Daily selection repository port.

The storage layer owns the one-slate-per-day invariant: create() MUST
reject a second slate for a date that already has one, even when two
requests race. Services do not lock.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

from showvote.domain.models.daily_selection import DailySelection


class DailySelectionRepositoryProtocol(Protocol):
    """Protocol for daily selection persistence.

    Methods:
        get_for_day: Look up the slate of a calendar day
        create: Store a new slate (unique per day)
    """

    async def get_for_day(self, day: date) -> DailySelection | None:
        """Return the slate for day, or None if none was drawn yet."""
        ...

    async def create(self, selection: DailySelection) -> None:
        """Store a new slate.

        Args:
            selection: The slate to store.

        Raises:
            DailySelectionAlreadyExistsError: If selection.day already has one.
        """
        ...
