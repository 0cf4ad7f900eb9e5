"""Daily selection repository stub implementation.

In-memory implementation of DailySelectionRepositoryProtocol. Selections
are keyed by day, so the one-slate-per-day constraint holds exactly as the
database unique index does.
"""

from __future__ import annotations

import asyncio
from datetime import date

from showvote.application.ports.daily_selection_repository import (
    DailySelectionRepositoryProtocol,
)
from showvote.domain.errors import DailySelectionAlreadyExistsError
from showvote.domain.models.daily_selection import DailySelection


class DailySelectionRepositoryStub(DailySelectionRepositoryProtocol):
    """In-memory daily selections.

    Attributes:
        _by_day: Dictionary mapping calendar day to DailySelection.
        create_calls: Number of create() attempts, including rejected ones.
    """

    def __init__(self) -> None:
        self._by_day: dict[date, DailySelection] = {}
        # Lock for simulating the unique index on date
        self._lock = asyncio.Lock()
        self.create_calls = 0

    async def get_for_day(self, day: date) -> DailySelection | None:
        return self._by_day.get(day)

    async def create(self, selection: DailySelection) -> None:
        """Store selection unless its day already has one.

        Raises:
            DailySelectionAlreadyExistsError: If the day is taken.
        """
        async with self._lock:
            self.create_calls += 1
            if selection.day in self._by_day:
                raise DailySelectionAlreadyExistsError(selection.day)
            self._by_day[selection.day] = selection

    # Test helpers

    def count(self) -> int:
        return len(self._by_day)

    def clear(self) -> None:
        self._by_day.clear()
        self.create_calls = 0
