"""Daily Selection Service.

Materializes today's slate on first request and serves the stored slate on
every later request of the same day.

Developer Golden Rules:
1. ONE SLATE PER DAY - The repository rejects a second slate for a date
2. LOSER RE-READS - A creation that loses the race returns the stored slate
3. NEVER MUTATE - A stored slate is returned exactly as drawn, in order
4. NO PARTIAL STATE - A failed creation leaves no slate; the next request retries
"""

from __future__ import annotations

from datetime import date

from showvote.application.ports.daily_selection_repository import (
    DailySelectionRepositoryProtocol,
)
from showvote.application.ports.show_repository import ShowRepositoryProtocol
from showvote.application.ports.time_authority import TimeAuthorityProtocol
from showvote.application.services.base import LoggingMixin
from showvote.domain.errors import DailySelectionAlreadyExistsError
from showvote.domain.models.daily_selection import DailySelection
from showvote.domain.models.show import Show
from showvote.domain.services.slate_drawer import SlateDrawer


class DailySelectionService(LoggingMixin):
    """Service owning the daily slate of shows.

    Attributes:
        _shows: Show catalog repository.
        _selections: Daily selection repository.
        _time: Time authority deciding what "today" is.
        _drawer: Random slate drawer.
    """

    def __init__(
        self,
        show_repository: ShowRepositoryProtocol,
        selection_repository: DailySelectionRepositoryProtocol,
        time_authority: TimeAuthorityProtocol,
        drawer: SlateDrawer,
    ) -> None:
        self._shows = show_repository
        self._selections = selection_repository
        self._time = time_authority
        self._drawer = drawer
        self._init_logger(component="selection")

    def today(self) -> date:
        return self._time.now().date()

    async def get_todays_shows(self) -> list[Show]:
        """Return today's slate, drawing it first if needed.

        Returns:
            Up to slate_size shows in the stored order.
        """
        selection = await self.ensure_selection(self.today())
        return await self.resolve_shows(selection)

    async def ensure_selection(self, day: date) -> DailySelection:
        """Return the slate for day, creating it when absent.

        Args:
            day: Calendar day of the slate.

        Returns:
            The one DailySelection stored for day.
        """
        log = self._log_operation("ensure_selection", day=day.isoformat())

        existing = await self._selections.get_for_day(day)
        if existing is not None:
            log.debug("selection_found", selection_id=str(existing.id))
            return existing

        started = self._time.monotonic()
        catalog = await self._shows.list_all()
        drawn = self._drawer.draw(catalog)
        selection = DailySelection.create(day, [show.id for show in drawn])

        try:
            await self._selections.create(selection)
        except DailySelectionAlreadyExistsError:
            # Another request drew the slate first; theirs is the slate.
            winner = await self._selections.get_for_day(day)
            if winner is None:
                raise
            log.info("selection_race_lost", selection_id=str(winner.id))
            return winner

        log.info(
            "selection_created",
            selection_id=str(selection.id),
            catalog_size=len(catalog),
            slate_size=len(selection),
            duration_ms=round((self._time.monotonic() - started) * 1000, 2),
        )
        return selection

    async def resolve_shows(self, selection: DailySelection) -> list[Show]:
        """Load the shows of a slate in slate order.

        References to shows missing from the catalog are skipped.
        """
        found = await self._shows.get_many(selection.show_ids)
        missing = [str(i) for i in selection.show_ids if i not in found]
        if missing:
            self._log_operation(
                "resolve_shows", selection_id=str(selection.id)
            ).warning("selection_shows_missing", missing_show_ids=missing)
        return [found[i] for i in selection.show_ids if i in found]
