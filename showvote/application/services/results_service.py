"""Results Service.

Reveals today's tally once the reveal hour has passed.
"""

from __future__ import annotations

from showvote.application.ports.daily_selection_repository import (
    DailySelectionRepositoryProtocol,
)
from showvote.application.ports.show_repository import ShowRepositoryProtocol
from showvote.application.ports.time_authority import TimeAuthorityProtocol
from showvote.application.ports.vote_repository import VoteRepositoryProtocol
from showvote.application.services.base import LoggingMixin
from showvote.domain.errors import NoSelectionTodayError, ResultsNotYetAvailableError
from showvote.domain.models.show_result import ShowResult, rank_counts
from showvote.domain.models.voting_window import DEFAULT_SCHEDULE, VotingSchedule


class ResultsService(LoggingMixin):
    """Service aggregating the day's votes into a ranking."""

    def __init__(
        self,
        show_repository: ShowRepositoryProtocol,
        selection_repository: DailySelectionRepositoryProtocol,
        vote_repository: VoteRepositoryProtocol,
        time_authority: TimeAuthorityProtocol,
        schedule: VotingSchedule = DEFAULT_SCHEDULE,
    ) -> None:
        self._shows = show_repository
        self._selections = selection_repository
        self._votes = vote_repository
        self._time = time_authority
        self._schedule = schedule
        self._init_logger(component="results")

    async def get_results(self) -> list[ShowResult]:
        """Return today's results, most votes first.

        Shows without votes are not listed.

        Raises:
            ResultsNotYetAvailableError: Before the reveal hour. Carries
                today's reveal time.
            NoSelectionTodayError: No slate was drawn today.
        """
        now = self._time.now()
        today = now.date()
        log = self._log_operation("get_results", day=today.isoformat())

        if not self._schedule.state_at(now).results_visible:
            available_at = self._schedule.reveal_time(now)
            log.debug("results_not_yet_available", available_at=available_at.isoformat())
            raise ResultsNotYetAvailableError(available_at)

        selection = await self._selections.get_for_day(today)
        if selection is None:
            log.info("results_no_selection")
            raise NoSelectionTodayError(today)

        counts = rank_counts(await self._votes.count_by_show(today))
        shows = await self._shows.get_many(c.show_id for c in counts)

        results: list[ShowResult] = []
        for count in counts:
            show = shows.get(count.show_id)
            if show is None:
                log.warning("result_show_missing", show_id=str(count.show_id))
                continue
            results.append(ShowResult(show=show, votes=count.votes))

        log.info(
            "results_computed",
            ranked_shows=len(results),
            total_votes=sum(r.votes for r in results),
        )
        return results
