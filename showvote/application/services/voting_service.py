"""Voting Service.

Accepts at most one vote per anonymous viewer per day, only while the
voting window is open, and only for a show on today's slate.

Check order:
1. WINDOW FIRST - Outside the window every vote is VotingClosed
2. ONE BALLOT - A viewer with a vote today gets AlreadyVoted
3. ON THE SLATE - The show must be on today's slate (InvalidShow)
4. STORE - The repository enforces (user_id, day) uniqueness for races
"""

from __future__ import annotations

from uuid import UUID

from showvote.application.ports.daily_selection_repository import (
    DailySelectionRepositoryProtocol,
)
from showvote.application.ports.time_authority import TimeAuthorityProtocol
from showvote.application.ports.vote_repository import VoteRepositoryProtocol
from showvote.application.services.base import LoggingMixin
from showvote.domain.errors import (
    AlreadyVotedError,
    InvalidShowError,
    VotingClosedError,
)
from showvote.domain.models.vote import Vote
from showvote.domain.models.voting_window import (
    DEFAULT_SCHEDULE,
    VotingSchedule,
    WindowState,
)


class VotingService(LoggingMixin):
    """Service gating and recording votes.

    Attributes:
        _votes: Vote repository.
        _selections: Daily selection repository.
        _time: Time authority for the window and the vote timestamp.
        _schedule: Voting window hours.
    """

    def __init__(
        self,
        vote_repository: VoteRepositoryProtocol,
        selection_repository: DailySelectionRepositoryProtocol,
        time_authority: TimeAuthorityProtocol,
        schedule: VotingSchedule = DEFAULT_SCHEDULE,
    ) -> None:
        self._votes = vote_repository
        self._selections = selection_repository
        self._time = time_authority
        self._schedule = schedule
        self._init_logger(component="voting")

    def window_state(self) -> WindowState:
        """Classify the current hour. Recomputed on every call."""
        return self._schedule.state_at(self._time.now())

    async def submit_vote(self, show_id: object, user_id: str) -> Vote:
        """Record a vote for show_id by user_id.

        Args:
            show_id: Show picked by the viewer. A value that is not a
                valid id (None, a number, a malformed string) is treated
                like a show that is not on the slate.
            user_id: Anonymous viewer id from the identity credential.

        Returns:
            The stored Vote.

        Raises:
            VotingClosedError: Outside the voting window.
            AlreadyVotedError: The viewer already voted today.
            InvalidShowError: No slate today, or show not on it.
        """
        now = self._time.now()
        today = now.date()
        log = self._log_operation(
            "submit_vote", show_id=str(show_id)[:64], day=today.isoformat()
        )

        state = self._schedule.state_at(now)
        if not state.accepts_votes:
            log.info("vote_rejected_closed", window_state=state.value)
            raise VotingClosedError(
                opens_at_hour=self._schedule.open_hour,
                closes_at_hour=self._schedule.close_hour,
            )

        if await self._votes.has_voted(user_id, today):
            log.info("vote_rejected_duplicate")
            raise AlreadyVotedError(user_id)

        parsed_id = _parse_show_id(show_id)
        selection = await self._selections.get_for_day(today)
        if (
            parsed_id is None
            or selection is None
            or not selection.contains(parsed_id)
        ):
            log.info("vote_rejected_invalid_show", has_selection=selection is not None)
            raise InvalidShowError(show_id)

        vote = Vote(show_id=parsed_id, user_id=user_id, timestamp=now)
        try:
            await self._votes.add(vote)
        except AlreadyVotedError:
            log.info("vote_rejected_duplicate", concurrent=True)
            raise

        log.info("vote_recorded", vote_id=str(vote.id))
        return vote


def _parse_show_id(show_id: object) -> UUID | None:
    if isinstance(show_id, UUID):
        return show_id
    if not isinstance(show_id, str):
        return None
    try:
        return UUID(show_id)
    except ValueError:
        return None

