"""Voting board status computed from the local clock.

The server is authoritative; this only drives what the client shows.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from showvote.config._env import get_int_env
from showvote.domain.models.voting_window import (
    DEFAULT_SCHEDULE,
    VotingSchedule,
    WindowState,
)

OPEN_HOUR_ENV_VAR = "SHOWVOTE_OPEN_HOUR"
CLOSE_HOUR_ENV_VAR = "SHOWVOTE_CLOSE_HOUR"
REVEAL_HOUR_ENV_VAR = "SHOWVOTE_REVEAL_HOUR"


@dataclass(frozen=True)
class BoardStatus:
    """What the status bar shows.

    Attributes:
        state: Window state for the current hour.
        voting_open: Whether votes are accepted now.
        countdown: Time left until the reveal as "{h}h {m}m", empty once
            results are out.
    """

    state: WindowState
    voting_open: bool
    countdown: str

    @property
    def results_visible(self) -> bool:
        return self.state.results_visible


def format_countdown(remaining: timedelta) -> str:
    """Format a positive duration as "{h}h {m}m"; empty when nothing is left."""
    seconds = int(remaining.total_seconds())
    if seconds <= 0:
        return ""
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {rest // 60}m"


def board_status(now: datetime, schedule: VotingSchedule = DEFAULT_SCHEDULE) -> BoardStatus:
    state = schedule.state_at(now)
    return BoardStatus(
        state=state,
        voting_open=state.accepts_votes,
        countdown=format_countdown(schedule.reveal_time(now) - now),
    )


def schedule_from_environment() -> VotingSchedule:
    """Voting hours the client assumes, matching the server's defaults.

    Set SHOWVOTE_OPEN_HOUR, SHOWVOTE_CLOSE_HOUR and SHOWVOTE_REVEAL_HOUR
    when the server runs with non-default VOTING_* hours.

    Raises:
        ValueError: If the hours are out of order or out of range.
    """
    return VotingSchedule(
        open_hour=get_int_env(OPEN_HOUR_ENV_VAR, DEFAULT_SCHEDULE.open_hour),
        close_hour=get_int_env(CLOSE_HOUR_ENV_VAR, DEFAULT_SCHEDULE.close_hour),
        reveal_hour=get_int_env(REVEAL_HOUR_ENV_VAR, DEFAULT_SCHEDULE.reveal_hour),
    )
