"""Domain models for Show Vote."""

from showvote.domain.models.daily_selection import DEFAULT_SLATE_SIZE, DailySelection
from showvote.domain.models.show import Show
from showvote.domain.models.show_result import ShowResult, VoteCount, rank_counts
from showvote.domain.models.vote import Vote
from showvote.domain.models.voting_window import (
    DEFAULT_SCHEDULE,
    VotingSchedule,
    WindowState,
    classify,
)

__all__: list[str] = [
    "DEFAULT_SCHEDULE",
    "DEFAULT_SLATE_SIZE",
    "DailySelection",
    "Show",
    "ShowResult",
    "Vote",
    "VoteCount",
    "VotingSchedule",
    "WindowState",
    "classify",
    "rank_counts",
]
