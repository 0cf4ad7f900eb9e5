"""Voting schedule configuration.

Defines the daily voting window, reveal hour and slate size with
environment variable overrides.

Environment Variables:
- VOTING_OPEN_HOUR: First hour votes are accepted (default: 6)
- VOTING_CLOSE_HOUR: Hour voting stops, exclusive (default: 18)
- RESULTS_REVEAL_HOUR: First hour results are visible (default: 19)
- DAILY_SLATE_SIZE: Shows drawn per day (default: 10)
- VOTING_TIMEZONE: IANA zone for "today" and the window (default: server local time)
"""

from __future__ import annotations

from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from showvote.config._env import get_int_env, get_str_env
from showvote.domain.models.daily_selection import DEFAULT_SLATE_SIZE
from showvote.domain.models.voting_window import (
    DEFAULT_CLOSE_HOUR,
    DEFAULT_OPEN_HOUR,
    DEFAULT_REVEAL_HOUR,
    VotingSchedule,
)

MAX_SLATE_SIZE: int = 100


@dataclass(frozen=True)
class VotingScheduleConfig:
    """Configuration for the voting day.

    Attributes:
        open_hour: First hour of the voting window (inclusive).
        close_hour: End of the voting window (exclusive).
        reveal_hour: Hour from which results are visible.
        slate_size: Number of shows drawn each day.
        timezone: IANA zone name, or None for the server's local time.
    """

    open_hour: int = DEFAULT_OPEN_HOUR
    close_hour: int = DEFAULT_CLOSE_HOUR
    reveal_hour: int = DEFAULT_REVEAL_HOUR
    slate_size: int = DEFAULT_SLATE_SIZE
    timezone: str | None = None

    def __post_init__(self) -> None:
        """Validate configuration values."""
        # VotingSchedule validates the hours
        self.to_schedule()
        if not 1 <= self.slate_size <= MAX_SLATE_SIZE:
            raise ValueError(
                f"slate_size must be between 1 and {MAX_SLATE_SIZE}, "
                f"got {self.slate_size}"
            )
        if self.timezone is not None:
            try:
                ZoneInfo(self.timezone)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise ValueError(f"Unknown timezone: {self.timezone}") from exc

    def to_schedule(self) -> VotingSchedule:
        return VotingSchedule(
            open_hour=self.open_hour,
            close_hour=self.close_hour,
            reveal_hour=self.reveal_hour,
        )

    def tzinfo(self) -> ZoneInfo | None:
        return ZoneInfo(self.timezone) if self.timezone else None

    @classmethod
    def from_environment(cls) -> VotingScheduleConfig:
        """Create config from environment variables with defaults."""
        return cls(
            open_hour=get_int_env("VOTING_OPEN_HOUR", DEFAULT_OPEN_HOUR),
            close_hour=get_int_env("VOTING_CLOSE_HOUR", DEFAULT_CLOSE_HOUR),
            reveal_hour=get_int_env("RESULTS_REVEAL_HOUR", DEFAULT_REVEAL_HOUR),
            slate_size=get_int_env("DAILY_SLATE_SIZE", DEFAULT_SLATE_SIZE),
            timezone=get_str_env("VOTING_TIMEZONE"),
        )

