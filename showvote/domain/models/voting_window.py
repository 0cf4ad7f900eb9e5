"""Voting window classification.

The daily schedule is a pure function of the wall-clock hour. Nothing is
stored: every request re-classifies the current hour.

    00:00 ─ CLOSED_MORNING ─ 06:00 ─ OPEN ─ 18:00 ─ CLOSED_EVENING_PENDING ─ 19:00 ─ RESULTS_AVAILABLE ─ 24:00
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

DEFAULT_OPEN_HOUR: int = 6
DEFAULT_CLOSE_HOUR: int = 18
DEFAULT_REVEAL_HOUR: int = 19


class WindowState(Enum):
    """Phase of the voting day.

    States:
        CLOSED_MORNING: Before the window opens
        OPEN: Votes are accepted
        CLOSED_EVENING_PENDING: Window closed, results not yet revealed
        RESULTS_AVAILABLE: Results can be read
    """

    CLOSED_MORNING = "CLOSED_MORNING"
    OPEN = "OPEN"
    CLOSED_EVENING_PENDING = "CLOSED_EVENING_PENDING"
    RESULTS_AVAILABLE = "RESULTS_AVAILABLE"

    @property
    def accepts_votes(self) -> bool:
        return self is WindowState.OPEN

    @property
    def results_visible(self) -> bool:
        return self is WindowState.RESULTS_AVAILABLE


@dataclass(frozen=True)
class VotingSchedule:
    """Hours that delimit the voting day.

    Attributes:
        open_hour: First hour votes are accepted (inclusive).
        close_hour: Hour voting stops (exclusive).
        reveal_hour: First hour results are visible (inclusive).
    """

    open_hour: int = DEFAULT_OPEN_HOUR
    close_hour: int = DEFAULT_CLOSE_HOUR
    reveal_hour: int = DEFAULT_REVEAL_HOUR

    def __post_init__(self) -> None:
        for name in ("open_hour", "close_hour", "reveal_hour"):
            value = getattr(self, name)
            if not 0 <= value <= 23:
                raise ValueError(f"{name} must be between 0 and 23, got {value}")
        if not self.open_hour < self.close_hour <= self.reveal_hour:
            raise ValueError(
                "Schedule hours must satisfy open_hour < close_hour <= reveal_hour, "
                f"got {self.open_hour}/{self.close_hour}/{self.reveal_hour}"
            )

    def classify(self, hour: int) -> WindowState:
        """Classify an hour of the day into its window state.

        Args:
            hour: Wall-clock hour (0-23).

        Returns:
            The WindowState for that hour.

        Raises:
            ValueError: If hour is outside 0-23.
        """
        if not 0 <= hour <= 23:
            raise ValueError(f"hour must be between 0 and 23, got {hour}")
        if hour < self.open_hour:
            return WindowState.CLOSED_MORNING
        if hour < self.close_hour:
            return WindowState.OPEN
        if hour < self.reveal_hour:
            return WindowState.CLOSED_EVENING_PENDING
        return WindowState.RESULTS_AVAILABLE

    def state_at(self, moment: datetime) -> WindowState:
        return self.classify(moment.hour)

    def reveal_time(self, moment: datetime) -> datetime:
        """Return the reveal moment on the same calendar day as moment.

        The returned datetime keeps moment's tzinfo.
        """
        return moment.replace(hour=self.reveal_hour, minute=0, second=0, microsecond=0)


DEFAULT_SCHEDULE = VotingSchedule()


def classify(hour: int, schedule: VotingSchedule = DEFAULT_SCHEDULE) -> WindowState:
    """Classify an hour using the default (or given) schedule."""
    return schedule.classify(hour)


def format_hour(hour: int) -> str:
    """Render a 24h hour as a short 12h label (6am, 6pm, 12pm)."""
    suffix = "am" if hour < 12 else "pm"
    display = hour % 12 or 12
    return f"{display}{suffix}"
