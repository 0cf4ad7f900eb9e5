"""Pinned clock for tests of the voting day.

Whether a vote is accepted or results are shown depends only on the hour,
so tests jump the clock to 05:59, 18:30 or 19:00 instead of waiting:

    >>> clock = FakeTimeAuthority()          # Monday 2026-03-02, 10:00 UTC
    >>> clock.set_hour(18, 30)               # voting just closed
    >>> clock.advance(delta=timedelta(days=1))  # next day, same hour
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from showvote.application.ports.time_authority import TimeAuthorityProtocol

DEFAULT_FROZEN_AT = datetime(2026, 3, 2, 10, 0, tzinfo=timezone.utc)


class FakeTimeAuthority(TimeAuthorityProtocol):
    """Time authority that only moves when a test moves it.

    now() keeps the zone of frozen_at (UTC for naive values). The
    monotonic reading grows with advance() but not with set_hour().
    """

    def __init__(self, frozen_at: datetime | None = None) -> None:
        moment = frozen_at or DEFAULT_FROZEN_AT
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        self._moment = moment
        self._elapsed = 0.0

    def now(self) -> datetime:
        return self._moment

    def utcnow(self) -> datetime:
        return self._moment.astimezone(timezone.utc)

    def monotonic(self) -> float:
        return self._elapsed

    def advance(
        self,
        seconds: float | None = None,
        delta: timedelta | None = None,
    ) -> None:
        """Move forward by seconds or delta.

        Raises:
            ValueError: If no amount is given or it is negative.
        """
        step = delta if delta is not None else timedelta(seconds=seconds or 0)
        if delta is None and seconds is None:
            raise ValueError("advance() needs seconds or delta")
        if step < timedelta(0):
            raise ValueError(f"Clock cannot run backwards (got {step})")
        self._moment += step
        self._elapsed += step.total_seconds()

    def set_hour(self, hour: int, minute: int = 0) -> None:
        """Jump to hour:minute on the current day."""
        self._moment = self._moment.replace(hour=hour, minute=minute, second=0, microsecond=0)

    def __repr__(self) -> str:
        return f"FakeTimeAuthority({self._moment.isoformat()})"
