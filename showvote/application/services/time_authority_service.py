"""System time authority.

The production implementation of TimeAuthorityProtocol. It is the only
place in the service allowed to read the wall clock.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone, tzinfo

from showvote.application.ports.time_authority import TimeAuthorityProtocol


class SystemTimeAuthority(TimeAuthorityProtocol):
    """Wall-clock time authority.

    now() returns an aware datetime in the configured zone. With no zone
    configured it uses the server's local time zone, which decides what
    "today" and the voting hours mean.

    Example:
        >>> from zoneinfo import ZoneInfo
        >>> clock = SystemTimeAuthority(ZoneInfo("Europe/Amsterdam"))
        >>> clock.now().tzinfo
        zoneinfo.ZoneInfo(key='Europe/Amsterdam')
    """

    def __init__(self, tz: tzinfo | None = None) -> None:
        self._tz = tz

    def now(self) -> datetime:
        if self._tz is not None:
            return datetime.now(self._tz)
        return datetime.now().astimezone()

    def utcnow(self) -> datetime:
        return datetime.now(timezone.utc)

    def monotonic(self) -> float:
        return time.monotonic()
