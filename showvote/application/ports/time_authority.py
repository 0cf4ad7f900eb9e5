"""Clock port.

Services never call datetime.now() themselves. Whether a vote is accepted,
which slate is "today's" and when results unlock all follow from this one
injected clock, which production wires to the configured voting time zone
and tests replace with FakeTimeAuthority.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    @abstractmethod
    def now(self) -> datetime:
        """Aware datetime in the service zone; its date and hour drive the voting day."""
        ...

    @abstractmethod
    def utcnow(self) -> datetime:
        """Same instant in UTC, used for token issue and expiry times."""
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Seconds from an arbitrary origin, for timing operations."""
        ...
