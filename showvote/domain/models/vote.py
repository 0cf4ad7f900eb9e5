"""Vote domain model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True)
class Vote:
    """A single ballot cast by an anonymous viewer.

    The calendar day is derived from the timestamp and stored next to it so
    storage can enforce one vote per (user_id, day).

    Attributes:
        id: Unique vote identifier.
        show_id: The show voted for. Must be on that day's slate.
        user_id: Opaque anonymous voter identifier.
        timestamp: When the vote was cast (timezone-aware).
        day: Calendar day of the vote in the service time zone.
    """

    show_id: UUID
    user_id: str
    timestamp: datetime
    id: UUID = field(default_factory=uuid4)
    day: date = field(init=False)

    def __post_init__(self) -> None:
        if not self.user_id:
            raise ValueError("user_id must not be empty")
        if self.timestamp.tzinfo is None:
            raise ValueError("timestamp must be timezone-aware")
        object.__setattr__(self, "day", self.timestamp.date())
