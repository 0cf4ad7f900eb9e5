"""Daily selection domain model.

One selection exists per calendar day. It is materialized lazily on the
first request of the day and never changes afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID, uuid4

DEFAULT_SLATE_SIZE: int = 10


@dataclass(frozen=True)
class DailySelection:
    """The slate of shows drawn for one calendar day.

    Attributes:
        id: Unique selection identifier.
        day: Calendar day this slate belongs to (unique).
        show_ids: Ordered show references, in the order they were drawn.
    """

    id: UUID
    day: date
    show_ids: tuple[UUID, ...]

    def __post_init__(self) -> None:
        if len(set(self.show_ids)) != len(self.show_ids):
            raise ValueError(f"Daily selection for {self.day} repeats a show")

    @classmethod
    def create(cls, day: date, show_ids: list[UUID] | tuple[UUID, ...]) -> DailySelection:
        return cls(id=uuid4(), day=day, show_ids=tuple(show_ids))

    def contains(self, show_id: UUID) -> bool:
        return show_id in self.show_ids

    def __len__(self) -> int:
        return len(self.show_ids)
