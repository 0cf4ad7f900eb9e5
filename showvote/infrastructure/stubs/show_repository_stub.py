"""Show repository stub implementation.

In-memory implementation of ShowRepositoryProtocol for development and
testing. It is NOT suitable for production use.
"""

from __future__ import annotations

from collections.abc import Iterable
from uuid import UUID

from showvote.application.ports.show_repository import ShowRepositoryProtocol
from showvote.domain.models.show import Show


class ShowRepositoryStub(ShowRepositoryProtocol):
    """In-memory show catalog.

    Insertion order is preserved so list_all() is deterministic.

    Attributes:
        _shows: Dictionary mapping show.id to Show.
    """

    def __init__(self, shows: Iterable[Show] = ()) -> None:
        self._shows: dict[UUID, Show] = {}
        for show in shows:
            self._shows[show.id] = show

    async def add(self, show: Show) -> None:
        if show.id in self._shows:
            raise ValueError(f"Show already exists: {show.id}")
        self._shows[show.id] = show

    async def get(self, show_id: UUID) -> Show | None:
        return self._shows.get(show_id)

    async def get_many(self, show_ids: Iterable[UUID]) -> dict[UUID, Show]:
        return {i: self._shows[i] for i in show_ids if i in self._shows}

    async def list_all(self) -> list[Show]:
        return list(self._shows.values())

    # Test helpers

    def clear(self) -> None:
        self._shows.clear()

    def __len__(self) -> int:
        return len(self._shows)
