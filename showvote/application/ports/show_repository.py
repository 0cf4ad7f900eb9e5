"""Show repository port.

Defines the storage contract for the show catalog. The catalog only grows:
shows are inserted by the admin endpoint and never updated or deleted.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol
from uuid import UUID

from showvote.domain.models.show import Show


class ShowRepositoryProtocol(Protocol):
    """Protocol for show catalog persistence.

    Methods:
        add: Store a new show
        get: Retrieve one show by id
        get_many: Retrieve several shows by id
        list_all: Return the whole catalog
    """

    async def add(self, show: Show) -> None:
        """Store a new show.

        Args:
            show: The show to store.

        Raises:
            ValueError: If a show with the same id already exists.
        """
        ...

    async def get(self, show_id: UUID) -> Show | None:
        """Retrieve a show by id, or None when unknown."""
        ...

    async def get_many(self, show_ids: Iterable[UUID]) -> dict[UUID, Show]:
        """Retrieve shows by id.

        Unknown ids are simply absent from the returned mapping.
        """
        ...

    async def list_all(self) -> list[Show]:
        """Return every show in the catalog."""
        ...
