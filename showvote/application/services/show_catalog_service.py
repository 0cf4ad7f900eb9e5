"""Show catalog service.

Administrative insert into the catalog. The endpoint that calls this is
unauthenticated; protecting it is outside this service.
"""

from __future__ import annotations

from showvote.application.ports.show_repository import ShowRepositoryProtocol
from showvote.application.services.base import LoggingMixin
from showvote.domain.models.show import Show


class ShowCatalogService(LoggingMixin):
    """Adds shows to and reads the catalog."""

    def __init__(self, repository: ShowRepositoryProtocol) -> None:
        self._repository = repository
        self._init_logger(component="catalog")

    async def add_show(
        self,
        title: str,
        description: str,
        image_url: str | None = None,
        genre: str | None = None,
    ) -> Show:
        """Validate and store a new show.

        Raises:
            InvalidShowDataError: If title or description is missing.
        """
        log = self._log_operation("add_show", title=title, genre=genre)
        show = Show.create(
            title=title,
            description=description,
            image_url=image_url,
            genre=genre,
        )
        await self._repository.add(show)
        log.info("show_added", show_id=str(show.id))
        return show

    async def list_shows(self) -> list[Show]:
        return await self._repository.list_all()
