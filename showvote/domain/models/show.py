"""Show catalog domain model.

A show is created once through the admin insert and never changes
afterwards. Daily selections and votes reference shows by id.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID, uuid4

from showvote.domain.errors.catalog import InvalidShowDataError

TITLE_MAX_LENGTH: int = 200
DESCRIPTION_MAX_LENGTH: int = 5_000


@dataclass(frozen=True)
class Show:
    """A TV show in the catalog.

    Attributes:
        id: Unique show identifier.
        title: Display title (required).
        description: Short synopsis (required).
        image_url: Optional poster URL.
        genre: Optional genre label.
    """

    id: UUID
    title: str
    description: str
    image_url: str | None = None
    genre: str | None = None

    @classmethod
    def create(
        cls,
        title: str,
        description: str,
        image_url: str | None = None,
        genre: str | None = None,
        show_id: UUID | None = None,
    ) -> Show:
        """Create a validated show with a fresh id.

        Args:
            title: Display title. Must not be blank.
            description: Synopsis. Must not be blank.
            image_url: Optional poster URL. Blank values become None.
            genre: Optional genre. Blank values become None.
            show_id: Optional explicit id (tests, imports).

        Returns:
            A new Show.

        Raises:
            InvalidShowDataError: If title or description is blank or too long.
        """
        title = (title or "").strip()
        description = (description or "").strip()
        if not title:
            raise InvalidShowDataError("title", "is required")
        if len(title) > TITLE_MAX_LENGTH:
            raise InvalidShowDataError(
                "title", f"must be at most {TITLE_MAX_LENGTH} characters"
            )
        if not description:
            raise InvalidShowDataError("description", "is required")
        if len(description) > DESCRIPTION_MAX_LENGTH:
            raise InvalidShowDataError(
                "description",
                f"must be at most {DESCRIPTION_MAX_LENGTH} characters",
            )

        return cls(
            id=show_id or uuid4(),
            title=title,
            description=description,
            image_url=_blank_to_none(image_url),
            genre=_blank_to_none(genre),
        )


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None
