"""Show API request/response models.

JSON field names follow the voting client (camelCase): imageUrl, showId.

Developer Golden Rules:
1. VALIDATE EARLY - Pydantic handles schema validation
2. DOMAIN DECIDES - Blank-after-trim checks live in Show.create()
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from showvote.domain.models.show import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    Show,
)


class ShowResponse(BaseModel):
    """A show as returned by the API.

    Attributes:
        id: Show identifier.
        title: Display title.
        description: Synopsis.
        image_url: Poster URL (JSON: imageUrl).
        genre: Genre label.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    title: str
    description: str
    image_url: str | None = Field(default=None, alias="imageUrl")
    genre: str | None = None

    @classmethod
    def from_domain(cls, show: Show) -> ShowResponse:
        return cls(
            id=show.id,
            title=show.title,
            description=show.description,
            image_url=show.image_url,
            genre=show.genre,
        )


class AddShowRequest(BaseModel):
    """Admin request to add a show to the catalog."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str = Field(..., min_length=1, max_length=DESCRIPTION_MAX_LENGTH)
    image_url: str | None = Field(default=None, alias="imageUrl", max_length=2_048)
    genre: str | None = Field(default=None, max_length=100)
