"""Vote API request/response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class VoteRequest(BaseModel):
    """Ballot submitted by a viewer.

    Attributes:
        show_id: Id of the chosen show (JSON: showId). Any JSON value is
            accepted; one that names no show on today's slate, including a
            missing or non-string id, is an invalid show selection.
    """

    model_config = ConfigDict(populate_by_name=True)

    show_id: Any = Field(None, alias="showId")


class VoteResponse(BaseModel):
    """Confirmation of a recorded vote."""

    message: str = "Vote recorded successfully."
