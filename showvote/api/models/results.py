"""Results API response models."""

from __future__ import annotations

from pydantic import BaseModel

from showvote.api.models.show import ShowResponse
from showvote.domain.models.show_result import ShowResult


class ShowResultResponse(BaseModel):
    """One row of the ranking."""

    show: ShowResponse
    votes: int

    @classmethod
    def from_domain(cls, result: ShowResult) -> ShowResultResponse:
        return cls(show=ShowResponse.from_domain(result.show), votes=result.votes)
