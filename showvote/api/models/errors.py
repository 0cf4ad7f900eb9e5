"""Error response models.

Errors use a flat body the voting client can read directly:
    {"error": "You have already voted today."}
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Generic error body."""

    error: str


class ResultsNotYetAvailableResponse(ErrorResponse):
    """Error body for results requested before the reveal hour."""

    model_config = ConfigDict(populate_by_name=True)

    available_at: datetime = Field(..., alias="availableAt")
