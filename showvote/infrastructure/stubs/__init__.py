"""In-memory stub implementations of the Show Vote repositories.

Used when no DATABASE_URL is configured, and throughout the unit tests.
"""

from showvote.infrastructure.stubs.daily_selection_repository_stub import (
    DailySelectionRepositoryStub,
)
from showvote.infrastructure.stubs.show_repository_stub import ShowRepositoryStub
from showvote.infrastructure.stubs.vote_repository_stub import VoteRepositoryStub

__all__: list[str] = [
    "DailySelectionRepositoryStub",
    "ShowRepositoryStub",
    "VoteRepositoryStub",
]
