"""Shared test doubles."""

from tests.helpers.fake_time_authority import FakeTimeAuthority
from tests.helpers.interleaving_repositories import (
    InterleavingSelectionRepository,
    InterleavingVoteRepository,
)

__all__ = [
    "FakeTimeAuthority",
    "InterleavingSelectionRepository",
    "InterleavingVoteRepository",
]
