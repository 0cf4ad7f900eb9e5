"""Domain errors for Show Vote.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from ShowVoteError.
"""

from showvote.domain.errors.catalog import InvalidShowDataError
from showvote.domain.errors.results import (
    NoSelectionTodayError,
    ResultsError,
    ResultsNotYetAvailableError,
)
from showvote.domain.errors.selection import DailySelectionAlreadyExistsError
from showvote.domain.errors.voting import (
    AlreadyVotedError,
    InvalidShowError,
    VotingClosedError,
    VotingError,
)

__all__: list[str] = [
    "AlreadyVotedError",
    "DailySelectionAlreadyExistsError",
    "InvalidShowDataError",
    "InvalidShowError",
    "NoSelectionTodayError",
    "ResultsError",
    "ResultsNotYetAvailableError",
    "VotingClosedError",
    "VotingError",
]
