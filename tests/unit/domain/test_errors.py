"""Unit tests for Show Vote domain errors.

Messages are shown to viewers verbatim, so they are pinned here.
"""

from __future__ import annotations

from datetime import date, datetime, timezone

from showvote.domain.errors import (
    AlreadyVotedError,
    DailySelectionAlreadyExistsError,
    InvalidShowError,
    NoSelectionTodayError,
    ResultsNotYetAvailableError,
    VotingClosedError,
)
from showvote.domain.exceptions import ShowVoteError


class TestVotingErrors:
    def test_voting_closed_message(self) -> None:
        error = VotingClosedError()
        assert str(error) == "Voting is closed. Voting is open from 6am to 6pm."

    def test_voting_closed_message_follows_schedule(self) -> None:
        error = VotingClosedError(opens_at_hour=8, closes_at_hour=20)
        assert str(error) == "Voting is closed. Voting is open from 8am to 8pm."

    def test_already_voted(self) -> None:
        error = AlreadyVotedError("abc")
        assert str(error) == "You have already voted today."
        assert error.user_id == "abc"

    def test_invalid_show(self) -> None:
        error = InvalidShowError("nope")
        assert str(error) == "Invalid show selection."
        assert error.show_id == "nope"


class TestResultsErrors:
    def test_not_yet_available_carries_reveal_time(self) -> None:
        available_at = datetime(2026, 3, 2, 19, 0, tzinfo=timezone.utc)
        error = ResultsNotYetAvailableError(available_at)

        assert error.available_at == available_at
        assert str(error) == "Results will be available at 7pm."

    def test_no_selection_today(self) -> None:
        error = NoSelectionTodayError(date(2026, 3, 2))
        assert str(error) == "No shows were selected today."


class TestHierarchy:
    def test_all_errors_share_base(self) -> None:
        for error_type in (
            AlreadyVotedError,
            DailySelectionAlreadyExistsError,
            InvalidShowError,
            NoSelectionTodayError,
            ResultsNotYetAvailableError,
            VotingClosedError,
        ):
            assert issubclass(error_type, ShowVoteError)
