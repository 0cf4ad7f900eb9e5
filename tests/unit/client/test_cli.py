"""Tests for the showvote CLI.

The API client is replaced with an AsyncMock and the local clock is pinned,
so the commands run without a server.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, datetime
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from showvote.client.api_client import ShowVoteClientError
from showvote.client.cli import app
from showvote.client.vote_memory import VoteMemory

runner = CliRunner()

TODAY = date(2026, 3, 2)
SHOWS = [
    {"id": "show-1", "title": "Night Shift", "description": "Hospital drama", "imageUrl": None, "genre": "Drama"},
    {"id": "show-2", "title": "Quiz Time", "description": "Trivia", "imageUrl": None, "genre": None},
]


def local(hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 3, 2, hour, minute).astimezone()


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("SHOWVOTE_HOME", str(tmp_path))
    for name in ("SHOWVOTE_OPEN_HOUR", "SHOWVOTE_CLOSE_HOUR", "SHOWVOTE_REVEAL_HOUR"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def api() -> Iterator[AsyncMock]:
    client = AsyncMock()
    client.__aenter__.return_value = client
    client.__aexit__.return_value = None
    client.get_daily_shows.return_value = SHOWS
    with patch("showvote.client.cli.ShowVoteClient", MagicMock(return_value=client)):
        yield client


def clock_at(hour: int, minute: int = 0):
    return patch("showvote.client.cli._now", return_value=local(hour, minute))


class TestCLIVersion:
    def test_version_flag(self, project_version: str) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"showvote version {project_version}" in result.stdout


class TestSlate:
    def test_shows_status_and_slate(self, home: Path, api: AsyncMock) -> None:
        with clock_at(10):
            result = runner.invoke(app, ["slate"])

        assert result.exit_code == 0
        assert "Voting is OPEN" in result.stdout
        assert "Results in: 9h 0m" in result.stdout
        assert "Night Shift" in result.stdout
        assert "Quiz Time" in result.stdout

    def test_closed_status_in_the_evening(self, home: Path, api: AsyncMock) -> None:
        with clock_at(18, 30):
            result = runner.invoke(app, ["slate"])

        assert "Voting is CLOSED" in result.stdout
        assert "Results in: 0h 30m" in result.stdout

    def test_thank_you_after_voting(self, home: Path, api: AsyncMock) -> None:
        VoteMemory(home / "votes.json").remember(TODAY, "show-1", "Night Shift")

        with clock_at(12):
            result = runner.invoke(app, ["slate"])

        assert result.exit_code == 0
        assert "Thank you for voting!" in result.stdout
        assert "You voted for: Night Shift" in result.stdout

    def test_server_error_exits_with_code_1(self, home: Path, api: AsyncMock) -> None:
        api.get_daily_shows.side_effect = ShowVoteClientError("boom", 500, {"error": "boom"})

        with clock_at(10):
            result = runner.invoke(app, ["slate"])

        assert result.exit_code == 1
        assert "Error: boom" in result.stdout


class TestVote:
    def test_vote_recorded_and_remembered(self, home: Path, api: AsyncMock) -> None:
        api.vote.return_value = {"message": "Vote recorded successfully."}

        with clock_at(10):
            result = runner.invoke(app, ["vote", "show-2"])

        assert result.exit_code == 0
        api.vote.assert_awaited_once_with("show-2")
        assert "You voted for: Quiz Time" in result.stdout
        assert "Results will be available at 7pm." in result.stdout
        assert VoteMemory(home / "votes.json").recall(TODAY).show_id == "show-2"

    def test_closed_window_checked_locally(self, home: Path, api: AsyncMock) -> None:
        with clock_at(18, 30):
            result = runner.invoke(app, ["vote", "show-1"])

        assert result.exit_code == 1
        assert "Voting is closed." in result.stdout
        api.vote.assert_not_awaited()

    def test_remembered_vote_blocks_second_vote(self, home: Path, api: AsyncMock) -> None:
        VoteMemory(home / "votes.json").remember(TODAY, "show-1", "Night Shift")

        with clock_at(11):
            result = runner.invoke(app, ["vote", "show-2"])

        assert result.exit_code == 1
        assert "You have already voted today." in result.stdout
        api.vote.assert_not_awaited()

    def test_server_rejection_not_remembered(self, home: Path, api: AsyncMock) -> None:
        api.vote.side_effect = ShowVoteClientError(
            "Invalid show selection.", 400, {"error": "Invalid show selection."}
        )

        with clock_at(10):
            result = runner.invoke(app, ["vote", "nope"])

        assert result.exit_code == 1
        assert "Invalid show selection." in result.stdout
        assert VoteMemory(home / "votes.json").recall(TODAY) is None

    def test_configured_hours_extend_the_window(
        self, home: Path, api: AsyncMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SHOWVOTE_CLOSE_HOUR", "20")
        monkeypatch.setenv("SHOWVOTE_REVEAL_HOUR", "21")
        api.vote.return_value = {"message": "Vote recorded successfully."}

        with clock_at(19, 30):
            result = runner.invoke(app, ["vote", "show-1"])

        assert result.exit_code == 0
        api.vote.assert_awaited_once_with("show-1")
        assert "Results will be available at 9pm." in result.stdout

    def test_closed_message_uses_configured_hours(
        self, home: Path, api: AsyncMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SHOWVOTE_OPEN_HOUR", "8")

        with clock_at(7):
            result = runner.invoke(app, ["vote", "show-1"])

        assert result.exit_code == 1
        assert "Voting is open from 8am to 6pm." in result.stdout
        api.vote.assert_not_awaited()

    def test_invalid_configured_hours_exit_with_code_1(
        self, home: Path, api: AsyncMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SHOWVOTE_CLOSE_HOUR", "5")

        with clock_at(10):
            result = runner.invoke(app, ["vote", "show-1"])

        assert result.exit_code == 1
        assert "Invalid voting hours" in result.stdout
        api.vote.assert_not_awaited()


class TestResults:
    def test_ranking_with_percentages(self, home: Path, api: AsyncMock) -> None:
        api.get_results.return_value = [
            {"show": SHOWS[0], "votes": 2},
            {"show": SHOWS[1], "votes": 1},
        ]

        result = runner.invoke(app, ["results"])

        assert result.exit_code == 0
        assert "Total votes: 3" in result.stdout
        assert "2 votes" in result.stdout
        assert "1 vote" in result.stdout
        assert "67%" in result.stdout
        assert "33%" in result.stdout

    def test_no_votes_message(self, home: Path, api: AsyncMock) -> None:
        api.get_results.return_value = []

        result = runner.invoke(app, ["results"])

        assert result.exit_code == 0
        assert "No votes have been recorded today." in result.stdout

    def test_not_yet_available(self, home: Path, api: AsyncMock) -> None:
        api.get_results.side_effect = ShowVoteClientError(
            "Results will be available at 7pm.",
            403,
            {"error": "Results will be available at 7pm.", "availableAt": "2026-03-02T19:00:00"},
        )

        result = runner.invoke(app, ["results"])

        assert result.exit_code == 1
        assert "Results will be available at 7pm." in result.stdout
        assert "Available at: 2026-03-02T19:00:00" in result.stdout


class TestWatch:
    def test_single_refresh_after_reveal_shows_results(
        self, home: Path, api: AsyncMock
    ) -> None:
        api.get_results.return_value = [{"show": SHOWS[0], "votes": 4}]

        with clock_at(20):
            result = runner.invoke(app, ["watch", "--iterations", "1"])

        assert result.exit_code == 0
        assert "Total votes: 4" in result.stdout
        api.get_daily_shows.assert_not_awaited()

    def test_refreshes_until_iterations_reached(self, home: Path, api: AsyncMock) -> None:
        with clock_at(10), patch("showvote.client.cli.time.sleep") as sleep:
            result = runner.invoke(app, ["watch", "--iterations", "3", "--interval", "60"])

        assert result.exit_code == 0
        assert api.get_daily_shows.await_count == 3
        assert sleep.call_count == 2
        sleep.assert_called_with(60.0)

    def test_errors_do_not_stop_watching(self, home: Path, api: AsyncMock) -> None:
        api.get_daily_shows.side_effect = ShowVoteClientError("down", 503)

        with clock_at(10), patch("showvote.client.cli.time.sleep"):
            result = runner.invoke(app, ["watch", "--iterations", "2"])

        assert result.exit_code == 0
        assert result.stdout.count("Error: down") == 2


class TestAddShow:
    def test_adds_show(self, home: Path, api: AsyncMock) -> None:
        api.add_show.return_value = {"id": "new-id", "title": "Night Shift"}

        result = runner.invoke(
            app,
            ["add-show", "--title", "Night Shift", "--description", "Hospital drama", "--genre", "Drama"],
        )

        assert result.exit_code == 0
        assert "Added Night Shift (new-id)" in result.stdout
        api.add_show.assert_awaited_once_with(
            "Night Shift", "Hospital drama", image_url=None, genre="Drama"
        )
