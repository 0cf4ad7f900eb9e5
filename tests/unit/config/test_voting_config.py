"""Unit tests for VotingScheduleConfig."""

from __future__ import annotations

from zoneinfo import ZoneInfo

import pytest

from showvote.config.voting_config import VotingScheduleConfig
from showvote.domain.models.voting_window import VotingSchedule


class TestVotingScheduleConfig:
    def test_defaults(self) -> None:
        config = VotingScheduleConfig()

        assert config.to_schedule() == VotingSchedule(6, 18, 19)
        assert config.slate_size == 10
        assert config.tzinfo() is None

    def test_from_environment_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in (
            "VOTING_OPEN_HOUR",
            "VOTING_CLOSE_HOUR",
            "RESULTS_REVEAL_HOUR",
            "DAILY_SLATE_SIZE",
            "VOTING_TIMEZONE",
        ):
            monkeypatch.delenv(key, raising=False)

        assert VotingScheduleConfig.from_environment() == VotingScheduleConfig()

    def test_from_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VOTING_OPEN_HOUR", "8")
        monkeypatch.setenv("VOTING_CLOSE_HOUR", "20")
        monkeypatch.setenv("RESULTS_REVEAL_HOUR", "21")
        monkeypatch.setenv("DAILY_SLATE_SIZE", "5")
        monkeypatch.setenv("VOTING_TIMEZONE", "Europe/Amsterdam")

        config = VotingScheduleConfig.from_environment()

        assert config.to_schedule() == VotingSchedule(8, 20, 21)
        assert config.slate_size == 5
        assert config.tzinfo() == ZoneInfo("Europe/Amsterdam")

    def test_unparseable_value_falls_back_to_default(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DAILY_SLATE_SIZE", "ten")
        assert VotingScheduleConfig.from_environment().slate_size == 10

    def test_rejects_inverted_window(self) -> None:
        with pytest.raises(ValueError, match="open_hour < close_hour"):
            VotingScheduleConfig(open_hour=18, close_hour=6)

    @pytest.mark.parametrize("size", [0, 101])
    def test_rejects_slate_size_out_of_range(self, size: int) -> None:
        with pytest.raises(ValueError, match="slate_size"):
            VotingScheduleConfig(slate_size=size)

    def test_rejects_unknown_timezone(self) -> None:
        with pytest.raises(ValueError, match="Unknown timezone"):
            VotingScheduleConfig(timezone="Mars/Olympus_Mons")
