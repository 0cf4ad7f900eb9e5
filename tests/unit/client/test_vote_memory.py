"""Tests for the local vote memory."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

from showvote.client.vote_memory import RememberedVote, VoteMemory


class TestVoteMemory:
    def test_nothing_remembered_initially(self, tmp_path: Path) -> None:
        assert VoteMemory(tmp_path / "votes.json").recall(date(2026, 3, 2)) is None

    def test_remember_and_recall(self, tmp_path: Path) -> None:
        memory = VoteMemory(tmp_path / "state" / "votes.json")
        memory.remember(date(2026, 3, 2), "show-1", "Night Shift")

        assert memory.recall(date(2026, 3, 2)) == RememberedVote("show-1", "Night Shift")

    def test_yesterdays_vote_does_not_count_today(self, tmp_path: Path) -> None:
        memory = VoteMemory(tmp_path / "votes.json")
        memory.remember(date(2026, 3, 1), "show-1", "Night Shift")

        assert memory.recall(date(2026, 3, 2)) is None

    def test_old_days_pruned_on_write(self, tmp_path: Path) -> None:
        path = tmp_path / "votes.json"
        memory = VoteMemory(path)
        memory.remember(date(2026, 3, 1), "show-1", "Old")
        memory.remember(date(2026, 3, 2), "show-2", "New")

        assert list(json.loads(path.read_text())) == ["2026-03-02"]

    def test_corrupt_file_treated_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "votes.json"
        path.write_text("{not json")

        assert VoteMemory(path).recall(date(2026, 3, 2)) is None
