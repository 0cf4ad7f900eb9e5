"""Unit tests for the Vote domain model."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from uuid import uuid4

import pytest

from showvote.domain.models.vote import Vote


class TestVote:
    def test_day_derived_from_timestamp(self) -> None:
        vote = Vote(
            show_id=uuid4(),
            user_id="abc",
            timestamp=datetime(2026, 3, 2, 10, 0, tzinfo=timezone.utc),
        )
        assert vote.day == date(2026, 3, 2)

    def test_day_follows_timestamp_zone(self) -> None:
        # 23:30 UTC on the 2nd is already the 3rd at UTC+2
        moment = datetime(2026, 3, 2, 23, 30, tzinfo=timezone.utc)
        local = moment.astimezone(timezone(timedelta(hours=2)))

        assert Vote(show_id=uuid4(), user_id="abc", timestamp=local).day == date(2026, 3, 3)

    def test_day_cannot_be_passed_in(self) -> None:
        with pytest.raises(TypeError):
            Vote(  # type: ignore[call-arg]
                show_id=uuid4(),
                user_id="abc",
                timestamp=datetime(2026, 3, 2, 10, 0, tzinfo=timezone.utc),
                day=date(2026, 1, 1),
            )

    def test_each_vote_gets_an_id(self) -> None:
        now = datetime(2026, 3, 2, 10, 0, tzinfo=timezone.utc)
        first = Vote(show_id=uuid4(), user_id="abc", timestamp=now)
        second = Vote(show_id=uuid4(), user_id="abc", timestamp=now)
        assert first.id != second.id

    def test_rejects_empty_user(self) -> None:
        with pytest.raises(ValueError, match="user_id"):
            Vote(
                show_id=uuid4(),
                user_id="",
                timestamp=datetime(2026, 3, 2, 10, 0, tzinfo=timezone.utc),
            )

    def test_rejects_naive_timestamp(self) -> None:
        with pytest.raises(ValueError, match="timezone-aware"):
            Vote(show_id=uuid4(), user_id="abc", timestamp=datetime(2026, 3, 2, 10, 0))
