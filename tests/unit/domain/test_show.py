"""Unit tests for the Show domain model."""

from __future__ import annotations

from uuid import UUID

import pytest

from showvote.domain.errors.catalog import InvalidShowDataError
from showvote.domain.models.show import TITLE_MAX_LENGTH, Show


class TestShowCreate:
    """Tests for Show.create() validation."""

    def test_creates_show_with_fresh_id(self) -> None:
        show = Show.create(title="Night Shift", description="Hospital drama")

        assert isinstance(show.id, UUID)
        assert show.title == "Night Shift"
        assert show.description == "Hospital drama"
        assert show.image_url is None
        assert show.genre is None

    def test_two_shows_get_different_ids(self) -> None:
        first = Show.create(title="A", description="a")
        second = Show.create(title="A", description="a")
        assert first.id != second.id

    def test_strips_whitespace(self) -> None:
        show = Show.create(title="  Night Shift ", description=" Drama\n", genre=" Drama ")
        assert show.title == "Night Shift"
        assert show.description == "Drama"
        assert show.genre == "Drama"

    def test_blank_optionals_become_none(self) -> None:
        show = Show.create(title="A", description="a", image_url="  ", genre="")
        assert show.image_url is None
        assert show.genre is None

    def test_keeps_explicit_id(self) -> None:
        show_id = UUID("12345678-1234-5678-1234-567812345678")
        assert Show.create(title="A", description="a", show_id=show_id).id == show_id

    @pytest.mark.parametrize("title", ["", "   "])
    def test_rejects_blank_title(self, title: str) -> None:
        with pytest.raises(InvalidShowDataError) as exc_info:
            Show.create(title=title, description="a")
        assert exc_info.value.field == "title"

    def test_rejects_blank_description(self) -> None:
        with pytest.raises(InvalidShowDataError) as exc_info:
            Show.create(title="A", description=" ")
        assert exc_info.value.field == "description"
        assert "description: is required" == str(exc_info.value)

    def test_rejects_overlong_title(self) -> None:
        with pytest.raises(InvalidShowDataError, match="at most"):
            Show.create(title="x" * (TITLE_MAX_LENGTH + 1), description="a")

    def test_show_is_immutable(self) -> None:
        show = Show.create(title="A", description="a")
        with pytest.raises(AttributeError):
            show.title = "B"  # type: ignore[misc]
