"""Unit tests for SlateDrawer."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from showvote.domain.services.slate_drawer import SlateDrawer


class TestSlateDrawer:
    def test_draws_slate_size_distinct_items(self) -> None:
        drawer = SlateDrawer(slate_size=10, rng=random.Random(7))
        drawn = drawer.draw(list(range(15)))

        assert len(drawn) == 10
        assert len(set(drawn)) == 10
        assert set(drawn) <= set(range(15))

    def test_small_catalog_returned_whole(self) -> None:
        drawer = SlateDrawer(slate_size=10, rng=random.Random(7))
        assert sorted(drawer.draw(["a", "b", "c"])) == ["a", "b", "c"]

    def test_empty_catalog(self) -> None:
        assert SlateDrawer(slate_size=10).draw([]) == []

    def test_does_not_mutate_catalog(self) -> None:
        catalog = list(range(20))
        SlateDrawer(slate_size=5, rng=random.Random(1)).draw(catalog)
        assert catalog == list(range(20))

    def test_same_seed_same_slate(self) -> None:
        catalog = list(range(30))
        first = SlateDrawer(slate_size=10, rng=random.Random(42)).draw(catalog)
        second = SlateDrawer(slate_size=10, rng=random.Random(42)).draw(catalog)
        assert first == second

    def test_rejects_non_positive_size(self) -> None:
        with pytest.raises(ValueError, match="slate_size must be positive"):
            SlateDrawer(slate_size=0)

    def test_every_show_equally_likely_to_lead(self) -> None:
        """First position is roughly uniform over many draws."""
        drawer = SlateDrawer(slate_size=1, rng=random.Random(2026))
        leads = Counter(drawer.draw(range(5))[0] for _ in range(10_000))

        assert set(leads) == set(range(5))
        for count in leads.values():
            assert 1_700 < count < 2_300
