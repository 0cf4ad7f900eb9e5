"""Random slate drawing.

The catalog is shuffled with a Fisher-Yates shuffle (random.Random.shuffle)
and the head of the shuffled list becomes the day's slate. Every ordering
of the catalog is equally likely, so every show has the same chance of
making the slate and of landing in any position.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


class SlateDrawer:
    """Draws a fixed-size random subset of the catalog.

    Attributes:
        slate_size: Maximum number of shows on a slate.
    """

    def __init__(self, slate_size: int, rng: random.Random | None = None) -> None:
        if slate_size < 1:
            raise ValueError(f"slate_size must be positive, got {slate_size}")
        self.slate_size = slate_size
        self._rng = rng or random.SystemRandom()

    def draw(self, catalog: Sequence[T]) -> list[T]:
        """Return up to slate_size items in uniformly random order.

        A catalog smaller than the slate is returned whole (shuffled),
        never padded.
        """
        pool = list(catalog)
        self._rng.shuffle(pool)
        return pool[: self.slate_size]
