"""Placement canvas — avoidance and placed rects for one placement run.

Besides the nearest-neighbour lookup the engine scores against, the
canvas can rejection-sample a free rect directly inside its bounds
without any partitioning.  The engine uses that only for the leading
trials of the hybrid strategy (``rejection_tries``).
"""

from __future__ import annotations

import random
from typing import Iterable

from viewdistributor.geometry import Rect

from .geometry import find_closest


class PlacementCanvas:
    """Owns copies of the rects a placement run must respect."""

    def __init__(
        self,
        bounds: Rect,
        avoid: Iterable[Rect] = (),
        rng: random.Random | None = None,
    ) -> None:
        self.bounds = bounds
        self.avoid: list[Rect] = list(avoid)
        self.placed: list[Rect] = []
        self._rng = rng or random.Random()

    # ── placed set ─────────────────────────────────────────────────

    def add_rect(self, rect: Rect) -> None:
        self.placed.append(rect)

    def is_clear(self) -> bool:
        """True while nothing has been placed."""
        return not self.placed

    # ── queries ────────────────────────────────────────────────────

    def hits_avoid(self, rect: Rect) -> bool:
        return any(rect.intersects(a) for a in self.avoid)

    def intersects(self, rect: Rect) -> bool:
        """True if *rect* overlaps an avoidance rect or a placed rect."""
        return self.hits_avoid(rect) or any(rect.intersects(p) for p in self.placed)

    def nearest_distance_sq(self, rect: Rect) -> float:
        """Squared distance from *rect* to the nearest placed rect (inf if none)."""
        _, dist_sq = find_closest(rect, self.placed)
        return dist_sq

    # ── rejection sampling ─────────────────────────────────────────

    def random_rect(
        self, width: float, height: float, retries: int = 1,
    ) -> Rect | None:
        """Sample a width x height rect inside the bounds that overlaps nothing.

        The center is drawn uniformly from the bounds inset by the half
        size.  Returns None if the item cannot fit or every attempt hit
        an avoidance or placed rect.
        """
        centers = self.bounds.inset(width / 2, height / 2)
        if centers is None:
            return None
        for _ in range(retries):
            cx = centers.left + self._rng.random() * centers.width
            cy = centers.top + self._rng.random() * centers.height
            rect = Rect.centered_at(cx, cy, width, height)
            if self.bounds.contains(rect) and not self.intersects(rect):
                return rect
        return None

    def __repr__(self) -> str:
        return (f"PlacementCanvas(bounds={self.bounds.as_tuple()}, "
                f"avoid={len(self.avoid)}, placed={len(self.placed)})")
