"""Host-facing distributor with a fluent configuration surface.

A UI layer typically builds one of these per container::

    distributor = (
        ViewDistributor((0, 0, 1080, 1920))
        .min_angle(-15)
        .max_angle(15)
        .avoid(logo_bounds)
        .bound_padding(0.9)
        .avoid_padding(1.2)
    )
    result = distributor.distribute([(w, h) for w, h in child_sizes])

Every setter swaps in a new validated ``DistributorConfig``; nothing is
kept between distribute calls besides that config.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable

from viewdistributor.config import DistributorConfig, RotationMode
from viewdistributor.geometry import Rect, to_rect
from viewdistributor.placer import Distribution, candidate_regions, distribute


class ViewDistributor:
    """Fluent wrapper around ``DistributorConfig`` and ``distribute``."""

    def __init__(self, bounds: Any, **options: Any) -> None:
        self.config = DistributorConfig(draw_region=bounds, **options)

    @staticmethod
    def view_to_region(view: Any) -> Rect:
        """Bounding box of a UI element (or any rect-like) as a Rect."""
        return to_rect(view)

    # ── configuration ──────────────────────────────────────────────

    def configure(self, **changes: Any) -> ViewDistributor:
        """Replace any config fields; raises ConfigurationError on bad values."""
        self.config = replace(self.config, **changes)
        return self

    def resize(self, width: float, height: float) -> ViewDistributor:
        """Host size change: the draw region becomes (0, 0, width, height)."""
        return self.configure(draw_region=(0, 0, width, height))

    def avoid(self, *rect_likes: Any) -> ViewDistributor:
        """Add avoidance rects.  None entries are ignored."""
        added = tuple(r for r in rect_likes if r is not None)
        return self.configure(avoid=self.config.avoid + added)

    def set_avoid(self, rect_likes: Iterable[Any]) -> ViewDistributor:
        """Replace the whole avoidance set."""
        return self.configure(avoid=tuple(rect_likes))

    def clear_avoid(self) -> ViewDistributor:
        return self.configure(avoid=())

    def avoid_padding(self, factor: float) -> ViewDistributor:
        return self.configure(avoid_padding=factor)

    def bound_padding(self, factor: float) -> ViewDistributor:
        return self.configure(bound_padding=factor)

    def min_angle(self, angle: float) -> ViewDistributor:
        """Set the lower angle, raising the upper one to match if needed."""
        return self.configure(min_angle=angle,
                              max_angle=max(angle, self.config.max_angle))

    def max_angle(self, angle: float) -> ViewDistributor:
        """Set the upper angle, lowering the lower one to match if needed."""
        return self.configure(max_angle=angle,
                              min_angle=min(angle, self.config.min_angle))

    def angle_range(self, min_angle: float, max_angle: float) -> ViewDistributor:
        """Set both angles at once; raises ConfigurationError if min > max."""
        return self.configure(min_angle=min_angle, max_angle=max_angle)

    def rotation_mode(self, mode: RotationMode | str) -> ViewDistributor:
        return self.configure(rotation_mode=mode)

    def max_retries(self, retries: int) -> ViewDistributor:
        return self.configure(max_retries=retries)

    def seed(self, seed: int | None) -> ViewDistributor:
        return self.configure(seed=seed)

    # ── placement ──────────────────────────────────────────────────

    def candidate_regions(self) -> list[Rect]:
        return candidate_regions(self.config)

    def distribute(self, sizes: Iterable[tuple[float, float]]) -> Distribution:
        return distribute(sizes, self.config)

    def shuffle(self, sizes: Iterable[tuple[float, float]]) -> Distribution:
        """Distribute with fresh entropy, ignoring any configured seed."""
        return distribute(sizes, replace(self.config, seed=None))
