"""Main placement engine — best-candidate (blue-noise) sampling.

Algorithm overview:
  1. Partition the padded draw region around the padded avoidance rects.
  2. For each item, in caller order:
       - the first item placed takes one random center from a random region;
       - later items draw up to ``max_retries`` random centers and keep
         the one whose rect lies farthest from its nearest placed item.
  3. Commit the winner (rect + rotation) and make it visible to every
     later item.  Items that find no valid center are reported as
     failures and the batch carries on.

Centers are sampled per item size from regions whose avoidance rects
are grown by the item's half-size (see ``placement_regions``), so a
sampled item never overlaps avoidance.  Overlap with placed items scores
0 and is never committed.
"""

from __future__ import annotations

import logging
import math
import random
import time
from typing import Iterable

from viewdistributor.config import ConfigurationError, DistributorConfig
from viewdistributor.geometry import Rect

from .canvas import PlacementCanvas
from .models import (
    Distribution, FailureReason, Outcome, PlacedItem, PlacementFailure,
)
from .regions import candidate_regions, placement_regions
from .rotation import assign_rotation


log = logging.getLogger(__name__)

Size = tuple[float, float]


# ── Sampling helpers ───────────────────────────────────────────────


def _sample_center(rng: random.Random, regions: list[Rect]) -> tuple[float, float]:
    """Uniform region, then a uniform point inside it."""
    region = regions[rng.randrange(len(regions))]
    x = region.left + rng.random() * region.width
    y = region.top + rng.random() * region.height
    return x, y


class _RegionCache:
    """Per-call placement regions, computed on first use for each size."""

    def __init__(self, config: DistributorConfig) -> None:
        self._config = config
        self._by_size: dict[Size, list[Rect]] = {}

    def get(self, width: float, height: float) -> list[Rect]:
        key = (width, height)
        if key not in self._by_size:
            self._by_size[key] = placement_regions(self._config, width, height)
            log.debug("Placement regions for %gx%g: %d",
                      width, height, len(self._by_size[key]))
        return self._by_size[key]


# ── Per-item placement ─────────────────────────────────────────────


def best_candidate(
    width: float,
    height: float,
    canvas: PlacementCanvas,
    regions: _RegionCache,
    config: DistributorConfig,
    rng: random.Random,
    deadline: float | None = None,
) -> tuple[Rect | None, float, FailureReason | None]:
    """Pick the best of up to ``max_retries`` candidate rects.

    Returns (rect, nearest_distance_sq, None) on success and
    (None, 0.0, reason) on failure.  The first item on an empty canvas
    stops at its first valid trial.
    """
    first = canvas.is_clear()
    trials = config.rejection_tries + 1 if first else config.max_retries

    best: Rect | None = None
    best_sq = 0.0
    timed_out = False

    for trial in range(trials):
        if deadline is not None and trial > 0 and time.monotonic() >= deadline:
            timed_out = True
            break

        if trial < config.rejection_tries:
            candidate = canvas.random_rect(width, height)
            if candidate is None:
                continue
        else:
            cells = regions.get(width, height)
            if not cells:
                if config.rejection_tries == 0:
                    return None, 0.0, FailureReason.NO_REGION
                continue
            cx, cy = _sample_center(rng, cells)
            candidate = Rect.centered_at(cx, cy, width, height)
            # Rounding at a cell edge can push the rect an ulp into avoidance.
            if canvas.hits_avoid(candidate) or not canvas.bounds.contains(candidate):
                continue

        if first:
            return candidate, math.inf, None

        # Touching or overlapping a placed item scores 0 and never wins.
        dist_sq = canvas.nearest_distance_sq(candidate)
        if dist_sq > best_sq:
            best = candidate
            best_sq = dist_sq

    if best is not None:
        return best, best_sq, None
    if timed_out:
        return None, 0.0, FailureReason.TIME_BUDGET
    if not regions.get(width, height):
        return None, 0.0, FailureReason.NO_REGION
    return None, 0.0, FailureReason.RETRIES_EXHAUSTED


# ── Main entry point ───────────────────────────────────────────────


def distribute(
    sizes: Iterable[Size],
    config: DistributorConfig,
) -> Distribution:
    """Place items of the given (width, height) sizes.

    Parameters
    ----------
    sizes : iterable of (width, height)
        Items in placement order.  Earlier items constrain later ones,
        so reordering changes the result.
    config : DistributorConfig
        Draw region, avoidance set, sampling and rotation parameters.

    Returns
    -------
    Distribution
        One outcome per item: a ``PlacedItem`` or a ``PlacementFailure``.
        Nothing is raised for items that do not fit.

    Raises
    ------
    ConfigurationError
        If an item size is negative.
    """
    sizes = [(float(w), float(h)) for w, h in sizes]
    for index, (w, h) in enumerate(sizes):
        if w < 0 or h < 0:
            raise ConfigurationError(f"Item {index} has negative size {w:g}x{h:g}")
    rng = random.Random(config.seed)
    deadline = (
        time.monotonic() + config.time_budget_s
        if config.time_budget_s is not None else None
    )

    free = candidate_regions(config)
    log.info("Distributor: starting, %d items, %d avoid rects, %d candidate regions, "
             "retries=%d, seed=%s",
             len(sizes), len(config.avoid), len(free),
             config.max_retries, config.seed)
    if not free:
        log.warning("Distributor: avoidance covers the whole draw region, "
                    "all %d items fail", len(sizes))
        return Distribution(
            outcomes=[
                PlacementFailure(i, w, h, FailureReason.NO_REGION)
                for i, (w, h) in enumerate(sizes)
            ],
            regions=free,
        )

    canvas = PlacementCanvas(config.padded_draw_region, config.padded_avoid, rng)
    regions = _RegionCache(config)
    outcomes: list[Outcome] = []

    for index, (width, height) in enumerate(sizes):
        rect, dist_sq, reason = best_candidate(
            width, height, canvas, regions, config, rng, deadline,
        )
        if rect is None:
            failure = PlacementFailure(index, width, height, reason)
            log.warning("%s", failure)
            outcomes.append(failure)
            continue

        canvas.add_rect(rect)
        rotation = assign_rotation(config, rng, rect.left)
        clearance = math.sqrt(dist_sq) if math.isfinite(dist_sq) else None
        outcomes.append(PlacedItem(index, rect, rotation, clearance))
        log.info("Placed item %d (%gx%g) at (%.1f, %.1f) rot=%.1f° clearance=%s",
                 index, width, height, rect.left, rect.top, rotation,
                 "-" if clearance is None else f"{clearance:.2f}")

    return Distribution(outcomes=outcomes, regions=free)
