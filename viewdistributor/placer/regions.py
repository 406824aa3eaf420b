"""Region partitioning — the free space of a draw region as disjoint cells.

Every left/right edge and every top/bottom edge (draw region and
avoidance rects alike) becomes a grid line.  No grid cell straddles an
avoidance boundary, so each cell is either entirely free or entirely
covered; the covered ones are dropped.  What is left tiles
draw region minus avoidance exactly.

Center regions for a sized item may also be zero-width: an item that
exactly fills a gap has a single line (or point) of legal centers.  Those
degenerate cells are kept only where no surviving area cell already
borders them.
"""

from __future__ import annotations

import logging
from typing import Sequence

from viewdistributor.config import DistributorConfig
from viewdistributor.geometry import Rect


log = logging.getLogger(__name__)


def _grid_lines(lo: float, hi: float, edges: list[float]) -> list[float]:
    """Distinct edges clamped into [lo, hi], sorted, bounds included."""
    return sorted({lo, hi, *(min(max(e, lo), hi) for e in edges)})


def _blocked(cell: Rect, avoid: Sequence[Rect]) -> bool:
    return any(cell.intersects(a) for a in avoid)


def _degenerate_cells(
    xs: list[float],
    ys: list[float],
    avoid: Sequence[Rect],
    kept: set[tuple[int, int]],
) -> list[Rect]:
    """Free grid segments and grid points not on the edge of a kept cell.

    ``kept`` holds the (ix, iy) grid indices of the surviving area cells.
    Overlap is strict, so a segment lying on the shared edge of two
    avoidance rects is free.
    """
    cells: list[Rect] = []
    vertical: set[tuple[int, int]] = set()
    horizontal: set[tuple[int, int]] = set()

    for ix, x in enumerate(xs):
        for iy in range(len(ys) - 1):
            if (ix - 1, iy) in kept or (ix, iy) in kept:
                continue
            seg = Rect(x, ys[iy], x, ys[iy + 1])
            if not _blocked(seg, avoid):
                cells.append(seg)
                vertical.add((ix, iy))

    for iy, y in enumerate(ys):
        for ix in range(len(xs) - 1):
            if (ix, iy - 1) in kept or (ix, iy) in kept:
                continue
            seg = Rect(xs[ix], y, xs[ix + 1], y)
            if not _blocked(seg, avoid):
                cells.append(seg)
                horizontal.add((ix, iy))

    for ix, x in enumerate(xs):
        for iy, y in enumerate(ys):
            if any((ix - dx, iy - dy) in kept for dx in (0, 1) for dy in (0, 1)):
                continue
            if ((ix, iy - 1) in vertical or (ix, iy) in vertical
                    or (ix - 1, iy) in horizontal or (ix, iy) in horizontal):
                continue
            point = Rect(x, y, x, y)
            if not _blocked(point, avoid):
                cells.append(point)

    return cells


def partition_regions(
    draw_region: Rect,
    avoid: Sequence[Rect],
    keep_degenerate: bool = False,
) -> list[Rect]:
    """Split *draw_region* minus *avoid* into disjoint candidate rects.

    Avoidance rects may overlap each other or lie partly or wholly
    outside the draw region.  An empty result means there is no
    placeable space.

    With *keep_degenerate* the region itself may have zero width or
    height, and free zero-width segments and points that border no
    area cell are appended after the area cells.

    Raises
    ------
    ValueError
        If *draw_region* has no positive width and height (and
        *keep_degenerate* is off).
    """
    if not keep_degenerate and (draw_region.width <= 0 or draw_region.height <= 0):
        raise ValueError(
            f"Cannot partition a {draw_region.width}x{draw_region.height} region"
        )

    xs = _grid_lines(
        draw_region.left, draw_region.right,
        [e for a in avoid for e in (a.left, a.right)],
    )
    ys = _grid_lines(
        draw_region.top, draw_region.bottom,
        [e for a in avoid for e in (a.top, a.bottom)],
    )

    regions: list[Rect] = []
    kept: set[tuple[int, int]] = set()
    for ix in range(len(xs) - 1):
        for iy in range(len(ys) - 1):
            cell = Rect(xs[ix], ys[iy], xs[ix + 1], ys[iy + 1])
            if not _blocked(cell, avoid):
                regions.append(cell)
                kept.add((ix, iy))

    if keep_degenerate:
        regions.extend(_degenerate_cells(xs, ys, avoid, kept))

    log.debug("Partitioned %s into %d cells (%d avoid rects, grid %dx%d)",
              draw_region.as_tuple(), len(regions), len(avoid),
              len(xs) - 1, len(ys) - 1)
    return regions


def candidate_regions(config: DistributorConfig) -> list[Rect]:
    """Free space of the padded draw region after padded avoidance."""
    return partition_regions(config.padded_draw_region, config.padded_avoid)


def placement_regions(
    config: DistributorConfig, width: float, height: float,
) -> list[Rect]:
    """Regions in which the *center* of a width x height item may land.

    The padded draw region is inset by the item's half-size and every
    padded avoidance rect is grown by it, so any center sampled from a
    returned cell gives an item rect inside the draw region that does
    not overlap any avoidance rect.  An item that exactly fills a gap
    gets zero-width cells.  Empty if the item cannot fit.
    """
    hw, hh = width / 2, height / 2
    bounds = config.padded_draw_region.inset(hw, hh)
    if bounds is None:
        return []
    grown = [a.inflate(hw, hh) for a in config.padded_avoid]
    return partition_regions(bounds, grown, keep_degenerate=True)
