"""Rectangle-to-rectangle distance for candidate scoring."""

from __future__ import annotations

import math
from typing import Sequence

from viewdistributor.geometry import Point, Rect


def _point_distance_sq(a: Point, b: Point) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def rect_distance_sq(a: Rect, b: Rect) -> float:
    """Squared gap between the closest points of two rects.

    Each axis is classified as *b* strictly before *a*, strictly after
    it, or overlapping.  Separated on both axes means the gap runs
    between the two nearest corners; separated on one axis means the
    gap is the distance along that axis; otherwise the rects touch or
    intersect and the distance is 0.

    Squared so the hot loop can skip the root; the ordering is the same.
    """
    left = b.right < a.left       # b is left of a
    right = a.right < b.left      # b is right of a
    above = b.bottom < a.top      # b is above a (y grows down)
    below = a.bottom < b.top      # b is below a

    if left and above:
        return _point_distance_sq(Point(a.left, a.top), Point(b.right, b.bottom))
    if left and below:
        return _point_distance_sq(Point(a.left, a.bottom), Point(b.right, b.top))
    if right and above:
        return _point_distance_sq(Point(a.right, a.top), Point(b.left, b.bottom))
    if right and below:
        return _point_distance_sq(Point(a.right, a.bottom), Point(b.left, b.top))
    if left:
        gap = a.left - b.right
    elif right:
        gap = b.left - a.right
    elif above:
        gap = a.top - b.bottom
    elif below:
        gap = b.top - a.bottom
    else:
        return 0.0
    return gap * gap


def rect_distance(a: Rect, b: Rect) -> float:
    """Euclidean gap between two rects (0 when they touch or overlap)."""
    return math.sqrt(rect_distance_sq(a, b))


def find_closest(
    rect: Rect, others: Sequence[Rect],
) -> tuple[Rect | None, float]:
    """Nearest rect in *others* and its squared distance.

    Linear scan; item counts stay in the tens so an index is not worth it.
    Returns (None, inf) for an empty sequence.
    """
    closest: Rect | None = None
    closest_sq = math.inf
    for other in others:
        d = rect_distance_sq(rect, other)
        if d < closest_sq:
            closest = other
            closest_sq = d
    return closest, closest_sq
