"""
Axis-aligned rectangle primitives.

Screen coordinates: origin top-left, X grows right, Y grows down.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from shapely.geometry import Polygon, box as shapely_box
from shapely.ops import unary_union


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Immutable axis-aligned box given by its four edges."""

    left: float
    top: float
    right: float
    bottom: float

    def __post_init__(self) -> None:
        if self.right < self.left or self.bottom < self.top:
            raise ValueError(
                f"Rect has negative extent: ({self.left}, {self.top}, "
                f"{self.right}, {self.bottom})"
            )

    # ── constructors ───────────────────────────────────────────────

    @classmethod
    def from_size(cls, x: float, y: float, width: float, height: float) -> Rect:
        """Build a rect from its top-left corner and size."""
        return cls(x, y, x + width, y + height)

    @classmethod
    def centered_at(
        cls, cx: float, cy: float, width: float, height: float,
    ) -> Rect:
        """Build a rect of the given size whose center is (cx, cy)."""
        hw, hh = width / 2, height / 2
        return cls(cx - hw, cy - hh, cx + hw, cy + hh)

    # ── derived values ─────────────────────────────────────────────

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def center(self) -> Point:
        return Point((self.left + self.right) / 2, (self.top + self.bottom) / 2)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.left, self.top, self.right, self.bottom)

    # ── predicates ─────────────────────────────────────────────────

    def intersects(self, other: Rect) -> bool:
        """True if the two rects share interior area.

        Rects that only touch along an edge or a corner do not intersect.
        """
        return (
            self.left < other.right and other.left < self.right
            and self.top < other.bottom and other.top < self.bottom
        )

    def contains(self, other: Rect) -> bool:
        """True if *other* lies fully inside this rect (edges included)."""
        return (
            self.left <= other.left and other.right <= self.right
            and self.top <= other.top and other.bottom <= self.bottom
        )

    # ── transforms ─────────────────────────────────────────────────

    def offset_to(self, x: float, y: float) -> Rect:
        """Return a copy moved so its top-left corner is (x, y)."""
        return Rect.from_size(x, y, self.width, self.height)

    def inflate(self, dx: float, dy: float) -> Rect:
        """Grow by *dx* on the left and right and *dy* on top and bottom."""
        return Rect(self.left - dx, self.top - dy, self.right + dx, self.bottom + dy)

    def inset(self, dx: float, dy: float) -> Rect | None:
        """Shrink by *dx* / *dy* per side, or None if nothing is left."""
        left, right = self.left + dx, self.right - dx
        top, bottom = self.top + dy, self.bottom - dy
        if right < left or bottom < top:
            return None
        return Rect(left, top, right, bottom)

    def to_box(self) -> Polygon:
        """Shapely box covering the same area."""
        return shapely_box(self.left, self.top, self.right, self.bottom)


def scale_rect(rect: Rect, factor: float) -> Rect:
    """Scale *rect* about its center.

    factor > 1 grows the rect, factor < 1 shrinks it, 1 is a no-op.
    """
    grow = factor - 1.0
    dx = rect.width * grow / 2
    dy = rect.height * grow / 2
    return Rect(rect.left - dx, rect.top - dy, rect.right + dx, rect.bottom + dy)


def scale_value(
    value: float,
    old_min: float,
    old_max: float,
    new_min: float,
    new_max: float,
) -> float:
    """Map *value* from [old_min, old_max] onto [new_min, new_max] linearly."""
    return (new_max - new_min) * (value - old_min) / (old_max - old_min) + new_min


def to_rect(obj: Any) -> Rect:
    """Convert a rect-like object into a Rect.

    Accepted shapes:
      - a Rect (returned as-is, it is immutable)
      - a 4-sequence (left, top, right, bottom)
      - a mapping with left/top/right/bottom or x/y/width/height keys
      - an object with left/top/right/bottom or x/y/width/height attributes
        (e.g. a UI element's bounding box)
    """
    if isinstance(obj, Rect):
        return obj
    if isinstance(obj, dict):
        if {"left", "top", "right", "bottom"} <= obj.keys():
            return Rect(float(obj["left"]), float(obj["top"]),
                        float(obj["right"]), float(obj["bottom"]))
        if {"x", "y", "width", "height"} <= obj.keys():
            return Rect.from_size(float(obj["x"]), float(obj["y"]),
                                  float(obj["width"]), float(obj["height"]))
        raise TypeError(f"Cannot convert mapping with keys {sorted(obj)} to Rect")
    if isinstance(obj, (tuple, list)):
        if len(obj) != 4:
            raise TypeError(f"Expected (left, top, right, bottom), got {len(obj)} values")
        left, top, right, bottom = (float(v) for v in obj)
        return Rect(left, top, right, bottom)
    if all(hasattr(obj, a) for a in ("left", "top", "right", "bottom")):
        return Rect(float(obj.left), float(obj.top),
                    float(obj.right), float(obj.bottom))
    if all(hasattr(obj, a) for a in ("x", "y", "width", "height")):
        return Rect.from_size(float(obj.x), float(obj.y),
                              float(obj.width), float(obj.height))
    raise TypeError(f"Cannot convert {type(obj).__name__} to Rect")


def coverage_polygon(rects: Iterable[Rect]):
    """Shapely union of *rects* (empty geometry for an empty input)."""
    return unary_union([r.to_box() for r in rects])
