from .rect import (
    Point,
    Rect,
    scale_rect,
    scale_value,
    to_rect,
    coverage_polygon,
)
