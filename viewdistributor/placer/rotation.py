"""Rotation assignment for committed items."""

from __future__ import annotations

import random

from viewdistributor.config import DistributorConfig, RotationMode
from viewdistributor.geometry import scale_value


def random_angle(rng: random.Random, min_angle: float, max_angle: float) -> float:
    """Uniform angle in [min_angle, max_angle) (exactly min_angle if the range is empty)."""
    return min_angle + rng.random() * (max_angle - min_angle)


def position_angle(
    x: float,
    range_min: float,
    range_max: float,
    min_angle: float,
    max_angle: float,
) -> float:
    """Angle proportional to where *x* sits in [range_min, range_max].

    Items bleeding past the range (bound padding > 1) are clamped to the
    angle range.
    """
    angle = scale_value(x, range_min, range_max, min_angle, max_angle)
    return min(max(angle, min_angle), max_angle)


def assign_rotation(
    config: DistributorConfig, rng: random.Random, x: float,
) -> float:
    """Rotation for an item committed with its left edge at *x*."""
    if config.rotation_mode is RotationMode.RANDOM:
        return random_angle(rng, config.min_angle, config.max_angle)
    extent = config.draw_region
    return position_angle(x, extent.left, extent.right,
                          config.min_angle, config.max_angle)
