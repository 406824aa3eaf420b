"""Distributor configuration — the one struct every distribute call reads.

Hosts never mutate configuration in place.  A size change or a new
avoidance set produces a fresh ``DistributorConfig`` (usually through
``dataclasses.replace``), and validation runs again on every copy, so a
bad value is rejected at configure time rather than mid-placement.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from viewdistributor.geometry import Rect, scale_rect, to_rect


# Module-level defaults (used where no DistributorConfig is at hand)
MAX_RETRIES = 200


class ConfigurationError(ValueError):
    """Raised when a configuration value can never produce a placement."""


class RotationMode(str, Enum):
    RANDOM = "random"       # uniform angle in [min_angle, max_angle)
    POSITION = "position"   # angle follows the item's x across the layout


@dataclass(frozen=True)
class DistributorConfig:
    """All tuneable distributor parameters in one place.

    Padding factors scale a rect about its center: > 1 grows it,
    < 1 shrinks it.  A draw region padded above 1 lets items bleed past
    the nominal bounds.
    """

    draw_region: Rect
    avoid: tuple[Rect, ...] = ()

    bound_padding: float = 1.0
    avoid_padding: float = 1.0

    # ── Sampling ───────────────────────────────────────────────────
    max_retries: int = MAX_RETRIES      # best-candidate trials per item
    rejection_tries: int = 0            # leading trials sampled without partitioning
    seed: int | None = None             # None = fresh entropy per call
    time_budget_s: float | None = None  # wall-clock bound per distribute call

    # ── Rotation ───────────────────────────────────────────────────
    rotation_mode: RotationMode = RotationMode.POSITION
    min_angle: float = 0.0
    max_angle: float = 0.0

    def __post_init__(self) -> None:
        # Normalise inputs the host may pass loosely.
        try:
            object.__setattr__(self, "draw_region", to_rect(self.draw_region))
        except ValueError as e:
            raise ConfigurationError(f"Invalid draw region: {e}") from e
        try:
            object.__setattr__(self, "avoid", tuple(to_rect(a) for a in self.avoid))
        except ValueError as e:
            raise ConfigurationError(f"Invalid avoidance rect: {e}") from e
        try:
            object.__setattr__(self, "rotation_mode", RotationMode(self.rotation_mode))
        except ValueError:
            raise ConfigurationError(
                f"Unknown rotation mode {self.rotation_mode!r} "
                f"(expected one of {[m.value for m in RotationMode]})"
            ) from None

        if self.draw_region.width <= 0 or self.draw_region.height <= 0:
            raise ConfigurationError(
                f"Draw region must have positive size, got "
                f"{self.draw_region.width}x{self.draw_region.height}"
            )
        if self.bound_padding <= 0 or self.avoid_padding <= 0:
            raise ConfigurationError(
                f"Padding factors must be positive (bound={self.bound_padding}, "
                f"avoid={self.avoid_padding})"
            )
        if self.max_retries < 1:
            raise ConfigurationError(f"max_retries must be >= 1, got {self.max_retries}")
        if self.rejection_tries < 0:
            raise ConfigurationError(
                f"rejection_tries must be >= 0, got {self.rejection_tries}"
            )
        if self.min_angle > self.max_angle:
            raise ConfigurationError(
                f"min_angle {self.min_angle} is greater than max_angle {self.max_angle}"
            )
        if self.time_budget_s is not None and self.time_budget_s <= 0:
            raise ConfigurationError(
                f"time_budget_s must be positive, got {self.time_budget_s}"
            )

    # ── Derived helpers ────────────────────────────────────────────

    @property
    def padded_draw_region(self) -> Rect:
        """Draw region after bound padding is applied."""
        return scale_rect(self.draw_region, self.bound_padding)

    @property
    def padded_avoid(self) -> list[Rect]:
        """Avoidance rects after avoid padding is applied (fresh list)."""
        return [scale_rect(a, self.avoid_padding) for a in self.avoid]

