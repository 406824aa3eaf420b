"""Placer output dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from viewdistributor.geometry import Rect


# ── Output dataclasses ─────────────────────────────────────────────


@dataclass(frozen=True)
class PlacedItem:
    """An item committed at a position with a rotation."""

    index: int              # position in the caller's item list
    rect: Rect
    rotation: float         # degrees
    clearance: float | None = None   # distance to nearest earlier item; None if first

    @property
    def x(self) -> float:
        """Left edge of the committed rect."""
        return self.rect.left

    @property
    def y(self) -> float:
        """Top edge of the committed rect."""
        return self.rect.top


class FailureReason(str, Enum):
    NO_REGION = "no_region"                 # no placeable space for this item size
    RETRIES_EXHAUSTED = "retries_exhausted"  # every trial overlapped a placed item
    TIME_BUDGET = "time_budget"             # deadline hit before any valid trial


@dataclass(frozen=True)
class PlacementFailure:
    """An item that could not be placed.  Never aborts the batch."""

    index: int
    width: float
    height: float
    reason: FailureReason

    def __str__(self) -> str:
        return (
            f"Cannot place item {self.index} "
            f"({self.width:g}x{self.height:g}): {self.reason.value}"
        )


Outcome = PlacedItem | PlacementFailure


@dataclass
class Distribution:
    """Result of one distribute call, one outcome per input item."""

    outcomes: list[Outcome]
    regions: list[Rect] = field(default_factory=list)   # item-independent candidate regions

    @property
    def placed(self) -> list[PlacedItem]:
        return [o for o in self.outcomes if isinstance(o, PlacedItem)]

    @property
    def failures(self) -> list[PlacementFailure]:
        return [o for o in self.outcomes if isinstance(o, PlacementFailure)]

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def empty_region(self) -> bool:
        """True when the avoidance set covers the whole draw region."""
        return not self.regions
