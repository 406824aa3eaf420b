"""ViewDistributor — blue-noise placement of rectangles around avoidance zones.

Packages:
  geometry      Rect / Point primitives, scaling and rect-like conversion.
  config        DistributorConfig, RotationMode, ConfigurationError.
  placer        Region partitioning and best-candidate placement.
  distributor   Fluent host-facing wrapper (ViewDistributor).
"""

from .config import ConfigurationError, DistributorConfig, RotationMode
from .distributor import ViewDistributor
from .geometry import Rect, Point, scale_rect, to_rect
from .placer import (
    Distribution, FailureReason, PlacedItem, PlacementFailure, distribute,
)

__all__ = [
    "ConfigurationError", "DistributorConfig", "RotationMode",
    "ViewDistributor",
    "Rect", "Point", "scale_rect", "to_rect",
    "Distribution", "FailureReason", "PlacedItem", "PlacementFailure",
    "distribute",
]
