"""Placer — spreads items across the free space of a draw region.

Submodules:
  models        Output dataclasses (PlacedItem, PlacementFailure, Distribution).
  geometry      Rectangle-to-rectangle distance and nearest lookup.
  regions       Partition of draw region minus avoidance into disjoint cells.
  canvas        Placed/avoided rect bookkeeping and rejection sampling.
  rotation      Rotation assignment (random or by position).
  engine        Best-candidate sampling (distribute).
  serialization JSON conversion (distribution_to_dict, parse_layout).
"""

from .models import PlacedItem, PlacementFailure, FailureReason, Distribution
from .engine import distribute
from .regions import partition_regions, candidate_regions, placement_regions
from .geometry import rect_distance, rect_distance_sq, find_closest
from .canvas import PlacementCanvas
from .serialization import (
    distribution_to_dict, config_to_dict, parse_config, parse_layout,
)

__all__ = [
    # Models
    "PlacedItem", "PlacementFailure", "FailureReason", "Distribution",
    # Engine
    "distribute",
    # Regions
    "partition_regions", "candidate_regions", "placement_regions",
    # Geometry
    "rect_distance", "rect_distance_sq", "find_closest",
    "PlacementCanvas",
    # Serialization
    "distribution_to_dict", "config_to_dict", "parse_config", "parse_layout",
]
