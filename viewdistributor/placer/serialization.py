"""Distribution serialization — JSON conversion."""

from __future__ import annotations

from viewdistributor.config import DistributorConfig
from viewdistributor.geometry import Rect

from .models import Distribution, PlacedItem


def _rect_to_dict(r: Rect) -> dict:
    return {"left": r.left, "top": r.top, "right": r.right, "bottom": r.bottom}


def distribution_to_dict(result: Distribution) -> dict:
    """Serialize a Distribution to a JSON-safe dict."""
    outcomes = []
    for o in result.outcomes:
        if isinstance(o, PlacedItem):
            outcomes.append({
                "index": o.index,
                "placed": True,
                "x": round(o.x, 2),
                "y": round(o.y, 2),
                "width": o.rect.width,
                "height": o.rect.height,
                "rotation": round(o.rotation, 2),
                "clearance": None if o.clearance is None else round(o.clearance, 2),
            })
        else:
            outcomes.append({
                "index": o.index,
                "placed": False,
                "width": o.width,
                "height": o.height,
                "reason": o.reason.value,
            })
    return {
        "ok": result.ok,
        "outcomes": outcomes,
        "regions": [_rect_to_dict(r) for r in result.regions],
    }


def config_to_dict(config: DistributorConfig) -> dict:
    """Serialize a DistributorConfig to a JSON-safe dict."""
    return {
        "draw_region": _rect_to_dict(config.draw_region),
        "avoid": [_rect_to_dict(a) for a in config.avoid],
        "bound_padding": config.bound_padding,
        "avoid_padding": config.avoid_padding,
        "max_retries": config.max_retries,
        "rejection_tries": config.rejection_tries,
        "seed": config.seed,
        "time_budget_s": config.time_budget_s,
        "rotation_mode": config.rotation_mode.value,
        "min_angle": config.min_angle,
        "max_angle": config.max_angle,
    }


def parse_config(data: dict) -> DistributorConfig:
    """Parse a config dict back into a validated DistributorConfig.

    Rects may use any shape ``to_rect`` accepts.  Missing optional keys
    take the dataclass defaults.
    """
    optional = {
        key: data[key]
        for key in (
            "bound_padding", "avoid_padding", "max_retries", "rejection_tries",
            "seed", "time_budget_s", "rotation_mode", "min_angle", "max_angle",
        )
        if key in data
    }
    return DistributorConfig(
        draw_region=data["draw_region"],
        avoid=tuple(data.get("avoid", [])),
        **optional,
    )


def parse_layout(data: dict) -> tuple[DistributorConfig, list[tuple[float, float]]]:
    """Parse a layout document: a config plus an ``items`` list.

    Format::

        {
          "draw_region": {"left": 0, "top": 0, "right": 100, "bottom": 100},
          "avoid": [[40, 40, 60, 60]],
          "items": [{"width": 10, "height": 10}, [12, 8]],
          "max_retries": 200, "seed": 7
        }
    """
    sizes: list[tuple[float, float]] = []
    for item in data.get("items", []):
        if isinstance(item, dict):
            sizes.append((float(item["width"]), float(item["height"])))
        else:
            w, h = item
            sizes.append((float(w), float(h)))
    return parse_config(data), sizes
