"""
ViewDistributor — command line entry point.

Usage:
    python -m viewdistributor distribute layout.json             # print placements as JSON
    python -m viewdistributor distribute layout.json --seed 7
    python -m viewdistributor regions layout.json                # print candidate regions
    add --verbose to either command for placement logging on stderr
"""

import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

USAGE = "Usage: python -m viewdistributor {distribute|regions} LAYOUT.json [--seed N] [--verbose]"


def main():
    args = sys.argv[1:]
    if len(args) < 2 or args[0] not in ("distribute", "regions"):
        print(USAGE)
        sys.exit(1)

    cmd, path = args[0], Path(args[1])
    seed = None
    for i, a in enumerate(args):
        if a == "--seed" and i + 1 < len(args):
            try:
                seed = int(args[i + 1])
            except ValueError:
                print(f"Invalid seed {args[i + 1]!r}", file=sys.stderr)
                print(USAGE)
                sys.exit(2)
        elif a == "--verbose":
            logging.basicConfig(level=logging.INFO,
                                format="%(levelname)s %(name)s: %(message)s")

    from viewdistributor.geometry import coverage_polygon
    from viewdistributor.placer import (
        candidate_regions, distribute, distribution_to_dict, parse_layout,
    )

    try:
        config, sizes = parse_layout(json.loads(path.read_text()))
        if seed is not None:
            config = replace(config, seed=seed)
    except (OSError, ValueError, KeyError, TypeError) as e:
        print(f"Invalid layout {path}: {e}", file=sys.stderr)
        sys.exit(2)

    if cmd == "distribute":
        result = distribute(sizes, config)
        print(json.dumps(distribution_to_dict(result), indent=2))
        sys.exit(0 if result.ok else 3)

    regions = candidate_regions(config)
    free = coverage_polygon(regions)
    print(json.dumps({
        "regions": [list(r.as_tuple()) for r in regions],
        "free_area": round(free.area, 2),
        "draw_area": round(config.padded_draw_region.area, 2),
    }, indent=2))


if __name__ == "__main__":
    main()
