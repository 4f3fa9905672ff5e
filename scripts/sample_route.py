"""Build a navigation waypoint plan from a route GeoJSON file.

Usage:
  python scripts/sample_route.py \\
      --input routes/colchester_route_1.geojson \\
      --max-waypoints 23 \\
      --output plan.json

WAYPOINT_MAX_WAYPOINTS / WAYPOINT_MIN_TURN_ANGLE (or a .env file) set the
defaults when the flags are omitted.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from waypoint_sampler.config import SamplerConfig
from waypoint_sampler.geometry.primitives import path_length_meters
from waypoint_sampler.sampling.plan import build_waypoint_plan, line_coordinates
from waypoint_sampler.sampling.selector import WaypointSelector
from waypoint_sampler.sampling.stats import log_waypoint_stats

load_dotenv()


def main() -> None:
    try:
        config = SamplerConfig.from_env()
    except ValueError as exc:
        print(f"  [!] {exc}", file=sys.stderr)
        sys.exit(1)

    ap = argparse.ArgumentParser(description="Sample navigation waypoints from a route")
    ap.add_argument("--input", required=True, help="GeoJSON LineString or Feature file")
    ap.add_argument(
        "--max-waypoints",
        type=int,
        default=config.max_waypoints,
        help="Maximum intermediate waypoints (endpoints excluded)",
    )
    ap.add_argument(
        "--min-turn-angle",
        type=float,
        default=config.min_turn_angle_deg,
        help="Bearing change in degrees that counts as a turn",
    )
    ap.add_argument("--output", default="", help="Write the plan JSON here instead of stdout")
    ap.add_argument("--verbose", action="store_true", help="Log sampling statistics")
    args = ap.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    try:
        geojson = json.loads(Path(args.input).read_text(encoding="utf-8"))
        selector = WaypointSelector(
            max_waypoints=args.max_waypoints,
            min_turn_angle_deg=args.min_turn_angle,
            stats_reporter=log_waypoint_stats,
        )
        plan = build_waypoint_plan(geojson, selector)
        length_km = path_length_meters(line_coordinates(geojson)) / 1000
    except (OSError, ValueError) as exc:
        print(f"  [!] {args.input}: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"Route      : {args.input}", file=sys.stderr)
    print(f"Length     : {length_km:.2f} km", file=sys.stderr)
    print(f"Turns      : {plan.turn_count}", file=sys.stderr)
    print(f"Waypoints  : {len(plan.waypoints)} (+ origin/destination)", file=sys.stderr)

    text = json.dumps(plan.to_dict(), indent=2)
    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
        print(f"Plan saved : {args.output}", file=sys.stderr)
    else:
        print(text)


if __name__ == "__main__":
    main()
