"""Turn detection, even sampling and bounded waypoint selection."""

from waypoint_sampler.sampling.even import sample_evenly
from waypoint_sampler.sampling.models import (
    Coordinate,
    NavPoint,
    SamplingResult,
    Turn,
    WaypointPlan,
)
from waypoint_sampler.sampling.plan import build_waypoint_plan, line_coordinates
from waypoint_sampler.sampling.selector import WaypointSelector, sample_route_waypoints
from waypoint_sampler.sampling.stats import StatsReporter, log_waypoint_stats
from waypoint_sampler.sampling.turns import detect_turns, find_significant_turns

__all__ = [
    "Coordinate",
    "NavPoint",
    "SamplingResult",
    "StatsReporter",
    "Turn",
    "WaypointPlan",
    "WaypointSelector",
    "build_waypoint_plan",
    "detect_turns",
    "find_significant_turns",
    "line_coordinates",
    "log_waypoint_stats",
    "sample_evenly",
    "sample_route_waypoints",
]
