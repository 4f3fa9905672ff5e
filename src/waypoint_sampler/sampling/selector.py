"""Bounded waypoint selection that preserves route shape.

Navigation engines accept a fixed number of coordinates per route while
recorded test routes have hundreds of points.  The selector keeps the points
where the route turns and fills any spare budget with evenly spaced points:

1. Empty input, or input already within budget: returned unchanged.
2. No significant turns: even sampling over the whole path.
3. Turns fit in the budget: every turn, plus evenly spaced non-turn points
   in the remaining slots, in original path order.
4. More turns than budget: the sharpest turns (stable on ties), in original
   path order.

Points are tracked by index throughout so routes that pass through the same
coordinate twice keep the correct order.
"""

from __future__ import annotations

from collections.abc import Sequence

from waypoint_sampler.config import (
    DEFAULT_MAX_WAYPOINTS,
    DEFAULT_MIN_TURN_ANGLE_DEG,
    SamplerConfig,
)
from waypoint_sampler.sampling.even import sample_evenly
from waypoint_sampler.sampling.models import Coordinate, SamplingResult, Turn
from waypoint_sampler.sampling.stats import StatsReporter
from waypoint_sampler.sampling.turns import detect_turns


def _select_indices(
    n: int,
    turns: list[Turn],
    max_waypoints: int,
) -> list[int]:
    """Indices to keep for a path of *n* points that exceeds the budget."""
    if not turns:
        return sample_evenly(range(n), max_waypoints)

    if len(turns) <= max_waypoints:
        turn_indices = [t.index for t in turns]
        remaining = max_waypoints - len(turns)
        if remaining <= 0:
            return turn_indices
        turn_set = set(turn_indices)
        others = [i for i in range(n) if i not in turn_set]
        filler = sample_evenly(others, remaining)
        return sorted(turn_indices + filler)

    # sorted() is stable, so equal angles keep input order
    sharpest = sorted(turns, key=lambda t: t.angle, reverse=True)[:max_waypoints]
    return sorted(t.index for t in sharpest)


def _sample(
    coordinates: Sequence[Sequence[float]],
    max_waypoints: int,
    min_turn_angle_deg: float,
) -> SamplingResult:
    n = len(coordinates)
    if n == 0 or max_waypoints <= 0:
        return SamplingResult(waypoints=[], original_count=n)
    if n <= max_waypoints:
        return SamplingResult(
            waypoints=[(c[0], c[1]) for c in coordinates],
            original_count=n,
        )

    turns = detect_turns(coordinates, min_turn_angle_deg)
    indices = _select_indices(n, turns, max_waypoints)
    waypoints: list[Coordinate] = [(coordinates[i][0], coordinates[i][1]) for i in indices]
    return SamplingResult(waypoints=waypoints, original_count=n, turn_count=len(turns))


def sample_route_waypoints(
    coordinates: Sequence[Sequence[float]],
    max_waypoints: int = DEFAULT_MAX_WAYPOINTS,
    min_turn_angle_deg: float = DEFAULT_MIN_TURN_ANGLE_DEG,
) -> list[Coordinate]:
    """Reduce *coordinates* to at most *max_waypoints* shape-preserving points.

    Args:
        coordinates: Ordered ``(lon, lat)`` points, endpoints already removed.
        max_waypoints: Output budget.  Values ``<= 0`` give ``[]``.
        min_turn_angle_deg: Bearing change that counts as a significant turn.

    Returns:
        ``(lon, lat)`` tuples taken from *coordinates*, in input order.
    """
    return _sample(coordinates, max_waypoints, min_turn_angle_deg).waypoints


class WaypointSelector:
    """Configured waypoint sampler with an optional diagnostics hook.

    Args:
        max_waypoints: Maximum number of waypoints per result.
        min_turn_angle_deg: Minimum bearing change for a significant turn.
        stats_reporter: Called with ``(original_count, sampled_count,
            turn_count)`` after each selection, e.g.
            :func:`~waypoint_sampler.sampling.stats.log_waypoint_stats`.
    """

    def __init__(
        self,
        max_waypoints: int = DEFAULT_MAX_WAYPOINTS,
        min_turn_angle_deg: float = DEFAULT_MIN_TURN_ANGLE_DEG,
        stats_reporter: StatsReporter | None = None,
    ) -> None:
        self.max_waypoints = max_waypoints
        self.min_turn_angle_deg = min_turn_angle_deg
        self._reporter = stats_reporter

    @classmethod
    def from_config(
        cls,
        config: SamplerConfig,
        stats_reporter: StatsReporter | None = None,
    ) -> WaypointSelector:
        return cls(
            max_waypoints=config.max_waypoints,
            min_turn_angle_deg=config.min_turn_angle_deg,
            stats_reporter=stats_reporter,
        )

    def select(
        self,
        coordinates: Sequence[Sequence[float]],
        original_count: int | None = None,
    ) -> SamplingResult:
        """Sample *coordinates* and report the figures to the stats hook.

        Args:
            coordinates: Ordered ``(lon, lat)`` points to sample.
            original_count: Count reported to the hook in place of
                ``len(coordinates)``, e.g. the full line length when the
                endpoints were stripped by the caller.
        """
        result = _sample(coordinates, self.max_waypoints, self.min_turn_angle_deg)
        if self._reporter is not None:
            reported = result.original_count if original_count is None else original_count
            self._reporter(reported, result.sampled_count, result.turn_count)
        return result
