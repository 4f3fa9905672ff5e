"""WaypointService: wraps selection and plan building for the Web API."""

from __future__ import annotations

from waypoint_sampler.config import SamplerConfig
from waypoint_sampler.sampling.models import SamplingResult, WaypointPlan
from waypoint_sampler.sampling.plan import build_waypoint_plan
from waypoint_sampler.sampling.selector import WaypointSelector
from waypoint_sampler.sampling.stats import log_waypoint_stats
from waypoint_sampler.web.schemas import PlanRequest, WaypointsRequest


class WaypointService:
    """Applies per-request overrides on top of a base :class:`SamplerConfig`.

    Parameters
    ----------
    config:
        Defaults used when a request omits ``max_waypoints`` or
        ``min_turn_angle_deg``.  Read from the environment if None.
    """

    def __init__(self, config: SamplerConfig | None = None) -> None:
        self._config = config or SamplerConfig.from_env()

    def _selector(
        self,
        max_waypoints: int | None,
        min_turn_angle_deg: float | None,
    ) -> WaypointSelector:
        return WaypointSelector(
            max_waypoints=(
                self._config.max_waypoints if max_waypoints is None else max_waypoints
            ),
            min_turn_angle_deg=(
                self._config.min_turn_angle_deg
                if min_turn_angle_deg is None
                else min_turn_angle_deg
            ),
            stats_reporter=log_waypoint_stats,
        )

    def sample(self, req: WaypointsRequest) -> SamplingResult:
        selector = self._selector(req.max_waypoints, req.min_turn_angle_deg)
        return selector.select(req.coordinates)

    def plan(self, req: PlanRequest) -> WaypointPlan:
        """Build a navigation plan from the request's route geometry.

        Raises
        ------
        ValueError
            If the geometry is not a usable LineString.
        """
        selector = self._selector(req.max_waypoints, req.min_turn_angle_deg)
        return build_waypoint_plan(req.geometry, selector)
