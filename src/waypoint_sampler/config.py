"""Sampler settings and their environment-variable overrides."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DOWNSTREAM_COORDINATE_LIMIT = 25
"""Coordinates the navigation engine accepts per route, endpoints included."""

DEFAULT_MAX_WAYPOINTS = DOWNSTREAM_COORDINATE_LIMIT - 2
DEFAULT_MIN_TURN_ANGLE_DEG = 30.0

ENV_MAX_WAYPOINTS = "WAYPOINT_MAX_WAYPOINTS"
ENV_MIN_TURN_ANGLE = "WAYPOINT_MIN_TURN_ANGLE"


@dataclass(frozen=True)
class SamplerConfig:
    """Tuneable sampling parameters.

    Args:
        max_waypoints: Output budget for intermediate waypoints.
        min_turn_angle_deg: Bearing change that counts as a significant turn.
    """

    max_waypoints: int = DEFAULT_MAX_WAYPOINTS
    min_turn_angle_deg: float = DEFAULT_MIN_TURN_ANGLE_DEG

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SamplerConfig:
        """Read overrides from *environ* (defaults to ``os.environ``).

        Entry points call ``load_dotenv()`` first so ``.env`` values apply.

        Raises:
            ValueError: If a variable is set but cannot be parsed.
        """
        env = os.environ if environ is None else environ

        max_waypoints = DEFAULT_MAX_WAYPOINTS
        raw = env.get(ENV_MAX_WAYPOINTS, "").strip()
        if raw:
            try:
                max_waypoints = int(raw)
            except ValueError as exc:
                raise ValueError(f"{ENV_MAX_WAYPOINTS} must be an integer, got {raw!r}") from exc

        min_turn_angle = DEFAULT_MIN_TURN_ANGLE_DEG
        raw = env.get(ENV_MIN_TURN_ANGLE, "").strip()
        if raw:
            try:
                min_turn_angle = float(raw)
            except ValueError as exc:
                raise ValueError(f"{ENV_MIN_TURN_ANGLE} must be a number, got {raw!r}") from exc

        return cls(max_waypoints=max_waypoints, min_turn_angle_deg=min_turn_angle)
