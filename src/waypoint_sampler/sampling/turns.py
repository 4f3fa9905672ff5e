"""Significant-turn detection along a coordinate path."""

from __future__ import annotations

from collections.abc import Sequence

from waypoint_sampler.config import DEFAULT_MIN_TURN_ANGLE_DEG
from waypoint_sampler.geometry.primitives import bearing, bearing_change
from waypoint_sampler.sampling.models import Turn


def detect_turns(
    points: Sequence[Sequence[float]],
    min_angle_change_deg: float = DEFAULT_MIN_TURN_ANGLE_DEG,
) -> list[Turn]:
    """Return a :class:`Turn` for every interior point whose bearing change
    is at least *min_angle_change_deg*.

    The change at ``i`` compares ``bearing(points[i-1], points[i])`` with
    ``bearing(points[i], points[i+1])``.  Turns are in ascending index order.
    Paths shorter than 3 points have no interior point and give ``[]``.
    A ``nan`` angle never counts as a turn.
    """
    turns: list[Turn] = []
    for i in range(1, len(points) - 1):
        b_in = bearing(points[i - 1], points[i])
        b_out = bearing(points[i], points[i + 1])
        angle = bearing_change(b_in, b_out)
        if angle >= min_angle_change_deg:
            turns.append(Turn(index=i, angle=angle))
    return turns


def find_significant_turns(
    points: Sequence[Sequence[float]],
    min_angle_change_deg: float = DEFAULT_MIN_TURN_ANGLE_DEG,
) -> list[int]:
    """Indices of the significant turns in *points*, ascending."""
    return [t.index for t in detect_turns(points, min_angle_change_deg)]
