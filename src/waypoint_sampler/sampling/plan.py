"""Turn a stored route LineString into a navigation waypoint plan."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from waypoint_sampler.sampling.models import NavPoint, WaypointPlan
from waypoint_sampler.sampling.selector import WaypointSelector


def line_coordinates(geometry: Any) -> list[tuple[float, float]]:
    """Extract ``(lon, lat)`` pairs from a route geometry.

    Accepts a GeoJSON ``LineString``, a ``Feature`` wrapping one, or a plain
    sequence of ``[lon, lat, ...]`` positions (extra elements such as
    elevation are dropped).

    Raises:
        ValueError: If the geometry is not a LineString or a position is
            malformed.
    """
    if isinstance(geometry, dict):
        if geometry.get("type") == "Feature":
            geometry = geometry.get("geometry")
            if not isinstance(geometry, dict):
                raise ValueError("Feature has no geometry")
        if geometry.get("type") != "LineString":
            raise ValueError(f"Expected a LineString geometry, got {geometry.get('type')!r}")
        positions = geometry.get("coordinates")
        if not isinstance(positions, list):
            raise ValueError("LineString has no coordinates array")
    elif isinstance(geometry, Sequence) and not isinstance(geometry, str):
        positions = geometry
    else:
        raise ValueError(f"Unsupported route geometry: {type(geometry).__name__}")

    coords: list[tuple[float, float]] = []
    for i, pos in enumerate(positions):
        if not isinstance(pos, Sequence) or isinstance(pos, str) or len(pos) < 2:
            raise ValueError(f"Position {i} is not a [lon, lat] pair: {pos!r}")
        try:
            coords.append((float(pos[0]), float(pos[1])))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Position {i} has a non-numeric value: {pos!r}") from exc
    return coords


def build_waypoint_plan(geometry: Any, selector: WaypointSelector | None = None) -> WaypointPlan:
    """Build origin, destination and sampled intermediate waypoints.

    The first and last points of the line become the origin and destination;
    only the interior points are sampled.  The stats hook sees the full line
    length as the original count.

    Raises:
        ValueError: If the line has fewer than two points.
    """
    if selector is None:
        selector = WaypointSelector()

    coords = line_coordinates(geometry)
    if len(coords) < 2:
        raise ValueError(f"A route needs at least 2 points, got {len(coords)}")

    result = selector.select(coords[1:-1], original_count=len(coords))

    return WaypointPlan(
        origin=NavPoint.from_coordinate(coords[0]),
        destination=NavPoint.from_coordinate(coords[-1]),
        waypoints=[NavPoint.from_coordinate(c) for c in result.waypoints],
        turn_count=result.turn_count,
    )
