"""Spherical geometry primitives for lon/lat paths."""

from waypoint_sampler.geometry.primitives import (
    EARTH_RADIUS_M,
    bearing,
    bearing_change,
    distance_meters,
    path_length_meters,
)

__all__ = [
    "EARTH_RADIUS_M",
    "bearing",
    "bearing_change",
    "distance_meters",
    "path_length_meters",
]
