"""Bearing and great-circle distance between (longitude, latitude) points.

All functions are pure.  Points are ``(lon, lat)`` pairs in decimal degrees
(GeoJSON order); no range checking is performed.  Non-finite inputs yield
``nan`` instead of raising.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

EARTH_RADIUS_M = 6_371_000.0


def _finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def bearing(a: Sequence[float], b: Sequence[float]) -> float:
    """Initial compass bearing from *a* to *b* in degrees ``[0, 360)``.

    Coincident points give ``0.0`` (``atan2(0, 0)``).
    """
    lon1, lat1 = a[0], a[1]
    lon2, lat2 = b[0], b[1]
    if not _finite(lon1, lat1, lon2, lat2):
        return math.nan

    d_lon = math.radians(lon2 - lon1)
    rlat1 = math.radians(lat1)
    rlat2 = math.radians(lat2)

    y = math.sin(d_lon) * math.cos(rlat2)
    x = math.cos(rlat1) * math.sin(rlat2) - math.sin(rlat1) * math.cos(rlat2) * math.cos(d_lon)
    return (math.degrees(math.atan2(y, x)) + 360) % 360


def distance_meters(a: Sequence[float], b: Sequence[float]) -> float:
    """Haversine great-circle distance between *a* and *b* in metres."""
    lon1, lat1 = a[0], a[1]
    lon2, lat2 = b[0], b[1]
    if not _finite(lon1, lat1, lon2, lat2):
        return math.nan

    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    h = min(h, 1.0)  # rounding near antipodes
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def bearing_change(b1: float, b2: float) -> float:
    """Minimal angle in degrees ``[0, 180]`` between two bearings.

    A flip from 359° to 1° is a 2° change, not 358°.  ``nan`` propagates.
    """
    diff = abs(b2 - b1)
    if diff > 180:
        diff = 360 - diff
    return diff


def path_length_meters(points: Sequence[Sequence[float]]) -> float:
    """Sum of haversine distances along consecutive *points*."""
    return sum(
        (distance_meters(points[i - 1], points[i]) for i in range(1, len(points))),
        0.0,
    )
