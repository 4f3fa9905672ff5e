"""Data structures for waypoint sampling."""

from __future__ import annotations

from dataclasses import dataclass, field

Coordinate = tuple[float, float]
"""``(longitude, latitude)`` in decimal degrees, WGS-84."""


@dataclass(frozen=True)
class Turn:
    """A significant change of direction at one point of a path."""

    index: int
    """Position of the turn point in the input sequence."""

    angle: float
    """Absolute bearing change at that point, degrees [0, 180]."""


@dataclass
class SamplingResult:
    """Sampled waypoints plus the figures the stats hook reports."""

    waypoints: list[Coordinate]
    original_count: int
    turn_count: int = 0
    """Number of significant turns found; 0 when the detector did not run."""

    @property
    def sampled_count(self) -> int:
        return len(self.waypoints)

    @property
    def compression_ratio(self) -> float | None:
        """``original_count / sampled_count``, or ``None`` for an empty result."""
        if not self.waypoints:
            return None
        return self.original_count / len(self.waypoints)


@dataclass(frozen=True)
class NavPoint:
    """A coordinate in the ``{latitude, longitude}`` form navigation SDKs take."""

    latitude: float
    longitude: float

    @classmethod
    def from_coordinate(cls, coord: Coordinate) -> NavPoint:
        return cls(latitude=coord[1], longitude=coord[0])

    def to_dict(self) -> dict:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass
class WaypointPlan:
    """Origin, destination and bounded intermediate stops for one route.

    ``waypoints`` excludes the origin and destination, which the navigation
    component tracks separately.
    """

    origin: NavPoint
    destination: NavPoint
    waypoints: list[NavPoint] = field(default_factory=list)
    turn_count: int = 0

    @property
    def total_coordinates(self) -> int:
        """Coordinates handed to the navigation component, endpoints included."""
        return len(self.waypoints) + 2

    def to_dict(self) -> dict:
        return {
            "origin": self.origin.to_dict(),
            "destination": self.destination.to_dict(),
            "waypoints": [w.to_dict() for w in self.waypoints],
            "total_coordinates": self.total_coordinates,
            "turn_count": self.turn_count,
        }
