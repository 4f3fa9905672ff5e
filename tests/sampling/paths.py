"""Synthetic route builders for sampling tests."""

from __future__ import annotations

import math

STEP_DEG = 0.001

_NORTH, _EAST, _SOUTH, _WEST = (0, 1), (1, 0), (0, -1), (-1, 0)


def _walk(moves: list[tuple[int, int]], step: float) -> list[tuple[float, float]]:
    """Integer grid walk from the origin; revisited cells give identical coordinates."""
    x, y = 0, 0
    points = [(0.0, 0.0)]
    for dx, dy in moves:
        x += dx
        y += dy
        points.append((x * step, y * step))
    return points


def make_straight(n: int, step: float = STEP_DEG) -> list[tuple[float, float]]:
    """*n* collinear points heading due north along the prime meridian."""
    return [(0.0, i * step) for i in range(n)]


def make_staircase(segment_lengths: list[int], step: float = STEP_DEG) -> list[tuple[float, float]]:
    """Alternate north and east runs with a ~90° turn at every run boundary.

    The path has ``1 + sum(segment_lengths)`` points and turns at the
    cumulative run ends, excluding the last.
    """
    moves: list[tuple[int, int]] = []
    for k, steps in enumerate(segment_lengths):
        moves.extend([_NORTH if k % 2 == 0 else _EAST] * steps)
    return _walk(moves, step)


def make_square_loop(side: int, laps: int, step: float = STEP_DEG) -> list[tuple[float, float]]:
    """Drive round a square *laps* times; every lap repeats the same coordinates."""
    lap = [_NORTH] * side + [_EAST] * side + [_SOUTH] * side + [_WEST] * side
    return _walk(lap * laps, step)


def make_zigzag(angles: list[float], step: float = STEP_DEG) -> list[tuple[float, float]]:
    """Path near the equator turning by ``angles[k]`` degrees at point ``k + 1``.

    Turns alternate left and right so the heading stays bounded.
    """
    heading = 0.0
    headings = [heading]
    for k, a in enumerate(angles):
        heading += a if k % 2 == 0 else -a
        headings.append(heading)

    lon, lat = 0.0, 0.0
    points = [(lon, lat)]
    for h in headings:
        lon += step * math.sin(math.radians(h))
        lat += step * math.cos(math.radians(h))
        points.append((lon, lat))
    return points


def is_subsequence(result: list, source: list) -> bool:
    """True if *result* appears in *source* in the same relative order."""
    it = iter(source)
    return all(any(item == candidate for candidate in it) for item in result)
