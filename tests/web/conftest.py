"""Shared fixtures for web tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from waypoint_sampler.config import ENV_MAX_WAYPOINTS, ENV_MIN_TURN_ANGLE
from waypoint_sampler.web.app import app


@pytest.fixture
def client(monkeypatch):
    """FastAPI test client with default sampler settings."""
    monkeypatch.delenv(ENV_MAX_WAYPOINTS, raising=False)
    monkeypatch.delenv(ENV_MIN_TURN_ANGLE, raising=False)
    with TestClient(app) as c:
        yield c


def make_line(n: int, step: float = 0.001) -> list[list[float]]:
    """*n* collinear ``[lon, lat]`` positions heading north."""
    return [[0.0, i * step] for i in range(n)]
