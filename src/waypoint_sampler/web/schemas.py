"""Pydantic request/response schemas for the Web API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    version: str


class WaypointsRequest(BaseModel):
    coordinates: list[tuple[float, float]]
    max_waypoints: int | None = None
    min_turn_angle_deg: float | None = None


class WaypointsResponse(BaseModel):
    waypoints: list[tuple[float, float]]
    original_count: int
    sampled_count: int
    turn_count: int


class PlanRequest(BaseModel):
    geometry: dict[str, Any]
    max_waypoints: int | None = None
    min_turn_angle_deg: float | None = None


class NavPointSchema(BaseModel):
    latitude: float
    longitude: float


class PlanResponse(BaseModel):
    origin: NavPointSchema
    destination: NavPointSchema
    waypoints: list[NavPointSchema]
    total_coordinates: int
    turn_count: int
