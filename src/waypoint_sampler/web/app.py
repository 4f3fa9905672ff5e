"""FastAPI Web application exposing waypoint sampling."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException

from waypoint_sampler.config import SamplerConfig
from waypoint_sampler.web.schemas import (
    HealthResponse,
    NavPointSchema,
    PlanRequest,
    PlanResponse,
    WaypointsRequest,
    WaypointsResponse,
)
from waypoint_sampler.web.service import WaypointService

load_dotenv()  # loads .env from project root; must run before env vars are consumed

_logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

VERSION = "0.1.0"

app = FastAPI(title="Waypoint Sampler", version=VERSION)


def _service() -> WaypointService:
    return WaypointService(SamplerConfig.from_env())


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=VERSION)


@app.post("/api/waypoints", response_model=WaypointsResponse)
def sample_waypoints(req: WaypointsRequest) -> WaypointsResponse:
    """Reduce a coordinate list to a bounded, shape-preserving waypoint list."""
    svc = _service()
    try:
        result = svc.sample(req)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except Exception as exc:
        _logger.exception("Waypoint sampling failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return WaypointsResponse(
        waypoints=result.waypoints,
        original_count=result.original_count,
        sampled_count=result.sampled_count,
        turn_count=result.turn_count,
    )


@app.post("/api/plan", response_model=PlanResponse)
def plan_route(req: PlanRequest) -> PlanResponse:
    """Split a route LineString into origin, destination and sampled waypoints."""
    svc = _service()
    try:
        plan = svc.plan(req)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except Exception as exc:
        _logger.exception("Route plan failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return PlanResponse(
        origin=NavPointSchema(**plan.origin.to_dict()),
        destination=NavPointSchema(**plan.destination.to_dict()),
        waypoints=[NavPointSchema(**w.to_dict()) for w in plan.waypoints],
        total_coordinates=plan.total_coordinates,
        turn_count=plan.turn_count,
    )
