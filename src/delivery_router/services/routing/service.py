"""Routing orchestration service."""

from __future__ import annotations

import logging
from typing import Sequence

from ...config import settings
from ...data.depot_repository import depot_for_date, resolve_depot
from ...models.domain import Depot, GeoPoint, Stop
from ...schemas.routing import RoutingRequest, RoutingResponse, StopModel
from ..geospatial import path_is_simple
from ..outputs.routing_formatter import routing_plan_to_json
from .errors import UnknownDepot
from .metrics import format_duration
from .models import RoutePlan
from .planner import PlanningOptions, plan_route

logger = logging.getLogger(__name__)


def _resolve_request_depot(payload: RoutingRequest) -> Depot:
    if payload.depot is not None:
        return Depot(
            code="CUSTOM",
            name="Custom depot",
            location=GeoPoint(payload.depot.latitude, payload.depot.longitude),
        )
    if payload.depot_code:
        depot = resolve_depot(payload.depot_code)
        if depot is None:
            raise UnknownDepot(payload.depot_code)
        return depot
    if payload.delivery_date is not None:
        return depot_for_date(payload.delivery_date)
    depot = resolve_depot(settings.default_depot)
    if depot is None:
        raise UnknownDepot(settings.default_depot)
    return depot


def _to_stops(models: Sequence[StopModel]) -> list[Stop]:
    stops: list[Stop] = []
    for model in models:
        location = None
        if model.latitude is not None and model.longitude is not None:
            location = GeoPoint(model.latitude, model.longitude)
        stops.append(Stop(stop_id=model.stop_id, location=location, payload=model.payload))
    return stops


def _build_options(payload: RoutingRequest) -> PlanningOptions:
    base = PlanningOptions()
    return PlanningOptions(
        strategy=payload.strategy if payload.strategy is not None else base.strategy,
        average_speed_kmh=payload.average_speed_kmh
        if payload.average_speed_kmh is not None
        else base.average_speed_kmh,
        dwell_minutes_per_stop=payload.dwell_minutes_per_stop
        if payload.dwell_minutes_per_stop is not None
        else base.dwell_minutes_per_stop,
    )


def _route_overlay(depot: Depot, plan: RoutePlan) -> list[tuple[float, float]]:
    """Polyline coordinates (lat, lon) depot -> stops -> depot for map display."""
    if not plan.order:
        return []
    points = [depot.location, *(stop.location for stop in plan.order), depot.location]
    return [(point.latitude, point.longitude) for point in points]


def build_plan(payload: RoutingRequest) -> tuple[RoutePlan, Depot]:
    depot = _resolve_request_depot(payload)
    stops = _to_stops(payload.stops)
    plan = plan_route(depot.location, stops, options=_build_options(payload))
    return plan, depot


def optimize_route(payload: RoutingRequest) -> RoutingResponse:
    plan, depot = build_plan(payload)

    overlay = _route_overlay(depot, plan)
    crossing_free = path_is_simple([depot.location, *(stop.location for stop in plan.order), depot.location])
    if not crossing_free:
        logger.info(f"Route from {depot.code} with {len(plan.order)} stops still crosses itself")

    metadata = {
        "status": "empty" if not plan.order else "complete",
        "improved": plan.improved,
        "initial_distance_km": plan.initial_distance_km,
        "crossing_free": crossing_free,
        "estimated_duration": format_duration(plan.metrics.estimated_duration_hours),
        "driving_hours": plan.metrics.driving_hours,
        "dwell_hours": plan.metrics.dwell_hours,
    }
    if overlay:
        metadata["map_overlays"] = {"route": overlay}

    return RoutingResponse(**routing_plan_to_json(plan, depot), metadata=metadata)
