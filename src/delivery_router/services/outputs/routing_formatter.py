"""Serializers for routing outputs."""

from __future__ import annotations

import csv
import io
from typing import Any, Mapping

from ...models.domain import Depot
from ..routing.metrics import format_duration
from ..routing.models import RoutePlan


def _payload_text(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    return "" if value is None else str(value).strip()


def routing_plan_to_json(plan: RoutePlan, depot: Depot) -> dict:
    metrics = plan.metrics
    return {
        "depot": {
            "code": depot.code,
            "name": depot.name,
            "latitude": depot.location.latitude,
            "longitude": depot.location.longitude,
        },
        "strategy": plan.strategy.value,
        "total_distance_km": metrics.total_distance_km,
        "return_leg_km": metrics.return_leg_km,
        "estimated_duration_hours": metrics.estimated_duration_hours,
        "stop_count": metrics.stop_count,
        "stops": [
            {
                "stop_id": route_stop.stop.stop_id,
                "position": route_stop.position,
                "latitude": route_stop.stop.location.latitude,
                "longitude": route_stop.stop.location.longitude,
                "leg_distance_km": route_stop.leg_distance_km,
                "cumulative_distance_km": route_stop.cumulative_distance_km,
                "payload": dict(route_stop.stop.payload),
            }
            for route_stop in metrics.stops
        ],
    }


def routing_plan_to_csv(plan: RoutePlan) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "position",
        "stop_id",
        "customer_name",
        "city",
        "address",
        "latitude",
        "longitude",
        "leg_distance_km",
        "cumulative_distance_km",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for route_stop in plan.metrics.stops:
        payload = route_stop.stop.payload
        writer.writerow(
            {
                "position": route_stop.position,
                "stop_id": route_stop.stop.stop_id,
                "customer_name": _payload_text(payload, "customer_name"),
                "city": _payload_text(payload, "city"),
                "address": _payload_text(payload, "address"),
                "latitude": route_stop.stop.location.latitude,
                "longitude": route_stop.stop.location.longitude,
                "leg_distance_km": f"{route_stop.leg_distance_km:.3f}",
                "cumulative_distance_km": f"{route_stop.cumulative_distance_km:.3f}",
            }
        )
    return buffer.getvalue()


def routing_plan_to_itinerary(plan: RoutePlan, depot: Depot, title: str | None = None) -> str:
    """Plain-text driver itinerary, one numbered line per stop."""
    lines: list[str] = []
    if title:
        lines.append(title)
    lines.append(f"Start: {depot.name}")
    lines.append(f"Total distance: {plan.metrics.total_distance_km:.1f} km")
    lines.append(f"Estimated time: {format_duration(plan.metrics.estimated_duration_hours)} h")
    lines.append("")
    for route_stop in plan.metrics.stops:
        payload = route_stop.stop.payload
        name = _payload_text(payload, "customer_name") or route_stop.stop.stop_id
        place = ", ".join(
            part for part in (_payload_text(payload, "city"), _payload_text(payload, "address")) if part
        )
        line = f"{route_stop.position}. {name}"
        if place:
            line += f" - {place}"
        phone = _payload_text(payload, "phone")
        if phone:
            line += f" - tel: {phone}"
        lines.append(line)
    lines.append("")
    lines.append(f"Return to: {depot.name}")
    return "\n".join(lines)
