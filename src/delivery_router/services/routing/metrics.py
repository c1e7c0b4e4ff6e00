"""Distance and time summaries for an ordered route."""

from __future__ import annotations

import math
from typing import Sequence

from ...config import settings
from ...models.domain import GeoPoint, Stop
from ..geospatial import distance
from .models import RouteMetrics, RouteStop


def evaluate(
    depot: GeoPoint,
    order: Sequence[Stop],
    *,
    average_speed_kmh: float | None = None,
    dwell_minutes_per_stop: float | None = None,
) -> RouteMetrics:
    """Walk ``order`` from the depot and back, collecting per-leg distances.

    The return leg counts towards ``total_distance_km`` but is not attributed
    to any stop. Duration is driving time at ``average_speed_kmh`` plus a
    fixed dwell per stop, in fractional hours.
    """

    speed = settings.average_speed_kmh if average_speed_kmh is None else average_speed_kmh
    dwell = settings.dwell_minutes_per_stop if dwell_minutes_per_stop is None else dwell_minutes_per_stop

    route_stops: list[RouteStop] = []
    cumulative = 0.0
    current = depot
    for position, stop in enumerate(order, start=1):
        leg = distance(current, stop.location)
        cumulative += leg
        route_stops.append(
            RouteStop(
                stop=stop,
                position=position,
                leg_distance_km=leg,
                cumulative_distance_km=cumulative,
            )
        )
        current = stop.location

    return_leg = distance(current, depot) if route_stops else 0.0
    total_distance = cumulative + return_leg
    driving_hours = total_distance / speed
    dwell_hours = len(route_stops) * dwell / 60.0
    return RouteMetrics(
        stops=tuple(route_stops),
        return_leg_km=return_leg,
        total_distance_km=total_distance,
        driving_hours=driving_hours,
        dwell_hours=dwell_hours,
        estimated_duration_hours=driving_hours + dwell_hours,
    )


def format_duration(hours: float) -> str:
    """Render fractional hours as ``H:MM``."""

    whole_hours = math.floor(hours)
    minutes = round((hours - whole_hours) * 60)
    if minutes == 60:
        whole_hours += 1
        minutes = 0
    return f"{whole_hours}:{minutes:02d}"
