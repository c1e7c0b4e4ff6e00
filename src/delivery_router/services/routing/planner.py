"""Route planning driver: construction, optional 2-opt, metrics."""

from __future__ import annotations

import logging
from typing import Iterable

from pydantic import BaseModel, Field

from ...config import settings
from ...models.domain import GeoPoint, Stop
from .construction import nearest_neighbor
from .errors import DuplicateStop, InvalidConfiguration, MissingCoordinate
from .improvement import tour_length, two_opt
from .metrics import evaluate
from .models import RoutePlan, Strategy

# 2-opt needs two non-adjacent edges that do not both touch the depot.
MIN_STOPS_FOR_IMPROVEMENT = 4

logger = logging.getLogger(__name__)


class PlanningOptions(BaseModel):
    """Tunable inputs of a single planning call.

    Range checks are done by :func:`plan_route` so that bad values surface as
    :class:`InvalidConfiguration` rather than pydantic validation errors.
    """

    strategy: Strategy = Field(default_factory=lambda: Strategy(settings.default_strategy))
    average_speed_kmh: float = Field(default_factory=lambda: settings.average_speed_kmh)
    dwell_minutes_per_stop: float = Field(default_factory=lambda: settings.dwell_minutes_per_stop)


def _validate_options(options: PlanningOptions) -> None:
    if not options.average_speed_kmh > 0:
        raise InvalidConfiguration(
            f"average_speed_kmh must be positive, got {options.average_speed_kmh}."
        )
    if not options.dwell_minutes_per_stop >= 0:
        raise InvalidConfiguration(
            f"dwell_minutes_per_stop must not be negative, got {options.dwell_minutes_per_stop}."
        )


def _validate_stops(stops: list[Stop]) -> None:
    seen: set[str] = set()
    for stop in stops:
        if stop.location is None:
            raise MissingCoordinate(stop.stop_id)
        if stop.stop_id in seen:
            raise DuplicateStop(stop.stop_id)
        seen.add(stop.stop_id)


def plan_route(
    depot: GeoPoint,
    stops: Iterable[Stop],
    strategy: Strategy | str | None = None,
    *,
    options: PlanningOptions | None = None,
) -> RoutePlan:
    """Order ``stops`` into a depot round trip and summarize it.

    ``strategy`` overrides ``options.strategy`` when given. All inputs are
    validated before any distance is computed; the function has no side
    effects and returns the same plan for the same inputs.
    """

    options = options or PlanningOptions()
    chosen = strategy if strategy is not None else options.strategy
    try:
        chosen = Strategy(chosen)
    except ValueError as exc:
        raise InvalidConfiguration(f"Unknown strategy '{chosen}'.") from exc
    _validate_options(options)

    stop_list = list(stops)
    _validate_stops(stop_list)

    order = nearest_neighbor(depot, stop_list)
    initial_distance = tour_length(depot, order)
    improved = False
    if chosen is Strategy.CONSTRUCTION_PLUS_2OPT and len(order) >= MIN_STOPS_FOR_IMPROVEMENT:
        order = two_opt(depot, order)
        improved = True

    metrics = evaluate(
        depot,
        order,
        average_speed_kmh=options.average_speed_kmh,
        dwell_minutes_per_stop=options.dwell_minutes_per_stop,
    )
    if improved:
        logger.debug(
            f"2-opt shortened route from {initial_distance:.3f}km to {metrics.total_distance_km:.3f}km"
        )
    logger.info(
        f"Planned {metrics.stop_count} stops with {chosen.value}: "
        f"{metrics.total_distance_km:.1f}km, {metrics.estimated_duration_hours:.2f}h"
    )
    return RoutePlan(
        order=order,
        metrics=metrics,
        strategy=chosen,
        improved=improved,
        initial_distance_km=initial_distance,
    )
