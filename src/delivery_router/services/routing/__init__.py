"""Route optimization engine."""

from .construction import nearest_neighbor
from .errors import (
    DuplicateStop,
    InvalidConfiguration,
    MissingCoordinate,
    RoutePlanningError,
    UnknownDepot,
)
from .improvement import tour_length, two_opt
from .metrics import evaluate, format_duration
from .models import RouteMetrics, RoutePlan, RouteStop, Strategy
from .planner import PlanningOptions, plan_route

__all__ = [
    "nearest_neighbor",
    "two_opt",
    "tour_length",
    "evaluate",
    "format_duration",
    "plan_route",
    "PlanningOptions",
    "RouteMetrics",
    "RoutePlan",
    "RouteStop",
    "Strategy",
    "RoutePlanningError",
    "MissingCoordinate",
    "DuplicateStop",
    "InvalidConfiguration",
    "UnknownDepot",
]
