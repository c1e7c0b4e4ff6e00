"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from ...models.domain import Stop


class Strategy(str, Enum):
    CONSTRUCTION_ONLY = "construction_only"
    CONSTRUCTION_PLUS_2OPT = "construction_plus_2opt"


@dataclass(frozen=True, slots=True)
class RouteStop:
    stop: Stop
    position: int
    leg_distance_km: float
    cumulative_distance_km: float


@dataclass(frozen=True, slots=True)
class RouteMetrics:
    stops: Tuple[RouteStop, ...]
    return_leg_km: float
    total_distance_km: float
    driving_hours: float
    dwell_hours: float
    estimated_duration_hours: float

    @property
    def stop_count(self) -> int:
        return len(self.stops)


@dataclass(frozen=True, slots=True)
class RoutePlan:
    order: Tuple[Stop, ...]
    metrics: RouteMetrics
    strategy: Strategy
    improved: bool
    initial_distance_km: float
