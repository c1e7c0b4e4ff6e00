"""Routing request/response schemas."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class GeoPointModel(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class StopModel(BaseModel):
    """A delivery stop as supplied by the caller."""
    stop_id: str = Field(..., min_length=1)
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    payload: Dict[str, Any] = Field(
        default_factory=dict,
        description="Opaque caller data (customer name, address, city, phone, items, amount).",
    )


class RoutingRequest(BaseModel):
    stops: List[StopModel] = Field(default_factory=list)
    depot: Optional[GeoPointModel] = Field(default=None, description="Explicit start/end coordinates.")
    depot_code: Optional[str] = Field(default=None, description="Named depot preset, e.g. 'HAIFA'.")
    delivery_date: Optional[date] = Field(
        default=None,
        description="Pick the depot from the weekday schedule when no depot is given.",
    )
    strategy: Optional[Literal["construction_only", "construction_plus_2opt"]] = None
    average_speed_kmh: Optional[float] = None
    dwell_minutes_per_stop: Optional[float] = None


class DepotModel(BaseModel):
    code: str
    name: str
    latitude: float
    longitude: float


class RouteStopModel(BaseModel):
    stop_id: str
    position: int
    latitude: float
    longitude: float
    leg_distance_km: float
    cumulative_distance_km: float
    payload: Dict[str, Any]


class RoutingResponse(BaseModel):
    depot: DepotModel
    strategy: str
    total_distance_km: float
    return_leg_km: float
    estimated_duration_hours: float
    stop_count: int
    stops: List[RouteStopModel]
    metadata: dict
