"""Domain models for delivery stops and depots."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A latitude/longitude pair in signed decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class Stop:
    """One delivery destination.

    ``location`` is ``None`` while the stop's address has not been resolved to
    coordinates. ``payload`` carries caller data (customer name, address,
    items, amount) and is passed through untouched.
    """

    stop_id: str
    location: Optional[GeoPoint]
    payload: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)


@dataclass(frozen=True, slots=True)
class Depot:
    """Represents a named start/end location for routes."""

    code: str
    name: str
    location: GeoPoint
