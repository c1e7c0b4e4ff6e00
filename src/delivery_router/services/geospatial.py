"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Sequence

from shapely.geometry import LineString

from ..models.domain import GeoPoint

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # rounding can push a just outside [0, 1] for near-antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in kilometers between two points."""

    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)


def path_is_simple(points: Sequence[GeoPoint]) -> bool:
    """Return True if the polyline through ``points`` never crosses itself.

    Coordinates are treated as planar (lon, lat), which is adequate for the
    city-scale distances a single delivery day covers. A path that starts and
    ends at the same point is treated as a closed ring.
    """

    if len(points) < 4:
        return True
    line = LineString([(point.longitude, point.latitude) for point in points])
    return line.is_simple
