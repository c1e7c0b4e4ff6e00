"""Nearest-neighbor tour construction."""

from __future__ import annotations

from typing import Iterable

from ...models.domain import GeoPoint, Stop
from ..geospatial import distance


def nearest_neighbor(depot: GeoPoint, stops: Iterable[Stop]) -> tuple[Stop, ...]:
    """Build a visiting order by always driving to the closest unvisited stop.

    Starts at ``depot``. Stops at exactly the same distance from the current
    location are ordered by ``stop_id`` so the result does not depend on the
    order in which the caller listed them. Every stop must carry a location.
    """

    unvisited = list(stops)
    if len(unvisited) <= 1:
        return tuple(unvisited)

    route: list[Stop] = []
    current = depot
    while unvisited:
        nearest_index = min(
            range(len(unvisited)),
            key=lambda index: (distance(current, unvisited[index].location), unvisited[index].stop_id),
        )
        nearest = unvisited.pop(nearest_index)
        route.append(nearest)
        current = nearest.location
    return tuple(route)
