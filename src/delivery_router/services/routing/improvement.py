"""2-opt local search over a closed depot tour."""

from __future__ import annotations

import logging
from typing import Sequence

from ...models.domain import GeoPoint, Stop
from ..geospatial import distance

# Gains smaller than this are floating point noise; accepting them could cycle forever.
IMPROVEMENT_EPSILON_KM = 1e-9

logger = logging.getLogger(__name__)


def tour_length(depot: GeoPoint, order: Sequence[Stop]) -> float:
    """Length of depot -> stops -> depot in kilometers."""

    points = [depot, *(stop.location for stop in order)]
    if len(points) == 1:
        return 0.0
    return sum(distance(points[k], points[(k + 1) % len(points)]) for k in range(len(points)))


def two_opt(depot: GeoPoint, order: Sequence[Stop]) -> tuple[Stop, ...]:
    """Shorten a tour by reversing segments until no 2-opt move helps.

    The tour is ``depot, s1 .. sn`` with a closing edge ``sn -> depot``. For
    every pair of non-adjacent edges ``(i, i+1)`` and ``(j, j+1)`` the segment
    ``i+1 .. j`` is reversed whenever that makes the two replacement edges
    shorter than the two removed ones. The depot stays in front. Passes repeat
    until one completes without a move. ``order`` itself is not modified.
    """

    route = list(order)
    if len(route) < 4:
        return tuple(route)

    nodes: list[GeoPoint] = [depot, *(stop.location for stop in route)]
    size = len(nodes)
    passes = 0
    moves = 0
    improved = True
    while improved:
        improved = False
        passes += 1
        for i in range(size - 2):
            for j in range(i + 2, size):
                if i == 0 and j == size - 1:
                    continue  # both edges touch the depot
                a, b = nodes[i], nodes[i + 1]
                c, d = nodes[j], nodes[(j + 1) % size]
                delta = distance(a, c) + distance(b, d) - distance(a, b) - distance(c, d)
                if delta < -IMPROVEMENT_EPSILON_KM:
                    # nodes[k] is route[k - 1]
                    nodes[i + 1 : j + 1] = reversed(nodes[i + 1 : j + 1])
                    route[i:j] = reversed(route[i:j])
                    moves += 1
                    improved = True

    logger.debug(f"2-opt converged after {passes} passes and {moves} moves on {len(route)} stops")
    return tuple(route)
