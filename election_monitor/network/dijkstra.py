"""Shortest-path computation using Dijkstra's algorithm.

Both functions work on a symmetric adjacency mapping
``station_id -> {neighbor_id: distance}`` with non-negative distances.
Frontier entries are ``(distance, station_id)`` tuples, so among equal
distances ``heapq`` pops the smaller identifier first. That order is an
implementation detail; callers must not depend on which of several
equal-cost paths is returned.
"""

import heapq
import math
from typing import Dict, List, Mapping, Set, Tuple

Adjacency = Mapping[str, Mapping[str, float]]


def dijkstra(adjacency: Adjacency, start: str, end: str) -> Tuple[List[str], float]:
    """Compute the shortest path between two stations using Dijkstra.

    Parameters
    ----------
    adjacency:
        Symmetric adjacency mapping of the station network.
    start:
        Identifier of the departure station.
    end:
        Identifier of the arrival station.

    Returns
    -------
    list[str], float
        The sequence of station identifiers from ``start`` to ``end``
        (inclusive) and the total distance. ``start == end`` yields
        ``([start], 0.0)``. If either station is unknown or no path
        exists, returns ``([], float("inf"))``.
    """
    if start not in adjacency or end not in adjacency:
        return [], float("inf")

    distances: Dict[str, float] = {station: float("inf") for station in adjacency}
    previous: Dict[str, str] = {}
    distances[start] = 0.0

    heap: List[Tuple[float, str]] = [(0.0, start)]
    visited: Set[str] = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        # Stale entry left behind by a later, shorter relaxation.
        if u in visited:
            continue

        visited.add(u)

        if u == end:
            break

        for v, weight in adjacency[u].items():
            new_distance = current_distance + weight
            if new_distance < distances.get(v, float("inf")):
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    path: List[str] = [end]
    current = end
    while current in previous:
        current = previous[current]
        path.append(current)
    path.reverse()

    if path[0] != start:
        return [], float("inf")

    return path, distances[end]


def dijkstra_within(adjacency: Adjacency, start: str, limit: float) -> Dict[str, float]:
    """Return the shortest distance to every station no farther than ``limit``.

    The expansion stops relaxing as soon as a tentative distance exceeds
    ``limit``, so the cost is bounded by the part of the network inside
    the radius. The start station is included with distance ``0.0``.
    An unknown start or a NaN limit yields an empty mapping.
    """
    if start not in adjacency or math.isnan(limit):
        return {}

    settled: Dict[str, float] = {}
    best: Dict[str, float] = {start: 0.0}
    heap: List[Tuple[float, str]] = [(0.0, start)]

    while heap:
        current_distance, u = heapq.heappop(heap)
        if u in settled:
            continue
        settled[u] = current_distance

        for v, weight in adjacency[u].items():
            new_distance = current_distance + weight
            if new_distance > limit or v in settled:
                continue
            if new_distance < best.get(v, float("inf")):
                best[v] = new_distance
                heapq.heappush(heap, (new_distance, v))

    return settled
