"""Radius-bounded breadth-first expansion.

The search walks the network in FIFO order, accumulating distance along
the route by which each station is first discovered. A station is marked
visited as soon as it is enqueued and is never re-evaluated, so a
station first reached over a long route keeps that route's distance even
if a shorter one exists. The result answers "is there some discovered
path within the bound", not "is the shortest path within the bound";
``dijkstra_within`` answers the latter.
"""

from collections import deque
from typing import Deque, List, Mapping, Set, Tuple


def breadth_first_within(
    adjacency: Mapping[str, Mapping[str, float]],
    start: str,
    limit: float,
) -> List[Tuple[str, float]]:
    """List stations reachable from ``start`` within ``limit``.

    Returns ``(station_id, cumulative_distance)`` pairs in discovery
    order. The start station is never part of the result, and an unknown
    start yields an empty list.
    """
    if start not in adjacency:
        return []

    found: List[Tuple[str, float]] = []
    visited: Set[str] = {start}
    queue: Deque[Tuple[str, float]] = deque([(start, 0.0)])

    while queue:
        current, distance = queue.popleft()

        if current != start:
            found.append((current, distance))

        for neighbor, weight in adjacency[current].items():
            new_distance = distance + weight
            if neighbor not in visited and new_distance <= limit:
                visited.add(neighbor)
                queue.append((neighbor, new_distance))

    return found
