"""In-memory polling station network.

StationNetwork owns two tables that always hold the same keys: the
station table (id -> Station) and the adjacency table
(id -> {neighbor id -> distance}). Both only change through the mutation
methods below, which decline invalid input with a logged warning instead
of raising, so the network is structurally valid after every call.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from ..domain.errors import StationNotFoundError
from ..domain.models import NearbyStation, NetworkStats, RouteResult, Station
from .dijkstra import dijkstra, dijkstra_within
from .radius import breadth_first_within


@dataclass
class StationNetwork:
    """Weighted, undirected network of polling stations.

    Not thread-safe: callers embedding a network in a multi-threaded host
    must serialize mutations and traversals themselves.

    Example:
        network = StationNetwork()
        network.add_station("PS001", "Downtown Center", "123 Main St", 1500)
        network.add_station("PS002", "Eastside School", "456 Oak Ave", 1200)
        network.add_connection("PS001", "PS002", 2.5)
        network.find_shortest_path("PS001", "PS002")  # ['PS001', 'PS002']
    """

    _stations: Dict[str, Station] = field(init=False, default_factory=dict, repr=False)
    _adjacency: Dict[str, Dict[str, float]] = field(init=False, default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._stations)

    def __contains__(self, station_id: object) -> bool:
        return station_id in self._stations

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_station(self, station_id: str, name: str, address: str, capacity: int) -> bool:
        """Register a new station with no connections.

        Args:
            station_id: Unique identifier for the station.
            name: Display name.
            address: Street address.
            capacity: Number of voters the station is sized for (>= 0).

        Returns:
            True if the station was added, False if it was declined
            because the id already exists or the capacity is negative.
        """
        if station_id in self._stations:
            self._logger.warning(
                "Station already exists",
                extra={"station_id": station_id},
            )
            return False

        if capacity < 0:
            self._logger.warning(
                "Station capacity must not be negative",
                extra={"station_id": station_id, "capacity": capacity},
            )
            return False

        self._stations[station_id] = Station(
            station_id=station_id,
            name=name,
            address=address,
            capacity=capacity,
        )
        self._adjacency[station_id] = {}
        self._logger.debug("Station added", extra={"station_id": station_id})
        return True

    def add_connection(self, station_a: str, station_b: str, distance: float) -> bool:
        """Connect two stations, or update the distance of an existing connection.

        Args:
            station_a: Identifier of one endpoint.
            station_b: Identifier of the other endpoint.
            distance: Finite, non-negative distance between them.

        Returns:
            True if the connection was stored, False if it was declined.
        """
        if station_a not in self._stations or station_b not in self._stations:
            self._logger.warning(
                "One or both stations do not exist",
                extra={"station_a": station_a, "station_b": station_b},
            )
            return False

        if station_a == station_b:
            self._logger.warning(
                "Cannot connect a station to itself",
                extra={"station_id": station_a},
            )
            return False

        if not math.isfinite(distance) or distance < 0:
            self._logger.warning(
                "Connection distance must be finite and non-negative",
                extra={
                    "station_a": station_a,
                    "station_b": station_b,
                    "distance": distance,
                },
            )
            return False

        self._adjacency[station_a][station_b] = distance
        self._adjacency[station_b][station_a] = distance
        self._logger.debug(
            "Connection stored",
            extra={"station_a": station_a, "station_b": station_b, "distance": distance},
        )
        return True

    def record_voters(self, station_id: str, total_voters: int) -> bool:
        """Set the voter count of a station. Over-capacity counts are allowed."""
        station = self._stations.get(station_id)
        if station is None or total_voters < 0:
            self._logger.warning(
                "Voter count not recorded",
                extra={"station_id": station_id, "total_voters": total_voters},
            )
            return False
        station.total_voters = total_voters
        if station.is_over_capacity:
            self._logger.info(
                "Station over capacity",
                extra={
                    "station_id": station_id,
                    "total_voters": total_voters,
                    "capacity": station.capacity,
                },
            )
        return True

    def set_active(self, station_id: str, active: bool) -> bool:
        """Open or close a station."""
        station = self._stations.get(station_id)
        if station is None:
            self._logger.warning("Station not found", extra={"station_id": station_id})
            return False
        station.is_active = active
        return True

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def stations(self) -> Mapping[str, Station]:
        """Read-only view of the station table."""
        return MappingProxyType(self._stations)

    @property
    def adjacency(self) -> Mapping[str, Mapping[str, float]]:
        """Read-only view of the adjacency table."""
        return MappingProxyType(
            {sid: MappingProxyType(neighbors) for sid, neighbors in self._adjacency.items()}
        )

    def get_station(self, station_id: str) -> Optional[Station]:
        return self._stations.get(station_id)

    def require_station(self, station_id: str) -> Station:
        """Get a station by id, raising if it is not in the network.

        Raises:
            StationNotFoundError: If the station is not found.
        """
        station = self._stations.get(station_id)
        if station is None:
            raise StationNotFoundError(
                f"Station not found: {station_id}",
                station_id=station_id,
            )
        return station

    def get_all_stations(self) -> Dict[str, Station]:
        """Return copies of every station.

        Neither the returned dict nor the stations in it are shared with
        the network.
        """
        return {sid: replace(station) for sid, station in self._stations.items()}

    def get_connected_stations(self, station_id: str) -> List[str]:
        return list(self._adjacency.get(station_id, {}))

    def get_distance(self, station_a: str, station_b: str) -> Optional[float]:
        """Return the distance of the direct connection, if there is one."""
        return self._adjacency.get(station_a, {}).get(station_b)

    def connections(self) -> Iterator[Tuple[str, str, float]]:
        """Yield every connection once as ``(station_a, station_b, distance)``."""
        seen = set()
        for station_a, neighbors in self._adjacency.items():
            for station_b, distance in neighbors.items():
                if station_b in seen:
                    continue
                yield station_a, station_b, distance
            seen.add(station_a)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def find_shortest_path(self, source_id: str, target_id: str) -> List[str]:
        """Return the station ids on a shortest path, or [] if there is none.

        An empty list means either an endpoint is unknown or the two
        stations are in different components; use ``in`` to tell them apart.
        """
        path, _ = dijkstra(self._adjacency, source_id, target_id)
        return path

    def shortest_route(self, source_id: str, target_id: str) -> RouteResult:
        """Like find_shortest_path, with the total distance of the route."""
        path, distance = dijkstra(self._adjacency, source_id, target_id)
        self._logger.debug(
            "Route computed",
            extra={
                "source": source_id,
                "target": target_id,
                "stops": len(path),
                "distance": distance,
            },
        )
        return RouteResult(path=tuple(path), total_distance=distance)

    def find_nearest_stations(self, source_id: str, max_distance: float) -> List[NearbyStation]:
        """Stations reachable within ``max_distance``, in discovery order.

        Each station keeps the cumulative distance of the route by which it
        was first discovered, which may be longer than its shortest route.
        See ``find_stations_within`` for the exact variant.
        """
        return [
            NearbyStation(station_id=sid, distance=distance)
            for sid, distance in breadth_first_within(self._adjacency, source_id, max_distance)
        ]

    def find_stations_within(self, source_id: str, max_distance: float) -> List[NearbyStation]:
        """Stations whose shortest distance is within ``max_distance``.

        Sorted by distance, then id. The source itself is excluded.
        """
        distances = dijkstra_within(self._adjacency, source_id, max_distance)
        hits = [
            NearbyStation(station_id=sid, distance=distance)
            for sid, distance in distances.items()
            if sid != source_id
        ]
        hits.sort(key=lambda hit: (hit.distance, hit.station_id))
        return hits

    def get_network_stats(self) -> NetworkStats:
        station_count = len(self._stations)
        connection_count = sum(len(n) for n in self._adjacency.values()) // 2
        average_degree = (
            2 * connection_count / station_count if station_count > 0 else 0.0
        )
        return NetworkStats(
            station_count=station_count,
            connection_count=connection_count,
            average_degree=average_degree,
        )
