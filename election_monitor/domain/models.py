"""Domain models for the election monitor.

Stations are the only mutable model: their voter count and active flag
change during an election day. Everything returned by network queries is
a frozen dataclass with slots.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator, Mapping


@dataclass(eq=False, slots=True)
class Station:
    """A polling station.

    Identity is the ``station_id``: two stations compare equal when their
    identifiers match, whatever their other attributes.

    Attributes:
        station_id: Unique identifier (e.g., 'PS001')
        name: Human-readable station name
        address: Street address
        capacity: Number of voters the station is sized for
        created_at: When the station was registered
        total_voters: Voters recorded so far, may exceed capacity
        is_active: Whether the station is currently open
    """

    station_id: str
    name: str
    address: str
    capacity: int
    created_at: datetime = field(default_factory=datetime.now)
    total_voters: int = 0
    is_active: bool = True

    @property
    def utilization_rate(self) -> float:
        """Return voters over capacity, 0.0 for a zero-capacity station."""
        if self.capacity > 0:
            return self.total_voters / self.capacity
        return 0.0

    @property
    def is_over_capacity(self) -> bool:
        return self.total_voters > self.capacity

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Station):
            return NotImplemented
        return self.station_id == other.station_id

    def __hash__(self) -> int:
        return hash(self.station_id)


@dataclass(frozen=True, slots=True)
class NearbyStation:
    """A station found by a radius search.

    Attributes:
        station_id: Identifier of the station reached
        distance: Cumulative distance from the search origin
    """

    station_id: str
    distance: float

    def __iter__(self) -> Iterator[object]:
        yield self.station_id
        yield self.distance


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of route computation between stations.

    Attributes:
        path: Ordered tuple of station ids forming the route
        total_distance: Sum of the connection distances along the path
    """

    path: tuple[str, ...]
    total_distance: float

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of stations in the route."""
        return len(self.path)


@dataclass(frozen=True, slots=True)
class NetworkStats:
    """Aggregate figures for a station network.

    Attributes:
        station_count: Number of stations
        connection_count: Number of undirected connections
        average_degree: Mean number of connections per station
    """

    station_count: int
    connection_count: int
    average_degree: float


@dataclass(frozen=True, slots=True)
class NetworkSummary:
    """Snapshot handed to the summary report generator.

    Attributes:
        stats: Aggregate network figures
        stations: Copies of every station keyed by id
        over_capacity: Ids of stations whose voters exceed capacity
        inactive: Ids of stations that are closed
    """

    stats: NetworkStats
    stations: Mapping[str, Station] = field(default_factory=dict)
    over_capacity: tuple[str, ...] = field(default_factory=tuple)
    inactive: tuple[str, ...] = field(default_factory=tuple)
