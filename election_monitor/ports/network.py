"""Network ports - Abstractions for loading and querying the station network.

These protocols define the contracts between the station network and
the components around it: the repository that builds a network from
stored data, and the collaborators (incident processing, reporting) that
only read from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Protocol

if TYPE_CHECKING:
    from ..domain.models import NearbyStation, NetworkStats, RouteResult, Station
    from ..network.station_network import StationNetwork


class NetworkRepositoryPort(Protocol):
    """Port for loading network data.

    Implementation: adapters/network/csv_repository.py
    """

    def load(self) -> StationNetwork:
        """Load the station network.

        Returns:
            A populated StationNetwork.
        """
        ...


class StationNetworkPort(Protocol):
    """Queries the coordination service runs for incident processing and reporting.

    Implementation: network/station_network.py
    """

    def find_nearest_stations(
        self, source_id: str, max_distance: float
    ) -> List[NearbyStation]:
        """Stations reachable within a distance, in discovery order.

        Args:
            source_id: Station the search starts from (excluded from results).
            max_distance: Inclusive bound on cumulative distance.
        """
        ...

    def get_network_stats(self) -> NetworkStats:
        """Return station count, connection count and average degree."""
        ...

    def get_all_stations(self) -> Dict[str, Station]:
        """Return a snapshot of every station that is safe to mutate."""
        ...

    def require_station(self, station_id: str) -> Station:
        """Get a station by id.

        Raises:
            StationNotFoundError: If the station is not in the network.
        """
        ...

    def shortest_route(self, source_id: str, target_id: str) -> RouteResult:
        """Shortest route, empty when an endpoint is unknown or unreachable."""
        ...
