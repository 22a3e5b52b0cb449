"""Coordination service - the network as seen by its collaborators.

Incident processing asks which stations can help near an incident site;
report generation asks for aggregate figures and a station snapshot.
Unlike the network, this service raises typed errors so callers can tell
an unknown station from an unreachable one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import NetworkConfig, get_config
from ..domain.errors import NoRouteFoundError
from ..domain.models import NearbyStation, NetworkSummary, RouteResult
from ..ports.network import StationNetworkPort


@dataclass
class CoordinationService:
    """Serve incident coordination and reporting queries over a network.

    Attributes:
        network: The station network to query (any StationNetworkPort)
        config: Network configuration (default search radius)
    """

    network: StationNetworkPort
    config: NetworkConfig = field(default_factory=lambda: get_config().network)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def coordination_targets(
        self, station_id: str, radius: Optional[float] = None
    ) -> List[NearbyStation]:
        """Find stations to coordinate with around an incident site.

        Args:
            station_id: Station where the incident was reported.
            radius: Search radius in km; defaults to the configured radius.

        Returns:
            Nearby stations in discovery order, possibly empty.

        Raises:
            StationNotFoundError: If the station is not in the network.
        """
        self.network.require_station(station_id)
        if radius is None:
            radius = self.config.default_search_radius_km

        targets = self.network.find_nearest_stations(station_id, radius)
        self._logger.info(
            "Coordination targets found",
            extra={"station_id": station_id, "radius_km": radius, "targets": len(targets)},
        )
        return targets

    def route_between(self, source_id: str, target_id: str) -> RouteResult:
        """Find the shortest route between two stations.

        Raises:
            StationNotFoundError: If either station is not in the network.
            NoRouteFoundError: If the stations are not connected.
        """
        self.network.require_station(source_id)
        self.network.require_station(target_id)

        route = self.network.shortest_route(source_id, target_id)
        if route.is_empty:
            self._logger.warning(
                "No route found",
                extra={"source": source_id, "target": target_id},
            )
            raise NoRouteFoundError(
                f"No path from {source_id} to {target_id}",
                source=source_id,
                target=target_id,
            )
        return route

    def summary(self) -> NetworkSummary:
        """Build the snapshot used by the summary report."""
        stations = self.network.get_all_stations()
        return NetworkSummary(
            stats=self.network.get_network_stats(),
            stations=stations,
            over_capacity=tuple(
                sid for sid, station in sorted(stations.items()) if station.is_over_capacity
            ),
            inactive=tuple(
                sid for sid, station in sorted(stations.items()) if not station.is_active
            ),
        )
