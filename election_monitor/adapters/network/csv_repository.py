"""CSV Network Repository adapter.

Builds a StationNetwork from two CSV files:

- stations file: ``station_id,name,address,capacity``
- connections file: ``station_a,station_b,distance_km``

Rows are fed through the network's own mutation methods, so duplicate
stations, self-loops and dangling connections are declined and logged
exactly as they would be for any other caller.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, Optional, TextIO

from ...config import NetworkConfig, get_config
from ...domain.errors import NetworkDataError
from ...network.station_network import StationNetwork


def _read_rows(f: TextIO) -> Iterator[Dict[str, str]]:
    """Yield CSV rows as dicts, rejecting rows shorter than the header."""
    reader = csv.DictReader(f)
    for row in reader:
        if None in row.values():
            raise ValueError(
                f"line {reader.line_num}: expected {len(reader.fieldnames or ())} fields"
            )
        yield row


@dataclass
class CSVNetworkRepository:
    """Network repository that loads from CSV files.

    This adapter implements NetworkRepositoryPort.

    Attributes:
        config: Network configuration (paths, file names)
    """

    config: NetworkConfig = field(default_factory=lambda: get_config().network)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _network: Optional[StationNetwork] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> StationNetwork:
        """Load the station network from CSV files.

        Returns:
            The populated network. Subsequent calls return the same instance
            until clear_cache() is called.

        Raises:
            NetworkDataError: If a file is missing or holds malformed rows.
        """
        if self._network is not None:
            return self._network

        self._logger.debug(
            "Loading network",
            extra={
                "stations_path": str(self.config.stations_path),
                "connections_path": str(self.config.connections_path),
            },
        )

        network = StationNetwork()
        self._load_stations(network, self.config.stations_path)
        self._load_connections(network, self.config.connections_path)

        stats = network.get_network_stats()
        self._logger.info(
            "Network loaded",
            extra={
                "stations": stats.station_count,
                "connections": stats.connection_count,
            },
        )
        self._network = network
        return network

    def _load_stations(self, network: StationNetwork, path: Path) -> None:
        try:
            with path.open(newline="", encoding="utf-8") as f:
                for row in _read_rows(f):
                    station_id = row["station_id"].strip()
                    if not station_id:
                        continue
                    capacity_str = (row.get("capacity") or "").strip()
                    network.add_station(
                        station_id,
                        (row.get("name") or "").strip() or station_id,
                        (row.get("address") or "").strip(),
                        int(capacity_str) if capacity_str else 0,
                    )
        except FileNotFoundError as e:
            raise NetworkDataError(
                "Stations file not found, set EMS_NETWORK_DATA_DIR to the data directory",
                file_path=str(path),
                cause=e,
            )
        except (OSError, KeyError, ValueError, csv.Error) as e:
            raise NetworkDataError(
                f"Failed to load stations: {e}",
                file_path=str(path),
                cause=e,
            )

    def _load_connections(self, network: StationNetwork, path: Path) -> None:
        try:
            with path.open(newline="", encoding="utf-8") as f:
                for row in _read_rows(f):
                    station_a = row["station_a"].strip()
                    station_b = row["station_b"].strip()
                    distance_str = row["distance_km"].strip()

                    if not station_a or not station_b or not distance_str:
                        continue

                    network.add_connection(station_a, station_b, float(distance_str))
        except (OSError, KeyError, ValueError, csv.Error) as e:
            raise NetworkDataError(
                f"Failed to load connections: {e}",
                file_path=str(path),
                cause=e,
            )

    def clear_cache(self) -> None:
        """Drop the cached network so the next load() re-reads the files."""
        self._network = None
        self._logger.debug("Network cache cleared")
