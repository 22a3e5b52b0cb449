"""Shared fixtures for the station network tests."""

import pytest

from election_monitor.config import reset_config
from election_monitor.network import StationNetwork


@pytest.fixture
def sample_network() -> StationNetwork:
    """Five stations, six connections.

    PS001-PS002 2.5, PS001-PS004 1.8, PS002-PS003 3.2,
    PS003-PS004 2.1, PS004-PS005 2.7, PS001-PS005 4.1
    """
    network = StationNetwork()
    network.add_station("PS001", "Downtown Center", "123 Main St", 1500)
    network.add_station("PS002", "Eastside School", "456 Oak Ave", 1200)
    network.add_station("PS003", "Westside Library", "789 Pine St", 800)
    network.add_station("PS004", "Central High", "321 Elm St", 2000)
    network.add_station("PS005", "North Community", "654 Cedar Blvd", 1000)

    network.add_connection("PS001", "PS002", 2.5)
    network.add_connection("PS001", "PS004", 1.8)
    network.add_connection("PS002", "PS003", 3.2)
    network.add_connection("PS003", "PS004", 2.1)
    network.add_connection("PS004", "PS005", 2.7)
    network.add_connection("PS001", "PS005", 4.1)
    return network


@pytest.fixture
def triangle_network() -> StationNetwork:
    network = StationNetwork()
    for station_id in ("P1", "P2", "P3"):
        network.add_station(station_id, f"Station {station_id}", "", 100)
    network.add_connection("P1", "P2", 2.5)
    network.add_connection("P2", "P3", 3.2)
    network.add_connection("P1", "P3", 10.0)
    return network


@pytest.fixture(autouse=True)
def fresh_config():
    """Make sure environment overrides never leak between tests."""
    reset_config()
    yield
    reset_config()
