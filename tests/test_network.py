"""Tests for the StationNetwork aggregate."""

import logging
import math

import pytest

from election_monitor.domain.errors import StationNotFoundError
from election_monitor.domain.models import NearbyStation, NetworkStats, Station
from election_monitor.network import StationNetwork


class TestAddStation:
    def test_add_station_creates_station_and_empty_neighbors(self):
        network = StationNetwork()

        assert network.add_station("PS001", "Downtown Center", "123 Main St", 1500)

        station = network.get_station("PS001")
        assert station is not None
        assert station.name == "Downtown Center"
        assert station.address == "123 Main St"
        assert station.capacity == 1500
        assert station.total_voters == 0
        assert station.is_active
        assert network.adjacency["PS001"] == {}
        assert "PS001" in network
        assert len(network) == 1

    def test_duplicate_station_keeps_original_attributes(self, caplog):
        network = StationNetwork()
        network.add_station("PS001", "Original", "1 First St", 100)

        with caplog.at_level(logging.WARNING):
            added = network.add_station("PS001", "Replacement", "2 Second St", 999)

        assert added is False
        station = network.get_station("PS001")
        assert station.name == "Original"
        assert station.address == "1 First St"
        assert station.capacity == 100
        assert len(network) == 1
        assert "Station already exists" in caplog.text

    def test_negative_capacity_is_declined(self):
        network = StationNetwork()

        assert network.add_station("PS001", "Bad", "", -1) is False
        assert "PS001" not in network
        assert "PS001" not in network.adjacency

    def test_zero_capacity_is_allowed(self):
        network = StationNetwork()

        assert network.add_station("PS001", "Pop-up", "", 0)
        assert network.get_station("PS001").utilization_rate == 0.0

    def test_constructor_takes_no_tables(self):
        station = Station("A", "Alpha", "", 10)

        with pytest.raises(TypeError):
            StationNetwork(_stations={"A": station})
        with pytest.raises(TypeError):
            StationNetwork(_adjacency={"A": {}})

    def test_station_and_adjacency_keys_stay_in_lockstep(self, sample_network):
        sample_network.add_station("PS001", "Duplicate", "", 1)
        sample_network.add_station("PS006", "Rural Hall", "", 50)
        sample_network.add_station("PS007", "Bad", "", -1)

        assert set(sample_network.stations) == set(sample_network.adjacency)


class TestAddConnection:
    def test_connection_is_symmetric(self, triangle_network):
        adjacency = triangle_network.adjacency

        assert adjacency["P1"]["P2"] == adjacency["P2"]["P1"] == 2.5
        assert "P2" in triangle_network.get_connected_stations("P1")
        assert "P1" in triangle_network.get_connected_stations("P2")

    def test_readding_connection_updates_distance(self, triangle_network):
        assert triangle_network.add_connection("P2", "P1", 1.0)

        assert triangle_network.get_distance("P1", "P2") == 1.0
        assert triangle_network.get_distance("P2", "P1") == 1.0
        assert triangle_network.get_network_stats().connection_count == 3

    def test_self_loop_is_declined(self, triangle_network, caplog):
        before = dict(triangle_network.adjacency["P1"])

        with caplog.at_level(logging.WARNING):
            added = triangle_network.add_connection("P1", "P1", 1.0)

        assert added is False
        assert dict(triangle_network.adjacency["P1"]) == before
        assert "Cannot connect a station to itself" in caplog.text

    def test_unknown_endpoints_leave_network_unchanged(self, triangle_network):
        stats_before = triangle_network.get_network_stats()

        assert triangle_network.add_connection("PX", "PY", 1.0) is False
        assert triangle_network.add_connection("P1", "PY", 1.0) is False

        assert triangle_network.get_network_stats() == stats_before
        assert "PX" not in triangle_network.adjacency
        assert "PY" not in triangle_network.get_connected_stations("P1")

    @pytest.mark.parametrize("distance", [-1.0, math.inf, math.nan])
    def test_invalid_distance_is_declined(self, distance):
        network = StationNetwork()
        network.add_station("A", "A", "", 1)
        network.add_station("B", "B", "", 1)

        assert network.add_connection("A", "B", distance) is False
        assert network.get_distance("A", "B") is None

    def test_tables_are_read_only(self, triangle_network):
        with pytest.raises(TypeError):
            triangle_network.stations["PZ"] = None
        with pytest.raises(TypeError):
            triangle_network.adjacency["P1"]["P3"] = 0.1


class TestShortestPath:
    def test_triangle_prefers_two_hop_route(self, triangle_network):
        assert triangle_network.find_shortest_path("P1", "P3") == ["P1", "P2", "P3"]

        route = triangle_network.shortest_route("P1", "P3")
        assert route.path == ("P1", "P2", "P3")
        assert route.total_distance == pytest.approx(5.7)
        assert route.num_stops == 3

    def test_same_station(self, triangle_network):
        assert triangle_network.find_shortest_path("P2", "P2") == ["P2"]
        assert triangle_network.shortest_route("P2", "P2").total_distance == 0.0

    def test_disconnected_pair_returns_empty(self, triangle_network):
        triangle_network.add_station("P9", "Island", "", 10)

        assert triangle_network.find_shortest_path("P1", "P9") == []
        route = triangle_network.shortest_route("P1", "P9")
        assert route.is_empty
        assert math.isinf(route.total_distance)

    def test_unknown_endpoint_returns_empty(self, triangle_network):
        assert triangle_network.find_shortest_path("P1", "PX") == []
        assert triangle_network.find_shortest_path("PX", "P1") == []

    def test_sample_network_route(self, sample_network):
        route = sample_network.shortest_route("PS001", "PS003")

        assert route.path == ("PS001", "PS004", "PS003")
        assert route.total_distance == pytest.approx(3.9)

    def test_shortest_path_is_symmetric_in_cost(self, sample_network):
        forward = sample_network.shortest_route("PS002", "PS005")
        backward = sample_network.shortest_route("PS005", "PS002")

        assert forward.total_distance == pytest.approx(backward.total_distance)
        assert forward.path == tuple(reversed(backward.path))


class TestNearestStations:
    def test_discovery_order_within_radius(self, sample_network):
        nearby = sample_network.find_nearest_stations("PS001", 3.0)

        assert nearby == [
            NearbyStation("PS002", 2.5),
            NearbyStation("PS004", 1.8),
        ]

    def test_zero_radius_is_empty(self, sample_network):
        assert sample_network.find_nearest_stations("PS001", 0.0) == []

    def test_unknown_source_is_empty(self, sample_network):
        assert sample_network.find_nearest_stations("PS999", 10.0) == []

    def test_results_unpack_as_pairs(self, sample_network):
        pairs = [tuple(hit) for hit in sample_network.find_nearest_stations("PS003", 2.5)]

        assert pairs == [("PS004", 2.1)]

    def test_first_discovered_route_is_kept(self):
        network = StationNetwork()
        for station_id in ("S", "A", "B"):
            network.add_station(station_id, station_id, "", 1)
        network.add_connection("S", "B", 5.0)
        network.add_connection("S", "A", 1.0)
        network.add_connection("A", "B", 1.0)

        assert network.find_nearest_stations("S", 5.0) == [
            NearbyStation("B", 5.0),
            NearbyStation("A", 1.0),
        ]
        assert network.find_stations_within("S", 5.0) == [
            NearbyStation("A", 1.0),
            NearbyStation("B", 2.0),
        ]

    def test_stations_within_uses_shortest_distance(self, sample_network):
        hits = sample_network.find_stations_within("PS001", 4.0)

        assert [hit.station_id for hit in hits] == ["PS004", "PS002", "PS003"]
        assert hits[2].distance == pytest.approx(3.9)

    def test_stations_within_unknown_source(self, sample_network):
        assert sample_network.find_stations_within("PS999", 4.0) == []

    def test_nan_radius_is_empty_for_both_searches(self, sample_network):
        assert sample_network.find_nearest_stations("PS001", math.nan) == []
        assert sample_network.find_stations_within("PS001", math.nan) == []


class TestStatsAndSnapshots:
    def test_empty_network_stats(self):
        assert StationNetwork().get_network_stats() == NetworkStats(0, 0, 0.0)

    def test_sample_network_stats(self, sample_network):
        stats = sample_network.get_network_stats()

        assert stats.station_count == 5
        assert stats.connection_count == 6
        assert stats.average_degree == pytest.approx(2.4)

    def test_connections_yields_each_edge_once(self, sample_network):
        edges = list(sample_network.connections())

        assert len(edges) == 6
        assert {frozenset((a, b)) for a, b, _ in edges} == {
            frozenset(("PS001", "PS002")),
            frozenset(("PS001", "PS004")),
            frozenset(("PS002", "PS003")),
            frozenset(("PS003", "PS004")),
            frozenset(("PS004", "PS005")),
            frozenset(("PS001", "PS005")),
        }

    def test_all_stations_is_a_detached_copy(self, sample_network):
        snapshot = sample_network.get_all_stations()

        snapshot["PS001"].total_voters = 99999
        snapshot["PS001"].is_active = False
        del snapshot["PS002"]

        assert sample_network.get_station("PS001").total_voters == 0
        assert sample_network.get_station("PS001").is_active
        assert "PS002" in sample_network
        assert len(sample_network.get_all_stations()) == 5

    def test_require_station_raises_for_unknown(self, sample_network):
        assert sample_network.require_station("PS001").name == "Downtown Center"

        with pytest.raises(StationNotFoundError) as exc_info:
            sample_network.require_station("PS999")
        assert exc_info.value.station_id == "PS999"

    def test_connected_stations_of_unknown_station(self, sample_network):
        assert sample_network.get_connected_stations("PS999") == []


class TestStationBookkeeping:
    def test_record_voters_over_capacity(self, sample_network):
        assert sample_network.record_voters("PS003", 900)

        station = sample_network.get_station("PS003")
        assert station.is_over_capacity
        assert station.utilization_rate == pytest.approx(1.125)

    def test_record_voters_rejects_unknown_or_negative(self, sample_network):
        assert sample_network.record_voters("PS999", 10) is False
        assert sample_network.record_voters("PS001", -5) is False
        assert sample_network.get_station("PS001").total_voters == 0

    def test_set_active(self, sample_network):
        assert sample_network.set_active("PS002", False)
        assert not sample_network.get_station("PS002").is_active
        assert sample_network.set_active("PS999", False) is False

    def test_station_equality_is_by_id(self, sample_network):
        original = sample_network.get_station("PS001")
        copy = sample_network.get_all_stations()["PS001"]
        copy.total_voters = 10

        assert copy == original
        assert hash(copy) == hash(original)
