"""Station network and the traversal algorithms that run over it.

This subpackage contains the in-memory network of polling stations and
the path-finding and radius-search algorithms used to query it.
"""

from .dijkstra import dijkstra, dijkstra_within
from .radius import breadth_first_within
from .station_network import StationNetwork

__all__ = ["StationNetwork", "dijkstra", "dijkstra_within", "breadth_first_within"]
