"""Route computation over the flight network.

This subpackage contains the pure routing core: building an adjacency
index from a flat flight list, sorting, the shortest-path solver and the
bounded all-paths enumerator. Nothing here performs I/O or keeps state
between calls.
"""

from .bfs import all_paths
from .build_graph import Graph, build_graph, collect_nodes
from .dijkstra import COST_SELECTORS, fastest_path, shortest_path
from .sorter import quick_sort, rank_connections, sort_flights

__all__ = [
    "COST_SELECTORS",
    "Graph",
    "all_paths",
    "build_graph",
    "collect_nodes",
    "fastest_path",
    "quick_sort",
    "rank_connections",
    "shortest_path",
    "sort_flights",
]
