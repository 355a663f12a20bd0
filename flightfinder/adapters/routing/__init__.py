"""Routing adapters - Implementations of the routing ports.

Available implementations:
- DijkstraRouteSolver: Cheapest or fastest itinerary via Dijkstra
- BFSPathEnumerator: All itineraries within a hop budget via BFS
"""

from .bfs_enumerator import BFSPathEnumerator
from .dijkstra_solver import DijkstraRouteSolver

__all__ = ["BFSPathEnumerator", "DijkstraRouteSolver"]
