"""Top-level package for the flight route finder.

The routing core lives in :mod:`flightfinder.graph` and exposes three
pure operations over a flat list of flights:

- ``sort_flights(flights, key)``
- ``shortest_path(flights, origin, destination, optimize)``
- ``all_paths(flights, origin, destination, max_hops, rank_by)``

Everything else (dataset loading, the route planner service, map
rendering) calls into that core.
"""

from .domain.models import City, Connection, CostKey, Flight, RankKey, SortKey
from .graph import all_paths, fastest_path, shortest_path, sort_flights

__version__ = "0.1.0"

__all__ = [
    "City",
    "Connection",
    "CostKey",
    "Flight",
    "RankKey",
    "SortKey",
    "all_paths",
    "fastest_path",
    "shortest_path",
    "sort_flights",
]
