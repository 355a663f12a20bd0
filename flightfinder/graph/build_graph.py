"""Adjacency index built from a flat flight list.

This module defines the Graph type used by both path-finding
algorithms. A graph is built fresh for every query and never mutated
afterwards.
"""

from typing import Dict, Iterable, List

from ..domain.models import Flight

# Maps origin city code -> outgoing flights, in input order
Graph = Dict[str, List[Flight]]


def build_graph(flights: Iterable[Flight]) -> Graph:
    graph: Graph = {}

    # Cities with no departures get no entry; callers treat a missing
    # key as "no neighbours".
    for flight in flights:
        graph.setdefault(flight.origin, []).append(flight)

    return graph


def collect_nodes(flights: Iterable[Flight]) -> List[str]:
    """Return every city code in order of first appearance.

    Each flight contributes its origin, then its destination.
    """
    seen: Dict[str, None] = {}
    for flight in flights:
        seen.setdefault(flight.origin, None)
        seen.setdefault(flight.destination, None)
    return list(seen)
