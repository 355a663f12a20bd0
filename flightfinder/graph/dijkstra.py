"""Shortest-path computation using Dijkstra's algorithm.

The solver works on any non-negative scalar flight attribute. The
attribute is chosen through an explicit cost selector, so the same code
answers both "cheapest" and "fastest" queries without rewriting the
flight records.
"""

import heapq
import math
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from ..domain.models import Connection, CostKey, Flight
from .build_graph import build_graph, collect_nodes

COST_SELECTORS: Dict[CostKey, Callable[[Flight], float]] = {
    CostKey.PRICE: lambda flight: flight.price,
    CostKey.DURATION: lambda flight: flight.duration,
}


def shortest_path(
    flights: Iterable[Flight],
    origin: str,
    destination: str,
    optimize: Union[CostKey, str] = CostKey.PRICE,
) -> Optional[Connection]:
    """Compute the optimal itinerary between two cities.

    Parameters
    ----------
    flights:
        Flat list of flights; it is read, never modified.
    origin:
        Departure city code.
    destination:
        Arrival city code.
    optimize:
        Attribute used as edge weight (``price`` or ``duration``).

    Returns
    -------
    Connection or None
        The optimal itinerary with totals recomputed from the original
        flight fields, an empty connection when ``origin == destination``,
        or ``None`` if no path exists or an endpoint is unknown.

    Notes
    -----
    Among equal tentative distances the city that appears first in the
    flight list is settled first. The heap is keyed on
    ``(distance, first-appearance index)`` to get exactly that order.
    """
    weight = COST_SELECTORS[CostKey(optimize)]
    flights = list(flights)

    graph = build_graph(flights)
    order = {city: index for index, city in enumerate(collect_nodes(flights))}

    if origin not in order or destination not in order:
        return None

    distances: Dict[str, float] = {city: math.inf for city in order}
    previous: Dict[str, Tuple[str, Flight]] = {}
    distances[origin] = 0.0

    heap: List[Tuple[float, int, str]] = [(0.0, order[origin], origin)]
    settled = set()

    while heap:
        current_distance, _, city = heapq.heappop(heap)

        if city in settled:
            continue

        if city == destination:
            break

        settled.add(city)

        for flight in graph.get(city, []):
            neighbour = flight.destination
            if neighbour in settled:
                continue
            new_distance = current_distance + weight(flight)
            if new_distance < distances[neighbour]:
                distances[neighbour] = new_distance
                previous[neighbour] = (city, flight)
                heapq.heappush(heap, (new_distance, order[neighbour], neighbour))

    if math.isinf(distances[destination]):
        return None

    return Connection.from_flights(_reconstruct(previous, origin, destination))


def fastest_path(
    flights: Iterable[Flight], origin: str, destination: str
) -> Optional[Connection]:
    """Shortest path by duration; prices in the result stay the real ones."""
    return shortest_path(flights, origin, destination, CostKey.DURATION)


def _reconstruct(
    previous: Dict[str, Tuple[str, Flight]], origin: str, destination: str
) -> List[Flight]:
    legs: List[Flight] = []
    city = destination

    while city != origin:
        city, flight = previous[city]
        legs.append(flight)

    legs.reverse()
    return legs
