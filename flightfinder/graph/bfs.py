"""Bounded enumeration of all simple itineraries between two cities.

Paths are explored breadth-first and never revisit a city, which keeps
the search finite on cyclic networks. Each frontier state only records
the city it reached, the flight that got there and its parent state;
the no-revisit check walks that chain instead of copying a visited set
for every branch.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, List, Optional, Union

from ..domain.models import Connection, Flight, RankKey
from .build_graph import build_graph
from .sorter import rank_connections


@dataclass(frozen=True, slots=True)
class _PathState:
    city: str
    flight: Optional[Flight] = None
    parent: Optional[_PathState] = None
    depth: int = 0

    def visits(self, city: str) -> bool:
        state: Optional[_PathState] = self
        while state is not None:
            if state.city == city:
                return True
            state = state.parent
        return False

    def flights(self) -> List[Flight]:
        legs: List[Flight] = []
        state: Optional[_PathState] = self
        while state is not None and state.flight is not None:
            legs.append(state.flight)
            state = state.parent
        legs.reverse()
        return legs


def all_paths(
    flights: Iterable[Flight],
    origin: str,
    destination: str,
    max_hops: int = 3,
    rank_by: Union[RankKey, str] = RankKey.PRICE,
) -> List[Connection]:
    """Find every simple itinerary with at most ``max_hops`` transfers.

    Parameters
    ----------
    flights:
        Flat list of flights.
    origin:
        Departure city code.
    destination:
        Arrival city code.
    max_hops:
        Maximum number of transfers per itinerary. A state holding more
        than ``max_hops`` flights is not expanded, so itineraries have at
        most ``max_hops + 1`` flights: 0 keeps direct flights only and a
        negative value finds nothing.
    rank_by:
        ``price``, ``duration`` or ``hops``.

    Returns
    -------
    list[Connection]
        Ranked itineraries, possibly empty. Only itineraries with at
        least one flight are produced, so ``origin == destination``
        always gives an empty list.
    """
    rank_key = RankKey(rank_by)
    graph = build_graph(flights)

    found: List[Connection] = []
    frontier: Deque[_PathState] = deque([_PathState(origin)])

    while frontier:
        state = frontier.popleft()

        if state.city == destination and state.depth > 0:
            found.append(Connection.from_flights(state.flights()))
            continue

        if state.depth > max_hops:
            continue

        for flight in graph.get(state.city, []):
            if not state.visits(flight.destination):
                frontier.append(
                    _PathState(flight.destination, flight, state, state.depth + 1)
                )

    return rank_connections(found, rank_key)
