"""Flight ports - Abstractions for flight data and routing.

These protocols define the contracts for loading the flight network
and computing itineraries over it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence, Union

if TYPE_CHECKING:
    from ..domain.models import City, Connection, CostKey, Flight, RankKey


class FlightRepositoryPort(Protocol):
    """Port for loading flight and city data.

    Implementation: adapters/flights/csv_repository.py

    The repository loads the dataset once; the flights it returns are
    treated as read-only by every consumer.
    """

    def load_flights(self) -> Sequence[Flight]:
        """Load all flights.

        Returns:
            The flights in dataset order.
        """
        ...

    def get_city(self, code: str) -> Optional[City]:
        """Get city details by code.

        Args:
            code: The city code to look up (e.g., 'NYC').

        Returns:
            City with full details, or None if not found.
        """
        ...

    def list_cities(self) -> Sequence[City]:
        """List all known cities."""
        ...


class RouteSolverPort(Protocol):
    """Port for single optimal route computation.

    Wraps: graph/dijkstra.py
    """

    def solve(
        self,
        flights: Sequence[Flight],
        origin: str,
        destination: str,
        optimize: Union[CostKey, str] = ...,
    ) -> Optional[Connection]:
        """Find the optimal itinerary between two cities.

        Args:
            flights: The flight list.
            origin: Departure city code.
            destination: Arrival city code.
            optimize: Attribute to minimise (price or duration).

        Returns:
            The optimal Connection, or None if no itinerary exists.
        """
        ...


class PathEnumeratorPort(Protocol):
    """Port for enumerating every itinerary within a hop budget.

    Wraps: graph/bfs.py
    """

    def enumerate(
        self,
        flights: Sequence[Flight],
        origin: str,
        destination: str,
        max_hops: int,
        rank_by: Union[RankKey, str] = ...,
    ) -> Sequence[Connection]:
        """Find and rank all simple itineraries.

        Args:
            flights: The flight list.
            origin: Departure city code.
            destination: Arrival city code.
            max_hops: Maximum number of transfers per itinerary.
            rank_by: Ranking attribute (price, duration or hops).

        Returns:
            Ranked connections, possibly empty.
        """
        ...
