"""Dijkstra Route Solver adapter.

This adapter wraps graph/dijkstra.py and adds:
- Key validation against the CostKey enum
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from ...domain.models import Connection, CostKey, Flight
from ...graph.dijkstra import shortest_path


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        flights: Sequence[Flight],
        origin: str,
        destination: str,
        optimize: Union[CostKey, str] = CostKey.PRICE,
    ) -> Optional[Connection]:
        """Find the optimal itinerary between two cities.

        Args:
            flights: The flight list.
            origin: Departure city code.
            destination: Arrival city code.
            optimize: Attribute to minimise (price or duration).

        Returns:
            The optimal Connection, or None if no itinerary exists.

        Raises:
            ValueError: If ``optimize`` is not a known cost key.
        """
        cost_key = CostKey(optimize)
        self._logger.debug(
            "Solving route",
            extra={
                "origin": origin,
                "destination": destination,
                "optimize": cost_key.value,
            },
        )

        connection = shortest_path(flights, origin, destination, cost_key)

        if connection is None:
            self._logger.info(
                "No route found",
                extra={"origin": origin, "destination": destination},
            )
            return None

        self._logger.info(
            "Route found",
            extra={
                "origin": origin,
                "destination": destination,
                "optimize": cost_key.value,
                "flights": len(connection.flights),
                "total_price": connection.total_price,
                "total_duration": connection.total_duration,
            },
        )
        return connection
