"""Route planner service - Main orchestrator.

Answers the questions a front-end asks about the flight network: list
the flights, find the cheapest or fastest route, enumerate every route
within a transfer budget, and explain why a route is optimal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from ..config import SearchConfig, get_config
from ..domain.errors import CityNotFoundError, NoRouteFoundError, RenderingError
from ..domain.models import (
    City,
    Connection,
    CostKey,
    Flight,
    RankKey,
    RouteAlternative,
    RouteComparison,
    SortKey,
)
from ..graph.sorter import sort_flights
from ..ports.flights import FlightRepositoryPort, PathEnumeratorPort, RouteSolverPort
from ..ports.rendering import MapRendererPort


@dataclass
class RoutePlannerService:
    """Main service for flight route queries.

    Every query loads the flight list from the repository and hands it
    to the routing adapters; no graph is kept between queries.

    Attributes:
        flight_repository: Loads flights and city metadata
        route_solver: Computes a single optimal route
        path_enumerator: Enumerates all routes within a hop budget
        map_renderer: Optional map rendering
        search: Search defaults
    """

    flight_repository: FlightRepositoryPort
    route_solver: RouteSolverPort
    path_enumerator: PathEnumeratorPort
    map_renderer: Optional[MapRendererPort] = None
    search: SearchConfig = field(default_factory=lambda: get_config().search)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def list_flights(
        self,
        sort_by: Union[SortKey, str] = SortKey.PRICE,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
    ) -> List[Flight]:
        """Return all flights sorted, optionally filtered by endpoints.

        Args:
            sort_by: price, duration or airline.
            origin: Keep only flights departing from this city.
            destination: Keep only flights arriving at this city.
        """
        flights = sort_flights(self.flight_repository.load_flights(), sort_by)
        return [
            f
            for f in flights
            if (not origin or f.origin == origin)
            and (not destination or f.destination == destination)
        ]

    def find_route(
        self,
        origin: str,
        destination: str,
        optimize: Union[CostKey, str] = CostKey.PRICE,
    ) -> Optional[Connection]:
        """Return the optimal route, or None if none exists."""
        flights = self.flight_repository.load_flights()
        return self.route_solver.solve(flights, origin, destination, CostKey(optimize))

    def cheapest_route(self, origin: str, destination: str) -> Optional[Connection]:
        return self.find_route(origin, destination, CostKey.PRICE)

    def fastest_route(self, origin: str, destination: str) -> Optional[Connection]:
        return self.find_route(origin, destination, CostKey.DURATION)

    def require_route(
        self,
        origin: str,
        destination: str,
        optimize: Union[CostKey, str] = CostKey.PRICE,
    ) -> Connection:
        """Return the optimal route.

        Raises:
            NoRouteFoundError: If no route exists between the cities.
        """
        route = self.find_route(origin, destination, optimize)
        if route is None:
            raise NoRouteFoundError(
                f"No route from {origin} to {destination}",
                origin=origin,
                destination=destination,
            )
        return route

    def all_routes(
        self,
        origin: str,
        destination: str,
        max_hops: Optional[int] = None,
        rank_by: Optional[Union[RankKey, str]] = None,
    ) -> List[Connection]:
        """Return every route within the hop budget, ranked.

        Args:
            origin: Departure city code.
            destination: Arrival city code.
            max_hops: Maximum transfers per route (config default if None).
            rank_by: price, duration or hops (config default if None).
        """
        if max_hops is None:
            max_hops = self.search.default_max_hops
        rank_key = RankKey(rank_by if rank_by is not None else self.search.default_rank_by)

        flights = self.flight_repository.load_flights()
        return list(
            self.path_enumerator.enumerate(flights, origin, destination, max_hops, rank_key)
        )

    def compare_routes(
        self,
        optimal: Connection,
        origin: str,
        destination: str,
        optimize: Union[CostKey, str] = CostKey.PRICE,
    ) -> RouteComparison:
        """Compare an optimal route with direct and short alternatives.

        Alternatives are routes of at most ``comparison_max_hops`` transfers,
        ranked by the optimised attribute and truncated to
        ``comparison_limit``. The optimal route itself may appear among
        them with zero savings.
        """
        cost_key = CostKey(optimize)
        rank_key = RankKey(cost_key.value)

        flights = self.flight_repository.load_flights()
        candidates = self.path_enumerator.enumerate(
            flights, origin, destination, self.search.comparison_max_hops, rank_key
        )
        candidates = list(candidates)[: self.search.comparison_limit]

        optimal_value = optimal.total(cost_key)
        alternatives = []
        for candidate in candidates:
            value = candidate.total(cost_key)
            savings = value - optimal_value
            percent = round(savings / value * 100) if value else 0
            alternatives.append(
                RouteAlternative(
                    connection=candidate,
                    value=value,
                    savings=savings,
                    savings_percent=percent,
                )
            )

        self._logger.debug(
            "Routes compared",
            extra={
                "route": optimal.route_label,
                "optimize": cost_key.value,
                "alternatives": len(alternatives),
            },
        )
        return RouteComparison(
            optimal=optimal, optimize=cost_key, alternatives=tuple(alternatives)
        )

    def render_route(
        self,
        connection: Connection,
        output_path: Path,
        alternatives: Sequence[Connection] = (),
    ) -> Path:
        """Render a route (and optional alternatives) to an HTML map.

        Raises:
            CityNotFoundError: If a stop has no city metadata.
            RenderingError: If no renderer is configured or rendering fails.
        """
        if self.map_renderer is None:
            raise RenderingError(
                "No map renderer configured", output_path=str(output_path)
            )

        codes = set(connection.stops)
        for alternative in alternatives:
            codes.update(alternative.stops)

        cities: Dict[str, City] = {}
        for code in codes:
            city = self.flight_repository.get_city(code)
            if city is None:
                raise CityNotFoundError(f"City not found: {code}", city_code=code)
            cities[code] = city

        return self.map_renderer.render(connection, cities, output_path, alternatives)

