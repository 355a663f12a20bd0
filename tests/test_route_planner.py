from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from flightfinder.adapters.routing import BFSPathEnumerator, DijkstraRouteSolver
from flightfinder.config import SearchConfig
from flightfinder.container import Container
from flightfinder.domain.errors import CityNotFoundError, NoRouteFoundError, RenderingError
from flightfinder.domain.models import City, Connection, CostKey, Flight, GeoLocation
from flightfinder.services import RoutePlannerService


@dataclass
class FakeRepository:
    flights: List[Flight]
    cities: Dict[str, City] = field(default_factory=dict)

    def load_flights(self):
        return self.flights

    def get_city(self, code: str) -> Optional[City]:
        return self.cities.get(code)

    def list_cities(self):
        return list(self.cities.values())


@dataclass
class RecordingRenderer:
    calls: list = field(default_factory=list)

    def render(self, connection, cities, output_path, alternatives=()):
        self.calls.append((connection, dict(cities), output_path, tuple(alternatives)))
        return output_path


@pytest.fixture
def planner():
    return Container.create_default().resolve(RoutePlannerService)


def _planner(flights, cities=None, renderer=None, **search):
    return RoutePlannerService(
        flight_repository=FakeRepository(flights, cities or {}),
        route_solver=DijkstraRouteSolver(),
        path_enumerator=BFSPathEnumerator(),
        map_renderer=renderer,
        search=SearchConfig(**search),
    )


def _ids(connection):
    return [f.id for f in connection.flights]


def test_list_flights_sorted_and_filtered(planner):
    flights = planner.list_flights("price", origin="NYC", destination="CHI")

    assert [f.id for f in flights] == ["F062", "F002"]


def test_list_flights_without_filters_returns_everything(planner):
    flights = planner.list_flights("airline")

    assert len(flights) == 78
    airlines = [f.airline for f in flights]
    assert airlines == sorted(airlines)


def test_cheapest_and_fastest(planner):
    cheapest = planner.cheapest_route("NYC", "SFO")
    fastest = planner.fastest_route("NYC", "SFO")

    assert _ids(cheapest) == ["F043", "F071"]
    assert _ids(fastest) == ["F061"]
    assert fastest.total_price == 480


def test_require_route_raises_when_missing(cluster_flights):
    planner = _planner(cluster_flights)

    with pytest.raises(NoRouteFoundError) as exc_info:
        planner.require_route("DEN", "NYC")

    assert exc_info.value.origin == "DEN"
    assert exc_info.value.destination == "NYC"
    assert _ids(planner.require_route("NYC", "DEN", CostKey.DURATION)) == ["F043"]


def test_all_routes_uses_search_defaults(cluster_flights):
    planner = _planner(cluster_flights, default_max_hops=0)

    assert [_ids(r) for r in planner.all_routes("NYC", "DEN")] == [["F043"]]
    assert len(planner.all_routes("NYC", "DEN", max_hops=1)) == 2


def test_all_routes_rank_override(cluster_flights):
    planner = _planner(cluster_flights)

    routes = planner.all_routes("NYC", "DEN", rank_by="hops")

    assert [r.hops for r in routes] == [0, 1]


def test_compare_routes_reports_savings(planner):
    optimal = planner.cheapest_route("NYC", "DEN")

    comparison = planner.compare_routes(optimal, "NYC", "DEN", "price")

    assert comparison.optimal_value == 200
    assert [a.value for a in comparison.alternatives] == [200, 230, 280, 290]
    assert [a.savings for a in comparison.alternatives] == [0, 30, 80, 90]
    assert [a.savings_percent for a in comparison.alternatives] == [0, 13, 29, 31]
    assert comparison.alternatives[0].is_optimal
    assert all(a.connection.hops <= 1 for a in comparison.alternatives)


def test_compare_routes_limits_alternatives_to_one_stop():
    flights = [
        Flight("AD", "A", "D", "X", 300, 60),
        Flight("AB", "A", "B", "X", 50, 60),
        Flight("BD", "B", "D", "X", 150, 60),
        Flight("BC", "B", "C", "X", 20, 60),
        Flight("CD", "C", "D", "X", 20, 60),
    ]
    planner = _planner(flights)
    optimal = planner.cheapest_route("A", "D")

    comparison = planner.compare_routes(optimal, "A", "D")

    assert _ids(optimal) == ["AB", "BC", "CD"]
    assert [_ids(a.connection) for a in comparison.alternatives] == [["AB", "BD"], ["AD"]]
    assert [a.savings for a in comparison.alternatives] == [110, 210]
    assert [a.savings_percent for a in comparison.alternatives] == [55, 70]


def test_compare_routes_zero_value_alternative():
    flights = [Flight("FREE", "A", "B", "X", 0, 0)]
    planner = _planner(flights)
    optimal = planner.cheapest_route("A", "B")

    comparison = planner.compare_routes(optimal, "A", "B")

    assert comparison.alternatives[0].savings_percent == 0


def test_render_route_resolves_cities(cluster_flights, tmp_path):
    cities = {
        code: City(code, code, GeoLocation(40.0, -90.0))
        for code in ("NYC", "CHI", "DEN")
    }
    renderer = RecordingRenderer()
    planner = _planner(cluster_flights, cities, renderer)
    route = planner.cheapest_route("NYC", "DEN")
    alternatives = planner.all_routes("NYC", "DEN")

    output = planner.render_route(route, tmp_path / "map.html", alternatives)

    assert output == tmp_path / "map.html"
    _, passed_cities, _, passed_alternatives = renderer.calls[0]
    assert set(passed_cities) == {"NYC", "CHI", "DEN"}
    assert len(passed_alternatives) == 2


def test_render_route_errors(cluster_flights, tmp_path):
    route = Connection.from_flights(cluster_flights[2:])

    with pytest.raises(RenderingError):
        _planner(cluster_flights).render_route(route, tmp_path / "map.html")

    with pytest.raises(CityNotFoundError) as exc_info:
        _planner(cluster_flights, renderer=RecordingRenderer()).render_route(
            route, Path("map.html")
        )
    assert exc_info.value.city_code in {"NYC", "DEN"}
