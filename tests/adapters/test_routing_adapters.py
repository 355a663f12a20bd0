"""Tests for the solver and enumerator adapters."""

import logging

import pytest

from flightfinder.adapters.routing import BFSPathEnumerator, DijkstraRouteSolver
from flightfinder.domain.models import CostKey, RankKey


def test_solver_returns_route_and_logs(cluster_flights, caplog):
    solver = DijkstraRouteSolver()

    with caplog.at_level(logging.INFO, logger="flightfinder"):
        route = solver.solve(cluster_flights, "NYC", "DEN", "price")

    assert [f.id for f in route.flights] == ["F043"]
    assert any(r.message == "Route found" for r in caplog.records)


def test_solver_returns_none_without_raising(cluster_flights, caplog):
    solver = DijkstraRouteSolver()

    with caplog.at_level(logging.INFO, logger="flightfinder"):
        assert solver.solve(cluster_flights, "DEN", "NYC", CostKey.DURATION) is None

    assert any(r.message == "No route found" for r in caplog.records)


def test_solver_rejects_unknown_key(cluster_flights):
    with pytest.raises(ValueError):
        DijkstraRouteSolver().solve(cluster_flights, "NYC", "DEN", "hops")


def test_enumerator_ranks_routes(cluster_flights):
    routes = BFSPathEnumerator().enumerate(
        cluster_flights, "NYC", "DEN", 3, RankKey.DURATION
    )

    assert [r.total_duration for r in routes] == [240, 285]


def test_enumerator_empty_result(cluster_flights):
    assert BFSPathEnumerator().enumerate(cluster_flights, "DEN", "NYC", 3) == []
