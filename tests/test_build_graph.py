from flightfinder.domain.models import Flight
from flightfinder.graph.build_graph import build_graph, collect_nodes


def test_build_graph_groups_by_origin_in_input_order():
    flights = [
        Flight("F1", "A", "B", "X", 1, 1),
        Flight("F2", "B", "C", "X", 1, 1),
        Flight("F3", "A", "C", "X", 1, 1),
    ]

    graph = build_graph(flights)

    assert [f.id for f in graph["A"]] == ["F1", "F3"]
    assert [f.id for f in graph["B"]] == ["F2"]


def test_build_graph_omits_dangling_destinations(cluster_flights):
    graph = build_graph(cluster_flights)

    assert set(graph) == {"NYC", "CHI"}
    assert graph.get("DEN", []) == []


def test_build_graph_empty():
    assert build_graph([]) == {}


def test_collect_nodes_first_appearance_order(cluster_flights):
    assert collect_nodes(cluster_flights) == ["NYC", "CHI", "DEN"]


def test_build_graph_does_not_touch_input(cluster_flights):
    before = list(cluster_flights)
    build_graph(cluster_flights)
    assert cluster_flights == before
