"""Tests for structural graph checks: adjacency, dangling labels, reachability."""

import numpy as np

from wasteland.graph.types import Graph
from wasteland.graph.validation import (
    find_dangling,
    reachable_terminals,
    to_adjacency,
    validate_graph,
)


def _ends_with_z(label: str) -> bool:
    return label.endswith("Z")


def _make_multi_graph() -> Graph:
    return Graph(
        {
            "11A": ("11B", "XXX"),
            "11B": ("XXX", "11Z"),
            "11Z": ("11B", "XXX"),
            "22A": ("22B", "XXX"),
            "22B": ("22C", "22C"),
            "22C": ("22Z", "22Z"),
            "22Z": ("22B", "22B"),
            "XXX": ("XXX", "XXX"),
        }
    )


class TestAdjacency:
    def test_shape_and_edges(self) -> None:
        graph = _make_multi_graph()
        adj = to_adjacency(graph)
        assert adj.shape == (8, 8)
        dense = adj.toarray()
        # 11A -> 11B and 11A -> XXX
        assert dense[0, 1] == 1.0
        assert dense[0, 7] == 1.0

    def test_parallel_edges_collapse(self) -> None:
        graph = _make_multi_graph()
        adj = to_adjacency(graph)
        # 22B -> (22C, 22C) is a single binary edge
        assert adj[4, 5] == 1.0
        assert adj[4].nnz == 1
        assert np.all(adj.data == 1.0)

    def test_dangling_edges_dropped(self) -> None:
        adj = to_adjacency(Graph({"AAA": ("AAA", "QQQ")}))
        assert adj.shape == (1, 1)
        assert adj.nnz == 1


class TestFindDangling:
    def test_none(self) -> None:
        assert find_dangling(_make_multi_graph()) == []

    def test_sorted_unique(self) -> None:
        graph = Graph({"AAA": ("QQQ", "PPP"), "BBB": ("QQQ", "AAA")})
        assert find_dangling(graph) == ["PPP", "QQQ"]


class TestReachableTerminals:
    def test_reaches_own_terminal(self) -> None:
        graph = _make_multi_graph()
        assert reachable_terminals(graph, "11A", _ends_with_z) == {"11Z"}
        assert reachable_terminals(graph, "22A", _ends_with_z) == {"22Z"}

    def test_sink_reaches_nothing(self) -> None:
        graph = _make_multi_graph()
        assert reachable_terminals(graph, "XXX", _ends_with_z) == set()

    def test_terminal_start_counts_only_via_cycle(self) -> None:
        graph = Graph({"AAZ": ("BBB", "BBB"), "BBB": ("BBB", "BBB")})
        assert reachable_terminals(graph, "AAZ", _ends_with_z) == set()
        looped = Graph({"AAZ": ("BBB", "BBB"), "BBB": ("AAZ", "AAZ")})
        assert reachable_terminals(looped, "AAZ", _ends_with_z) == {"AAZ"}


class TestValidateGraph:
    def test_valid_graph_passes(self) -> None:
        errors = validate_graph(_make_multi_graph(), ["11A", "22A"], _ends_with_z)
        assert errors == []

    def test_empty_graph(self) -> None:
        errors = validate_graph(Graph({}), ["AAA"], _ends_with_z)
        assert errors == ["Graph has no nodes"]

    def test_unknown_start(self) -> None:
        errors = validate_graph(_make_multi_graph(), ["11A", "99A"], _ends_with_z)
        assert len(errors) == 1
        assert "99A" in errors[0]

    def test_dangling_reported(self) -> None:
        graph = Graph({"AAA": ("QQZ", "AAA")})
        errors = validate_graph(graph, ["AAA"], _ends_with_z)
        assert any("dangling" in e for e in errors)

    def test_unreachable_terminal_reported(self) -> None:
        graph = Graph({"AAA": ("AAA", "AAA"), "ZZZ": ("ZZZ", "ZZZ")})
        errors = validate_graph(graph, ["AAA"], _ends_with_z)
        assert errors == ["Start 'AAA' cannot reach any terminal node"]
