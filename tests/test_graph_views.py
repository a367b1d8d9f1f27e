"""Tests for the in-memory graph views and view helpers.

Test categories:
- TestInMemoryDirectedGraph: node/edge operations, ordering, errors
- TestAdjacencyListView: mapping-backed view
- TestAdjacencyMatrixView: matrix-backed view
- TestProtocolCompliance: isinstance checks against DirectedGraphView
- TestViewHelpers: as_graph_view and create_graph_view
"""

from __future__ import annotations

import threading

import pytest

from layered_reach.exceptions import InvalidGraphError, UnsupportedGraphError
from layered_reach.graph import (
    AdjacencyListView,
    AdjacencyMatrixView,
    DirectedGraphView,
    InMemoryDirectedGraph,
    KuzuDirectedGraph,
    as_graph_view,
    create_graph_view,
)


# ── TestInMemoryDirectedGraph ─────────────────────────────────


class TestInMemoryDirectedGraph:
    """Mutable dict-based graph."""

    def test_empty(self):
        graph = InMemoryDirectedGraph()
        assert graph.node_count() == 0
        assert graph.edge_count() == 0
        assert graph.nodes() == []

    def test_add_node_idempotent(self):
        graph = InMemoryDirectedGraph()
        assert graph.add_node("a") == "a"
        graph.add_node("a")
        assert graph.node_count() == 1
        assert graph.has_node("a")
        assert not graph.has_node("b")

    def test_add_edge_preserves_insertion_order(self):
        graph = InMemoryDirectedGraph(nodes=["a", "b", "c"])
        graph.add_edge("a", "c")
        graph.add_edge("a", "b")
        assert graph.outgoing_neighbors("a") == ["c", "b"]
        assert graph.outgoing_neighbors("c") == []

    def test_add_edge_missing_source_raises(self):
        graph = InMemoryDirectedGraph(nodes=["b"])
        with pytest.raises(KeyError):
            graph.add_edge("a", "b")

    def test_add_edge_missing_target_raises(self):
        graph = InMemoryDirectedGraph(nodes=["a"])
        with pytest.raises(KeyError):
            graph.add_edge("a", "b")

    def test_edges_argument_adds_endpoints(self):
        graph = InMemoryDirectedGraph(edges=[(1, 2), (2, 3)])
        assert graph.nodes() == [1, 2, 3]
        assert graph.edge_count() == 2

    def test_unknown_node_has_no_neighbors(self):
        graph = InMemoryDirectedGraph(nodes=[1])
        assert graph.outgoing_neighbors(42) == []

    def test_neighbors_are_a_copy(self):
        graph = InMemoryDirectedGraph(edges=[(1, 2)])
        graph.outgoing_neighbors(1).append(99)
        assert graph.outgoing_neighbors(1) == [2]

    def test_concurrent_edge_inserts(self):
        graph = InMemoryDirectedGraph(nodes=range(101))

        def worker(start):
            for target in range(start, start + 25):
                graph.add_edge(0, target + 1)

        threads = [threading.Thread(target=worker, args=(i * 25,)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert graph.edge_count() == 100
        assert sorted(graph.outgoing_neighbors(0)) == list(range(1, 101))

    def test_repr(self):
        graph = InMemoryDirectedGraph(edges=[(1, 2)])
        assert repr(graph) == "InMemoryDirectedGraph(nodes=2, edges=1)"


# ── TestAdjacencyListView ─────────────────────────────────────


class TestAdjacencyListView:
    """Read-only mapping-backed view."""

    def test_counts_successor_only_nodes(self):
        view = AdjacencyListView({"a": ["b", "c"], "b": ["c"]})
        assert view.node_count() == 3

    def test_neighbors(self):
        view = AdjacencyListView({"a": ("c", "b")})
        assert view.outgoing_neighbors("a") == ["c", "b"]
        assert view.outgoing_neighbors("z") == []

    def test_reflects_caller_changes(self):
        adjacency = {"a": ["b"]}
        view = AdjacencyListView(adjacency)
        adjacency["a"].append("c")
        assert view.outgoing_neighbors("a") == ["b", "c"]

    def test_rejects_non_mapping(self):
        with pytest.raises(UnsupportedGraphError):
            AdjacencyListView([("a", "b")])  # type: ignore[arg-type]

    def test_rejects_iterator_successors(self):
        with pytest.raises(UnsupportedGraphError, match="one-shot iterator"):
            AdjacencyListView({0: iter([1]), 1: iter([2])})

    def test_rejects_generator_successors(self):
        with pytest.raises(UnsupportedGraphError):
            AdjacencyListView({0: (n for n in [1, 2])})

    def test_rejects_iterator_added_later(self):
        adjacency = {0: [1]}
        view = AdjacencyListView(adjacency)
        adjacency[1] = iter([2])
        with pytest.raises(UnsupportedGraphError):
            view.outgoing_neighbors(1)
        with pytest.raises(UnsupportedGraphError):
            view.node_count()

    def test_collections_are_reusable(self):
        view = AdjacencyListView({0: {1}, 1: (2,), 2: frozenset()})
        assert view.outgoing_neighbors(0) == [1]
        assert view.outgoing_neighbors(0) == [1]
        assert view.node_count() == 3
        assert view.node_count() == 3


# ── TestAdjacencyMatrixView ───────────────────────────────────


class TestAdjacencyMatrixView:
    """Read-only matrix-backed view."""

    def test_neighbors_in_column_order(self):
        view = AdjacencyMatrixView([[0, 1, 1], [0, 0, 0], [1, 0, 0]])
        assert view.node_count() == 3
        assert view.outgoing_neighbors(0) == [1, 2]
        assert view.outgoing_neighbors(1) == []
        assert view.outgoing_neighbors(2) == [0]

    def test_weighted_entries_count_as_edges(self):
        view = AdjacencyMatrixView([[0.0, 0.25], [3.5, 0.0]])
        assert view.outgoing_neighbors(0) == [1]
        assert view.outgoing_neighbors(1) == [0]

    @pytest.mark.parametrize("node_id", [-1, 2, 100, "0", None, True])
    def test_out_of_range_ids_have_no_neighbors(self, node_id):
        view = AdjacencyMatrixView([[0, 1], [1, 0]])
        assert view.outgoing_neighbors(node_id) == []

    def test_empty_matrix(self):
        view = AdjacencyMatrixView([])
        assert view.node_count() == 0
        assert view.outgoing_neighbors(0) == []

    def test_non_square_raises(self):
        with pytest.raises(InvalidGraphError):
            AdjacencyMatrixView([[0, 1, 0], [1, 0, 0]])


# ── TestProtocolCompliance ────────────────────────────────────


class TestProtocolCompliance:
    """Every bundled view satisfies DirectedGraphView."""

    @pytest.mark.parametrize(
        "view",
        [
            InMemoryDirectedGraph(),
            AdjacencyListView({}),
            AdjacencyMatrixView([]),
        ],
    )
    def test_isinstance_check(self, view):
        assert isinstance(view, DirectedGraphView)

    def test_kuzu_isinstance_check(self, kuzu_db_path):
        graph = KuzuDirectedGraph(kuzu_db_path)
        try:
            assert isinstance(graph, DirectedGraphView)
        finally:
            graph.close()

    def test_plain_dict_is_not_a_view(self):
        assert not isinstance({}, DirectedGraphView)


# ── TestViewHelpers ───────────────────────────────────────────


class TestViewHelpers:
    """as_graph_view coercion and the create_graph_view factory."""

    def test_as_graph_view_passes_views_through(self):
        graph = InMemoryDirectedGraph()
        assert as_graph_view(graph) is graph

    def test_as_graph_view_wraps_mapping(self):
        view = as_graph_view({1: [2]})
        assert isinstance(view, AdjacencyListView)
        assert view.outgoing_neighbors(1) == [2]

    def test_as_graph_view_rejects_other_objects(self):
        with pytest.raises(UnsupportedGraphError):
            as_graph_view([1, 2, 3])

    def test_create_memory(self):
        graph = create_graph_view("memory", edges=[("a", "b")])
        assert isinstance(graph, InMemoryDirectedGraph)
        assert graph.outgoing_neighbors("a") == ["b"]

    def test_create_default_is_memory(self):
        assert isinstance(create_graph_view(), InMemoryDirectedGraph)

    def test_create_adjacency(self):
        view = create_graph_view("adjacency", adjacency={"a": ["b"]})
        assert isinstance(view, AdjacencyListView)

    def test_create_matrix(self):
        view = create_graph_view("matrix", matrix=[[0, 1], [0, 0]])
        assert isinstance(view, AdjacencyMatrixView)
        assert view.outgoing_neighbors(0) == [1]

    def test_create_kuzu(self, kuzu_db_path):
        graph = create_graph_view("kuzu", db_path=kuzu_db_path, node_table="Page")
        try:
            assert isinstance(graph, KuzuDirectedGraph)
            assert graph.node_count() == 0
        finally:
            graph.close()

    def test_create_unknown_backend_raises(self):
        with pytest.raises(ValueError, match="Unknown backend"):
            create_graph_view("neo4j")
