"""In-memory directed graph views.

Provides a small mutable adjacency-list graph plus read-only views over
plain Python adjacency mappings and adjacency matrices, so traversal can
run against whatever structure the caller already has.

Public API:
    InMemoryDirectedGraph: Thread-safe dict-based directed graph.
    AdjacencyListView: Read-only view over a node -> successors mapping.
    AdjacencyMatrixView: Read-only view over a square adjacency matrix.
    as_graph_view: Coerce a graph-like object into a DirectedGraphView.
    create_graph_view: Factory for creating graph views by backend name.
"""

from __future__ import annotations

import threading
from collections.abc import Collection, Hashable, Iterable, Iterator, Mapping, Sequence
from numbers import Integral
from typing import Any

from ..exceptions import InvalidGraphError, UnsupportedGraphError
from .kuzu_graph import KuzuDirectedGraph
from .protocol import DirectedGraphView


# ── InMemoryDirectedGraph ──────────────────────────────────────────


class InMemoryDirectedGraph:
    """Dict-based directed graph.

    Successors are kept per node in edge insertion order.  Parallel
    edges are stored as given.  Thread-safe via a reentrant lock.

    Args:
        nodes: Optional node ids to add up front.
        edges: Optional ``(source, target)`` pairs; endpoints are added
            as nodes if missing.
    """

    def __init__(
        self,
        nodes: Iterable[Hashable] | None = None,
        edges: Iterable[tuple[Hashable, Hashable]] | None = None,
    ) -> None:
        self._successors: dict[Hashable, list[Hashable]] = {}
        self._lock = threading.RLock()
        for node_id in nodes or ():
            self.add_node(node_id)
        for source_id, target_id in edges or ():
            self.add_node(source_id)
            self.add_node(target_id)
            self.add_edge(source_id, target_id)

    # ── node operations ──────────────────────────────────────

    def add_node(self, node_id: Hashable) -> Hashable:
        """Add *node_id* if not already present and return it."""
        with self._lock:
            self._successors.setdefault(node_id, [])
        return node_id

    def has_node(self, node_id: Hashable) -> bool:
        with self._lock:
            return node_id in self._successors

    def nodes(self) -> list[Hashable]:
        """All node ids in insertion order."""
        with self._lock:
            return list(self._successors)

    def node_count(self) -> int:
        with self._lock:
            return len(self._successors)

    # ── edge operations ──────────────────────────────────────

    def add_edge(self, source_id: Hashable, target_id: Hashable) -> None:
        """Create a directed edge between two existing nodes.

        Raises:
            KeyError: If either source_id or target_id does not exist.
        """
        with self._lock:
            if source_id not in self._successors:
                raise KeyError(f"Source node not found: {source_id!r}")
            if target_id not in self._successors:
                raise KeyError(f"Target node not found: {target_id!r}")
            self._successors[source_id].append(target_id)

    def edge_count(self) -> int:
        with self._lock:
            return sum(len(targets) for targets in self._successors.values())

    def outgoing_neighbors(self, node_id: Hashable) -> list[Hashable]:
        with self._lock:
            return list(self._successors.get(node_id, ()))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={self.node_count()}, "
            f"edges={self.edge_count()})"
        )


# ── read-only views ─────────────────────────────────────────────────


class AdjacencyListView:
    """Read-only view over a mapping of node -> collection of successors.

    The mapping is not copied, so later changes by the caller are
    visible.  Nodes that only appear as successors still count as
    nodes.  Successors must be re-iterable collections (lists, tuples,
    sets); one-shot iterators are rejected.

    Raises:
        UnsupportedGraphError: If *adjacency* is not a mapping or holds
            an iterator as a successor collection.
    """

    def __init__(self, adjacency: Mapping[Hashable, Collection[Hashable]]) -> None:
        if not isinstance(adjacency, Mapping):
            raise UnsupportedGraphError(
                f"Expected a mapping of node -> successors, got {type(adjacency).__name__}"
            )
        for node_id, targets in adjacency.items():
            _check_successors(node_id, targets)
        self._adjacency = adjacency

    def node_count(self) -> int:
        seen: set[Hashable] = set(self._adjacency)
        for node_id, targets in self._adjacency.items():
            seen.update(_check_successors(node_id, targets))
        return len(seen)

    def outgoing_neighbors(self, node_id: Hashable) -> list[Hashable]:
        return list(_check_successors(node_id, self._adjacency.get(node_id, ())))


class AdjacencyMatrixView:
    """Read-only view over a square row-major adjacency matrix.

    Node ids are the integer row indices ``0 .. n-1``.  Any nonzero
    entry ``matrix[i][j]`` is an edge ``i -> j``; successors are
    reported in ascending column order.

    Raises:
        InvalidGraphError: If the matrix is not square.
    """

    def __init__(self, matrix: Sequence[Sequence[Any]]) -> None:
        size = len(matrix)
        for idx, row in enumerate(matrix):
            if len(row) != size:
                raise InvalidGraphError(
                    f"Adjacency matrix must be square: row {idx} has "
                    f"{len(row)} columns, expected {size}"
                )
        self._matrix = matrix
        self._size = size

    def node_count(self) -> int:
        return self._size

    def outgoing_neighbors(self, node_id: Hashable) -> list[int]:
        if isinstance(node_id, bool) or not isinstance(node_id, Integral):
            return []
        row_idx = int(node_id)
        if not 0 <= row_idx < self._size:
            return []
        return [col for col, weight in enumerate(self._matrix[row_idx]) if weight]


# ── helpers ─────────────────────────────────────────────────────────


def _check_successors(node_id: Hashable, targets: Any) -> Collection[Hashable]:
    if isinstance(targets, Iterator):
        raise UnsupportedGraphError(
            f"Successors of {node_id!r} are a one-shot iterator; "
            f"use a list, tuple or set"
        )
    return targets


def as_graph_view(graph: Any) -> DirectedGraphView:
    """Return *graph* as a DirectedGraphView.

    Objects already satisfying the protocol are returned unchanged and
    plain mappings are wrapped in :class:`AdjacencyListView`.

    Raises:
        UnsupportedGraphError: If *graph* is neither.
    """
    if isinstance(graph, DirectedGraphView):
        return graph
    if isinstance(graph, Mapping):
        return AdjacencyListView(graph)
    raise UnsupportedGraphError(
        f"{type(graph).__name__} does not provide node_count() and "
        f"outgoing_neighbors(); pass a DirectedGraphView or a mapping"
    )


def create_graph_view(backend: str = "memory", **kwargs: Any) -> DirectedGraphView:
    """Create a directed graph view.

    Args:
        backend: ``"memory"`` (mutable in-memory graph), ``"adjacency"``
            (view over ``adjacency=``), ``"matrix"`` (view over
            ``matrix=``), ``"kuzu"`` (embedded database at ``db_path=``).
        **kwargs: Backend-specific configuration.

    Returns:
        A DirectedGraphView implementation.

    Raises:
        ValueError: If *backend* is unrecognised.
    """
    if backend == "memory":
        return InMemoryDirectedGraph(
            nodes=kwargs.get("nodes"),
            edges=kwargs.get("edges"),
        )
    elif backend == "adjacency":
        return AdjacencyListView(kwargs["adjacency"])
    elif backend == "matrix":
        return AdjacencyMatrixView(kwargs["matrix"])
    elif backend == "kuzu":
        return KuzuDirectedGraph(
            db_path=kwargs["db_path"],
            node_table=kwargs.get("node_table", "Node"),
            rel_table=kwargs.get("rel_table", "LINKS_TO"),
        )
    else:
        raise ValueError(
            f"Unknown backend: {backend!r}.  "
            f"Choose from: 'memory', 'adjacency', 'matrix', 'kuzu'"
        )


__all__ = [
    "InMemoryDirectedGraph",
    "AdjacencyListView",
    "AdjacencyMatrixView",
    "as_graph_view",
    "create_graph_view",
]
