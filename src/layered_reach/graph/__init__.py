"""Directed graph views that traversal can run against.

Public API:
    DirectedGraphView: Protocol all graph views implement.
    InMemoryDirectedGraph: Thread-safe dict-based directed graph.
    AdjacencyListView: Read-only view over a node -> successors mapping.
    AdjacencyMatrixView: Read-only view over a square adjacency matrix.
    KuzuDirectedGraph: Kuzu-backed directed graph.
    as_graph_view: Coerce a graph-like object into a DirectedGraphView.
    create_graph_view: Factory for creating graph views by backend name.
"""

from __future__ import annotations

from .kuzu_graph import KuzuDirectedGraph
from .memory_graph import (
    AdjacencyListView,
    AdjacencyMatrixView,
    InMemoryDirectedGraph,
    as_graph_view,
    create_graph_view,
)
from .protocol import DirectedGraphView

__all__ = [
    "DirectedGraphView",
    "InMemoryDirectedGraph",
    "AdjacencyListView",
    "AdjacencyMatrixView",
    "KuzuDirectedGraph",
    "as_graph_view",
    "create_graph_view",
]
