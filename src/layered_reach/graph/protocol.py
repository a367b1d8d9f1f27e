"""DirectedGraphView protocol -- the capabilities traversal needs from a graph.

Public API:
    DirectedGraphView: Runtime-checkable protocol for read-only directed graphs.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Protocol, runtime_checkable


@runtime_checkable
class DirectedGraphView(Protocol):
    """Read-only view of a directed graph.

    Any object exposing these two methods can be traversed: adjacency
    lists, adjacency matrices and database handles all work the same
    way.  Node identifiers are opaque; they only need to be hashable
    and comparable for equality.
    """

    def node_count(self) -> int:
        """Total number of nodes in the graph."""
        ...

    def outgoing_neighbors(self, node_id: Hashable) -> Iterable[Hashable]:
        """Return the successors of *node_id* along forward edges.

        The order must be stable for the duration of a traversal.  An
        unknown *node_id* has no successors.
        """
        ...


__all__ = ["DirectedGraphView"]
