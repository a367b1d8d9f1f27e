"""layered-reachability: exact-distance forward reachability over directed graphs."""

__version__ = "0.1.0"

from .exceptions import (
    InvalidDistanceError,
    InvalidGraphError,
    ReachabilityError,
    UnsupportedGraphError,
)
from .graph import (
    AdjacencyListView,
    AdjacencyMatrixView,
    DirectedGraphView,
    InMemoryDirectedGraph,
    KuzuDirectedGraph,
    as_graph_view,
    create_graph_view,
)
from .traversal import descendants_at_distance

__all__ = [
    # Traversal
    "descendants_at_distance",
    # Graph views
    "DirectedGraphView",
    "InMemoryDirectedGraph",
    "AdjacencyListView",
    "AdjacencyMatrixView",
    "KuzuDirectedGraph",
    "as_graph_view",
    "create_graph_view",
    # Exceptions
    "ReachabilityError",
    "InvalidDistanceError",
    "UnsupportedGraphError",
    "InvalidGraphError",
]
