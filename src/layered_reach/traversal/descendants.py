"""Layer-by-layer forward reachability.

Public API:
    descendants_at_distance: Nodes at an exact forward distance from a source.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from numbers import Integral
from typing import Any

from ..exceptions import InvalidDistanceError
from ..graph.memory_graph import as_graph_view

logger = logging.getLogger(__name__)


def descendants_at_distance(graph: Any, source: Hashable, distance: int) -> list[Hashable]:
    """Return all nodes whose shortest forward distance from *source* is *distance*.

    Expands breadth-first one layer at a time along outgoing edges,
    never revisiting a node, and returns the layer reached after
    *distance* expansions.  Nodes are listed in discovery order.

    ``distance == 0`` returns ``[source]``: zero expansions leave the
    starting layer in place even though the source is not its own
    descendant.

    *source* does not have to be in the graph; an unknown source has no
    successors, so any positive distance yields an empty list.

    Args:
        graph: A DirectedGraphView, or a mapping of node -> successors.
        source: Node id to start from.
        distance: Number of forward hops, a non-negative integer.

    Returns:
        The node ids at exactly *distance* hops, without duplicates.

    Raises:
        InvalidDistanceError: If *distance* is not a non-negative integer.
        UnsupportedGraphError: If *graph* cannot be used as a graph view.
    """
    if isinstance(distance, bool) or not isinstance(distance, Integral):
        raise InvalidDistanceError(
            f"distance must be an integer, got {type(distance).__name__}"
        )
    if distance < 0:
        raise InvalidDistanceError(f"distance must be non-negative, got {distance}")

    view = as_graph_view(graph)

    current_layer: list[Hashable] = [source]
    visited: set[Hashable] = {source}
    layers = 0
    while current_layer and layers < distance:
        next_layer: list[Hashable] = []
        for node in current_layer:
            for child in view.outgoing_neighbors(node):
                if child not in visited:
                    visited.add(child)
                    next_layer.append(child)
        current_layer = next_layer
        layers += 1

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "descendants_at_distance(%r, %d): %d layers expanded, %d of %d nodes visited, %d returned",
            source, distance, layers, len(visited), view.node_count(), len(current_layer),
        )
    return current_layer


__all__ = ["descendants_at_distance"]
