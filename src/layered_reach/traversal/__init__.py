"""Traversal primitives over DirectedGraphView objects.

Public API:
    descendants_at_distance: Nodes at an exact forward distance from a source.
"""

from __future__ import annotations

from .descendants import descendants_at_distance

__all__ = ["descendants_at_distance"]
