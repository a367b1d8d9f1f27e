"""Pytest configuration and fixtures for layered-reachability tests."""

import pytest

from layered_reach.graph import InMemoryDirectedGraph


@pytest.fixture
def path_graph():
    """Directed path 0 -> 1 -> 2 -> 3."""
    return InMemoryDirectedGraph(edges=[(0, 1), (1, 2), (2, 3)])


@pytest.fixture
def cycle_graph():
    """Directed cycle 0 -> 1 -> 2 -> 0."""
    return InMemoryDirectedGraph(edges=[(0, 1), (1, 2), (2, 0)])


@pytest.fixture
def kuzu_db_path(tmp_path):
    """Provide a fresh Kuzu database path under the test's temp dir."""
    return tmp_path / "test_graph_db"
