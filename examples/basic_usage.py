"""Basic usage example for layered-reachability."""

import logging
import tempfile
from pathlib import Path

from layered_reach import (
    AdjacencyMatrixView,
    InMemoryDirectedGraph,
    create_graph_view,
    descendants_at_distance,
)


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    print("=" * 60)
    print("layered-reachability - Basic Usage Example")
    print("=" * 60)

    # 1. In-memory graph
    print("\n1. Building an in-memory graph...")
    graph = InMemoryDirectedGraph(
        edges=[
            ("lobby", "hall"),
            ("lobby", "stairs"),
            ("hall", "kitchen"),
            ("stairs", "attic"),
            ("kitchen", "lobby"),
        ]
    )
    print(f"   {graph!r}")
    for distance in range(4):
        layer = descendants_at_distance(graph, "lobby", distance)
        print(f"   distance {distance}: {layer}")

    # 2. Plain adjacency mapping
    print("\n2. Traversing a plain dict...")
    adjacency = {0: [1, 2], 1: [3], 2: [3], 3: []}
    print(f"   distance 2 from 0: {descendants_at_distance(adjacency, 0, 2)}")

    # 3. Adjacency matrix
    print("\n3. Traversing an adjacency matrix...")
    matrix = AdjacencyMatrixView([
        [0, 1, 0],
        [0, 0, 1],
        [1, 0, 0],
    ])
    print(f"   distance 1 from 0: {descendants_at_distance(matrix, 0, 1)}")

    # 4. Kuzu-backed graph
    print("\n4. Traversing a Kuzu database...")
    with tempfile.TemporaryDirectory() as tmp:
        with create_graph_view("kuzu", db_path=Path(tmp) / "demo_db") as kuzu_graph:
            for name in ("a", "b", "c"):
                kuzu_graph.add_node(name)
            kuzu_graph.add_edge("a", "b")
            kuzu_graph.add_edge("b", "c")
            print(f"   distance 2 from 'a': {descendants_at_distance(kuzu_graph, 'a', 2)}")

    print("\n" + "=" * 60)
    print("Example completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
