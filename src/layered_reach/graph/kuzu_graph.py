"""KuzuDirectedGraph -- DirectedGraphView backed by an embedded Kuzu database.

Stores nodes in a single node table and edges in a single rel table.
Each edge carries an ``seq`` counter so successors come back in the
order the edges were created.

Public API:
    KuzuDirectedGraph: Kuzu-backed directed graph view.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import kuzu

from ..exceptions import InvalidGraphError

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class KuzuDirectedGraph:
    """Kuzu graph database implementation of the DirectedGraphView protocol.

    Node ids are stored as ``STRING`` primary keys and must be passed in
    as ``str``; any other type raises ``TypeError``.

    Args:
        db_path: Filesystem path for the Kuzu database directory.
        node_table: Name of the node table.
        rel_table: Name of the relationship table.

    Raises:
        InvalidGraphError: If a table name is not a plain identifier or
            Kuzu rejects it (e.g. a reserved word).
    """

    # ── construction / lifecycle ──────────────────────────────

    def __init__(
        self,
        db_path: Path | str,
        node_table: str = "Node",
        rel_table: str = "LINKS_TO",
    ) -> None:
        for name in (node_table, rel_table):
            if not _IDENTIFIER.match(name):
                raise InvalidGraphError(f"Invalid Kuzu table name: {name!r}")
        self._db_path = Path(db_path)
        self._node_table = node_table
        self._rel_table = rel_table
        self._db = kuzu.Database(str(self._db_path))
        self._conn = kuzu.Connection(self._db)
        try:
            self._ensure_schema()
        except RuntimeError as e:
            self.close()
            raise InvalidGraphError(
                f"Kuzu rejected table names {node_table!r}/{rel_table!r}: {e}"
            ) from e
        self._next_seq = self._load_next_seq()

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        """Release Kuzu resources."""
        if self._conn is not None:
            self._conn.close()
        if self._db is not None:
            self._db.close()
        self._conn = None  # type: ignore[assignment]
        self._db = None  # type: ignore[assignment]

    def __enter__(self) -> KuzuDirectedGraph:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ── schema management ─────────────────────────────────────

    def _ensure_schema(self) -> None:
        self._conn.execute(
            f"CREATE NODE TABLE IF NOT EXISTS {self._node_table}"
            f"(node_id STRING, PRIMARY KEY(node_id))"
        )
        self._conn.execute(
            f"CREATE REL TABLE IF NOT EXISTS {self._rel_table}"
            f"(FROM {self._node_table} TO {self._node_table}, seq INT64)"
        )
        logger.debug(
            "Kuzu schema ready at %s (node table %s, rel table %s)",
            self._db_path, self._node_table, self._rel_table,
        )

    def _load_next_seq(self) -> int:
        result = self._conn.execute(
            f"MATCH (:{self._node_table})-[r:{self._rel_table}]->(:{self._node_table}) "
            f"RETURN max(r.seq)"
        )
        if not result.has_next():
            return 0
        current = result.get_next()[0]
        return 0 if current is None else int(current) + 1

    # ── node operations ───────────────────────────────────────

    def add_node(self, node_id: str) -> str:
        """Add a node if it does not exist yet and return its id."""
        nid = _check_id(node_id)
        self._conn.execute(
            f"MERGE (:{self._node_table} {{node_id: $nid}})",
            {"nid": nid},
        )
        return nid

    def has_node(self, node_id: Any) -> bool:
        result = self._conn.execute(
            f"MATCH (n:{self._node_table}) WHERE n.node_id = $nid RETURN n.node_id",
            {"nid": _check_id(node_id)},
        )
        return result.has_next()

    def node_count(self) -> int:
        result = self._conn.execute(
            f"MATCH (n:{self._node_table}) RETURN count(n)"
        )
        if not result.has_next():
            return 0
        return int(result.get_next()[0])

    # ── edge operations ───────────────────────────────────────

    def add_edge(self, source_id: Any, target_id: Any) -> None:
        """Create a directed edge between two existing nodes.

        Raises:
            TypeError: If either id is not a string.
            KeyError: If either source_id or target_id does not exist.
        """
        _check_id(source_id)
        _check_id(target_id)
        if not self.has_node(source_id):
            raise KeyError(f"Source node not found: {source_id}")
        if not self.has_node(target_id):
            raise KeyError(f"Target node not found: {target_id}")

        self._conn.execute(
            f"MATCH (a:{self._node_table}), (b:{self._node_table}) "
            f"WHERE a.node_id = $sid AND b.node_id = $tid "
            f"CREATE (a)-[:{self._rel_table} {{seq: $seq}}]->(b)",
            {"sid": source_id, "tid": target_id, "seq": self._next_seq},
        )
        self._next_seq += 1

    def outgoing_neighbors(self, node_id: Any) -> list[str]:
        result = self._conn.execute(
            f"MATCH (a:{self._node_table})-[r:{self._rel_table}]->(b:{self._node_table}) "
            f"WHERE a.node_id = $nid RETURN b.node_id ORDER BY r.seq",
            {"nid": _check_id(node_id)},
        )
        neighbors: list[str] = []
        while result.has_next():
            neighbors.append(result.get_next()[0])
        return neighbors


def _check_id(node_id: Any) -> str:
    if not isinstance(node_id, str):
        raise TypeError(
            f"KuzuDirectedGraph node ids must be str, got {type(node_id).__name__}"
        )
    return node_id


__all__ = ["KuzuDirectedGraph"]
