from __future__ import annotations

from collections.abc import Iterator

from .graph import Graph
from .structure import ensure_node_key

__all__ = ["HashMatrixGraph"]


class HashMatrixGraph(Graph):
    """
    Hash "matrix" backend: a sparse row map keyed by the node objects.

    ``_rows[f]`` is the set of targets of ``f``; an edge ``f -> t`` is
    present iff ``t in _rows[f]``. No identifier registry is involved, so
    lookups hash the node values directly. Node iteration follows insertion
    order (a dict property, not part of the contract).
    """

    def __init__(self, history: bool = True):
        self._rows = {}          # node -> set[node]
        self._edge_count = 0
        super().__init__(history=history)

    def _ensure(self, n):
        if n not in self._rows:
            self._rows[n] = set()
        return n

    def add_node(self, n):
        self._ensure(ensure_node_key(n))

    def add_edge(self, f, t):
        ensure_node_key(f)
        ensure_node_key(t)
        self._ensure(f)
        self._ensure(t)
        row = self._rows[f]
        if t not in row:
            row.add(t)
            self._edge_count += 1

    def remove_node(self, n):
        if not self.has_node(n):
            return
        self._edge_count -= len(self._rows.pop(n))
        for row in self._rows.values():
            if n in row:
                row.discard(n)
                self._edge_count -= 1

    def remove_edge(self, f, t):
        if self.has_edge(f, t):
            self._rows[f].discard(t)
            self._edge_count -= 1

    def has_node(self, n) -> bool:
        try:
            return n is not None and n in self._rows
        except TypeError:
            # unhashable probe
            return False

    def has_edge(self, f, t) -> bool:
        if not self.has_node(f):
            return False
        try:
            return t in self._rows[f]
        except TypeError:
            return False

    def node_count(self) -> int:
        return len(self._rows)

    def edge_count(self) -> int:
        return self._edge_count

    def iter_nodes(self) -> Iterator:
        return iter(self._rows)

    def iter_adj(self, n) -> Iterator | None:
        if not self.has_node(n):
            return None
        return iter(self._rows[n])

    def iter_edges(self) -> Iterator[tuple]:
        return ((f, t) for f, row in self._rows.items() for t in row)
