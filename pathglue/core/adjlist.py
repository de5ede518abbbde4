from __future__ import annotations

from collections.abc import Iterator

from .graph import Graph
from .mapping import IdentifierRegistry
from .structure import ensure_node_key

__all__ = ["AdjacencyListGraph"]


class AdjacencyListGraph(Graph):
    """
    Adjacency-list backend.

    Nodes live once in an :class:`IdentifierRegistry`; edges are stored as
    ``id -> set of neighbour ids``.

    Parameters
    ----------
    compact_ids : bool, optional
        Use a compacting registry. Ids are internal here, so this only trades
        removal cost for dense ids; the adjacency is rebuilt on every node
        removal when enabled.
    history : bool, optional
        Record mutations (see :meth:`Graph.history`).

    Notes
    -----
    - ``add_edge`` / ``has_edge``: O(1) average.
    - ``remove_node``: O(V + E), every neighbour set is scanned for the node.
    """

    def __init__(self, compact_ids: bool = False, history: bool = True):
        self._ids = IdentifierRegistry(compact=compact_ids)
        self._adj = {}           # id -> set[id]
        self._edge_count = 0
        super().__init__(history=history)

    def _ensure(self, n) -> int:
        nid = self._ids.get_by_obj(n)
        if nid is None:
            nid = self._ids.insert(n)
            self._adj[nid] = set()
        return nid

    def _resolve(self, nid: int):
        obj = self._ids.get_by_id(nid)
        if obj is None:
            raise AssertionError(f"adjacency references unregistered id {nid}")
        return obj

    # Mutation

    def add_node(self, n):
        self._ensure(n)

    def add_edge(self, f, t):
        # Validate both endpoints before registering either
        ensure_node_key(f)
        ensure_node_key(t)
        fid = self._ensure(f)
        tid = self._ensure(t)
        neighbours = self._adj[fid]
        if tid not in neighbours:
            neighbours.add(tid)
            self._edge_count += 1

    def remove_node(self, n):
        nid = self._ids.get_by_obj(n)
        if nid is None:
            return

        # Outgoing edges (a self-loop is counted here, once)
        self._edge_count -= len(self._adj.pop(nid))

        # Incoming edges
        for neighbours in self._adj.values():
            if nid in neighbours:
                neighbours.discard(nid)
                self._edge_count -= 1

        self._ids.remove(nid)
        if self._ids.compact:
            self._reindex_after(nid)

    def _reindex_after(self, removed: int):
        # Mirror the registry's shift: every id above ``removed`` moves down one
        def shift(i):
            return i - 1 if i > removed else i

        self._adj = {shift(i): {shift(j) for j in nbrs} for i, nbrs in self._adj.items()}

    def remove_edge(self, f, t):
        fid = self._ids.get_by_obj(f)
        tid = self._ids.get_by_obj(t)
        if fid is None or tid is None:
            return
        neighbours = self._adj[fid]
        if tid in neighbours:
            neighbours.discard(tid)
            self._edge_count -= 1

    # Query

    def has_node(self, n) -> bool:
        return self._ids.contains_obj(n)

    def has_edge(self, f, t) -> bool:
        fid = self._ids.get_by_obj(f)
        tid = self._ids.get_by_obj(t)
        if fid is None or tid is None:
            return False
        return tid in self._adj[fid]

    def node_count(self) -> int:
        return len(self._ids)

    def edge_count(self) -> int:
        return self._edge_count

    def get_id(self, n) -> int | None:
        """Internal id of ``n`` (``None`` if absent)."""
        return self._ids.get_by_obj(n)

    # Iteration

    def iter_nodes(self) -> Iterator:
        return iter(self._ids)

    def iter_adj(self, n) -> Iterator | None:
        nid = self._ids.get_by_obj(n)
        if nid is None:
            return None
        return map(self._resolve, self._adj[nid])

    def iter_edges(self) -> Iterator[tuple]:
        for fid, neighbours in self._adj.items():
            f = self._resolve(fid)
            for tid in neighbours:
                yield f, self._resolve(tid)
