from __future__ import annotations

from collections.abc import Iterator

import numpy as np
import scipy.sparse as sp

from .graph import Graph
from .mapping import IdentifierRegistry
from .structure import ensure_node_key

__all__ = ["IncidenceMatrixGraph"]


class IncidenceMatrixGraph(Graph):
    """
    Dense boolean-matrix backend.

    Node ``i`` (registry id ``i + 1``) owns row and column ``i`` of a V x V
    numpy ``bool`` grid; ``M[i, j]`` is True iff the edge ``i -> j`` exists.

    Parameters
    ----------
    capacity : int, optional
        Initial side of the backing grid. The grid doubles when full, so
        adding a node is amortized O(1) apart from the new row/column.
    history : bool, optional
        Record mutations (see :meth:`Graph.history`).

    Notes
    -----
    - The registry is always compacting: removing a node deletes its row and
      column and shifts every later node up by one, keeping ids dense and
      equal to ``row index + 1``.
    - ``add_edge`` / ``has_edge``: O(1). ``remove_node``: O(V^2) worst case
      for the shift of the dense grid. Space: O(V^2).
    """

    def __init__(self, capacity: int = 8, history: bool = True):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"capacity must be a positive int, got {capacity!r}")
        self._ids = IdentifierRegistry(compact=True)
        self._matrix = np.zeros((capacity, capacity), dtype=bool)
        self._edge_count = 0
        super().__init__(history=history)

    @property
    def _n(self) -> int:
        return len(self._ids)

    @property
    def capacity(self) -> int:
        return self._matrix.shape[0]

    def _grow(self):
        old = self._matrix
        cap = old.shape[0] * 2
        grid = np.zeros((cap, cap), dtype=bool)
        grid[: old.shape[0], : old.shape[1]] = old
        self._matrix = grid

    def _ensure(self, n) -> int:
        nid = self._ids.get_by_obj(n)
        if nid is not None:
            return nid - 1
        if self._n == self.capacity:
            self._grow()
        # Fresh row/col are already False: removal clears what it vacates
        return self._ids.insert(n) - 1

    def _row_of(self, n) -> int | None:
        nid = self._ids.get_by_obj(n)
        return None if nid is None else nid - 1

    def _resolve(self, idx) -> object:
        obj = self._ids.get_by_id(int(idx) + 1)
        if obj is None:
            raise AssertionError(f"matrix row {idx} has no registered node")
        return obj

    # Mutation

    def add_node(self, n):
        self._ensure(n)

    def add_edge(self, f, t):
        ensure_node_key(f)
        ensure_node_key(t)
        i = self._ensure(f)
        j = self._ensure(t)
        if not self._matrix[i, j]:
            self._matrix[i, j] = True
            self._edge_count += 1

    def remove_node(self, n):
        i = self._row_of(n)
        if i is None:
            return
        n_live = self._n
        live = self._matrix[:n_live, :n_live]

        # Out-edges + in-edges, the self-loop cell counted once
        incident = int(live[i, :].sum()) + int(live[:, i].sum()) - int(live[i, i])
        self._edge_count -= incident

        # Shift rows and columns after i up/left by one, then clear the tail
        self._matrix[i : n_live - 1, :n_live] = self._matrix[i + 1 : n_live, :n_live]
        self._matrix[:n_live, i : n_live - 1] = self._matrix[:n_live, i + 1 : n_live]
        self._matrix[n_live - 1, :n_live] = False
        self._matrix[:n_live, n_live - 1] = False

        self._ids.remove(i + 1)

    def remove_edge(self, f, t):
        i = self._row_of(f)
        j = self._row_of(t)
        if i is None or j is None:
            return
        if self._matrix[i, j]:
            self._matrix[i, j] = False
            self._edge_count -= 1

    # Query

    def has_node(self, n) -> bool:
        return self._ids.contains_obj(n)

    def has_edge(self, f, t) -> bool:
        i = self._row_of(f)
        j = self._row_of(t)
        if i is None or j is None:
            return False
        return bool(self._matrix[i, j])

    def node_count(self) -> int:
        return self._n

    def edge_count(self) -> int:
        return self._edge_count

    # Iteration

    def iter_nodes(self) -> Iterator:
        return iter(self._ids)

    def iter_adj(self, n) -> Iterator | None:
        i = self._row_of(n)
        if i is None:
            return None
        cols = np.flatnonzero(self._matrix[i, : self._n])
        return map(self._resolve, cols)

    def iter_edges(self) -> Iterator[tuple]:
        n_live = self._n
        for i, j in np.argwhere(self._matrix[:n_live, :n_live]):
            yield self._resolve(i), self._resolve(j)

    # Matrix views

    def node_order(self) -> list:
        """Nodes in row/column order of :meth:`adjacency_matrix`."""
        return [self._resolve(i) for i in range(self._n)]

    def adjacency_matrix(self, sparse: bool = False):
        """
        Return the node-node adjacency matrix.

        Parameters
        ----------
        sparse : bool, optional (default=False)
            If True, return a ``scipy.sparse.csr_matrix``; otherwise a dense
            numpy ``bool`` array.

        Returns
        -------
        numpy.ndarray | scipy.sparse.csr_matrix
            V x V matrix, rows/columns ordered as :meth:`node_order`. The
            result is a copy; editing it does not touch the graph.
        """
        n_live = self._n
        M = self._matrix[:n_live, :n_live].copy()
        if sparse:
            return sp.csr_matrix(M)
        return M
