from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

import polars as pl

from ._history import HistoryMixin
from ._state import _State
from .structure import NodeKey

__all__ = ["Graph"]


class Graph(HistoryMixin, ABC):
    """
    Directed-graph contract shared by every storage backend.

    Backends differ only in representation; algorithms consume a graph
    exclusively through the operations below and never look at internals.

    Parameters
    ----------
    history : bool, optional
        Record mutations in the in-memory history (see ``history()``).

    Notes
    -----
    - Edges are ordered ``(source, target)`` pairs with implicit unit weight.
      Adding an edge twice is a no-op; self-loops are allowed.
    - Expected absence is never an exception: queries return ``False``,
      removals of unknown entities do nothing, ``iter_adj`` returns ``None``
      for an unknown node.
    - Iterators are lazy and single-pass. Mutating the graph while one is
      being consumed is undefined.

    See Also
    --------
    AdjacencyListGraph, HashMatrixGraph, IncidenceMatrixGraph
    """

    def __init__(self, history: bool = True):
        self._state = _State()
        self._init_history(history)

    # Mutation

    @abstractmethod
    def add_node(self, n: NodeKey) -> None:
        """Register ``n``. No effect if an equal node is already present."""

    @abstractmethod
    def add_edge(self, f: NodeKey, t: NodeKey) -> None:
        """Register ``f`` and ``t`` if needed, then mark ``f -> t`` present."""

    @abstractmethod
    def remove_node(self, n: NodeKey) -> None:
        """Remove ``n`` and every edge where it is source or target."""

    @abstractmethod
    def remove_edge(self, f: NodeKey, t: NodeKey) -> None:
        """Remove ``f -> t`` if present."""

    # Query

    @abstractmethod
    def has_node(self, n: NodeKey) -> bool: ...

    @abstractmethod
    def has_edge(self, f: NodeKey, t: NodeKey) -> bool: ...

    @abstractmethod
    def node_count(self) -> int: ...

    @abstractmethod
    def edge_count(self) -> int: ...

    # Iteration

    @abstractmethod
    def iter_nodes(self) -> Iterator:
        """Lazy iterator over all nodes, in no guaranteed order."""

    @abstractmethod
    def iter_adj(self, n: NodeKey) -> Iterator | None:
        """
        Out-neighbours of ``n``.

        Returns
        -------
        Iterator or None
            ``None`` if ``n`` is not a node (as opposed to a node without
            out-edges, which yields an empty iterator).
        """

    @abstractmethod
    def iter_edges(self) -> Iterator[tuple]:
        """Lazy iterator over all ``(source, target)`` pairs."""

    # Bulk helpers

    def add_nodes(self, nodes: Iterable):
        for n in nodes:
            self.add_node(n)

    def add_edges(self, edges: Iterable[tuple]):
        for f, t in edges:
            self.add_edge(f, t)

    # Views

    def edges_view(self) -> pl.DataFrame:
        """
        Edge list as a polars DataFrame.

        Returns
        -------
        polars.DataFrame
            Columns ``source`` and ``target``, one row per present edge.
        """
        sources, targets = [], []
        for f, t in self.iter_edges():
            sources.append(f)
            targets.append(t)
        return pl.DataFrame({"source": sources, "target": targets}, strict=False)

    @property
    def version(self) -> int:
        """Structural version; increases on every mutating call."""
        return self._state.version

    @property
    def nx(self):
        """
        Accessor for the lazy NetworkX proxy.
        Usage: ``G.nx.shortest_path(1, 5)``, ``G.nx.descendants(1)``.
        """
        from ..adapters import manager

        return manager.get_proxy("networkx", self)

    # Dunder glue

    def __len__(self) -> int:
        return self.node_count()

    def __contains__(self, n) -> bool:
        return self.has_node(n)

    def __iter__(self) -> Iterator:
        return self.iter_nodes()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} | V={self.node_count()} · E={self.edge_count()}>"

    def __str__(self) -> str:
        lines = [f"Node {n}" for n in self.iter_nodes()]
        lines.extend(f"{f} -> {t}" for f, t in self.iter_edges())
        return "\n".join(lines)
