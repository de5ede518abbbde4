from __future__ import annotations

from collections.abc import Iterable

from .adjlist import AdjacencyListGraph
from .graph import Graph
from .hashmatrix import HashMatrixGraph
from .incmatrix import IncidenceMatrixGraph

__all__ = ["available_backends", "create_graph"]

# name -> backend class
_BACKENDS = {
    "adjlist": AdjacencyListGraph,
    "hashmatrix": HashMatrixGraph,
    "incmatrix": IncidenceMatrixGraph,
}


def available_backends() -> list[str]:
    return sorted(_BACKENDS)


def create_graph(kind: str = "adjlist", nodes: Iterable | None = None,
                 edges: Iterable[tuple] | None = None, **options) -> Graph:
    """
    Build a graph by backend name.

    Parameters
    ----------
    kind : str
        One of :func:`available_backends`.
    nodes : iterable, optional
        Nodes added first (isolated nodes included).
    edges : iterable of (source, target), optional
        Edges added after the nodes; endpoints are registered as needed.
    **options
        Passed to the backend constructor (``history``, ``compact_ids``,
        ``capacity``).

    Raises
    ------
    ValueError
        If ``kind`` is unknown.
    """
    try:
        cls = _BACKENDS[kind.lower()]
    except (KeyError, AttributeError):
        raise ValueError(f"Unknown backend '{kind}', expected one of {available_backends()}") from None
    G = cls(**options)
    if nodes is not None:
        G.add_nodes(nodes)
    if edges is not None:
        G.add_edges(edges)
    return G
