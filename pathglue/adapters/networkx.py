try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "pathglue requires networkx for graph conversion. "
        "Reinstall it with: pip install networkx"
    ) from e

import warnings

from ..core.factory import create_graph

__all__ = ["to_nx", "from_nx"]


def to_nx(graph) -> "nx.DiGraph":
    """
    Export a graph to a NetworkX DiGraph.

    Parameters
    ----------
    graph : Graph
        Any pathglue backend.

    Returns
    -------
    networkx.DiGraph
        Same nodes (isolated ones included) and edges; every edge carries
        ``weight=1``.
    """
    G = nx.DiGraph()
    G.add_nodes_from(graph.iter_nodes())
    G.add_edges_from(graph.iter_edges(), weight=1)
    return G


def from_nx(nxG, kind: str = "adjlist", **options):
    """
    Import a NetworkX graph into a pathglue backend.

    Parameters
    ----------
    nxG : networkx.Graph | DiGraph | MultiGraph | MultiDiGraph
    kind : str
        Target backend name (see :func:`pathglue.core.available_backends`).
    **options
        Passed to the backend constructor.

    Returns
    -------
    Graph

    Notes
    -----
    The result is a simple directed unit-weight graph, so conversion can be
    lossy; each of these emits one ``UserWarning``:

    - undirected edges are added in both directions;
    - parallel edges of multigraphs collapse to one;
    - non-unit ``weight`` attributes are dropped.
    """
    directed = nxG.is_directed()
    if not directed:
        warnings.warn("Undirected input: every edge is added in both directions.", stacklevel=2)

    if nxG.is_multigraph():
        pairs = list(nxG.edges(keys=False, data="weight", default=1))
        n_parallel = len(pairs) - len({(u, v) for u, v, _ in pairs})
        if n_parallel:
            warnings.warn(f"Collapsed {n_parallel} parallel edge(s) into single edges.", stacklevel=2)
    else:
        pairs = list(nxG.edges(data="weight", default=1))

    if any(w != 1 for _, _, w in pairs):
        warnings.warn("Edge weights are dropped; pathglue edges have unit cost.", stacklevel=2)

    G = create_graph(kind, **options)
    G.add_nodes(nxG.nodes())
    for u, v, _w in pairs:
        G.add_edge(u, v)
        if not directed:
            G.add_edge(v, u)
    return G
