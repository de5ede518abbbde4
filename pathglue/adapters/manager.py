from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

from ._proxy import BackendProxy

if TYPE_CHECKING:
    from ..core.graph import Graph

__all__ = [
    "available_adapters",
    "ensure_materialized",
    "get_proxy",
]


def _to_networkx(graph):
    from .networkx import to_nx

    return to_nx(graph)


# library module name -> converter(Graph) -> library graph
_REGISTRY = {
    "networkx": _to_networkx,
}


def available_adapters() -> list[str]:
    return sorted(_REGISTRY)


def get_proxy(library: str, graph: "Graph") -> BackendProxy:
    """Proxy behind ``G.nx``; raises ``ValueError`` for an unregistered library."""
    if library not in _REGISTRY:
        raise ValueError(f"No adapter registered for {library!r}; known: {available_adapters()}")
    return BackendProxy(graph, library)


def ensure_materialized(library: str, graph: "Graph") -> dict:
    """
    Converted form of ``graph`` for ``library``, rebuilt only when stale.

    Returns
    -------
    dict
        Cache entry with keys ``module`` (the imported library), ``graph``
        (the converted object) and ``version`` (the graph version it was
        built from). Entries live in ``graph._state`` and are replaced as
        soon as the graph version moves past ``version``.
    """
    cache = graph._state._backend_cache
    entry = cache.get(library)
    if entry is not None and not graph._state.dirty_since(entry["version"]):
        return entry

    entry = {
        "module": importlib.import_module(library),
        "graph": _REGISTRY[library](graph),
        "version": graph._state.version,
    }
    cache[library] = entry
    return entry
