# pathglue/__init__.py
"""pathglue: directed graphs with swappable storage and path search."""
from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "core": "pathglue.core",
    "algorithms": "pathglue.algorithms",
    "adapters": "pathglue.adapters",
    "utils": "pathglue.utils",
    "networkx": "pathglue.adapters.networkx",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "Graph": ("pathglue.core.graph", "Graph"),
    "AdjacencyListGraph": ("pathglue.core.adjlist", "AdjacencyListGraph"),
    "HashMatrixGraph": ("pathglue.core.hashmatrix", "HashMatrixGraph"),
    "IncidenceMatrixGraph": ("pathglue.core.incmatrix", "IncidenceMatrixGraph"),
    "IdentifierRegistry": ("pathglue.core.mapping", "IdentifierRegistry"),
    "create_graph": ("pathglue.core.factory", "create_graph"),
    "available_backends": ("pathglue.core.factory", "available_backends"),

    # Algorithms
    "Algorithm": ("pathglue.algorithms.base", "Algorithm"),
    "DepthFirstSearch": ("pathglue.algorithms.dfs", "DepthFirstSearch"),
    "Dijkstra": ("pathglue.algorithms.dijkstra", "Dijkstra"),
    "dfs": ("pathglue.algorithms.dfs", "dfs"),
    "dijkstra": ("pathglue.algorithms.dijkstra", "dijkstra"),

    # NetworkX adapter (optional dependency)
    "to_nx": ("pathglue.adapters.networkx", "to_nx"),
    "from_nx": ("pathglue.adapters.networkx", "from_nx"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("pathglue")
except PackageNotFoundError:
    __version__ = "0.0.0"
