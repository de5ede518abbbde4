from __future__ import annotations

from abc import ABC, abstractmethod

from ..core.graph import Graph

__all__ = ["Algorithm"]


class Algorithm(ABC):
    """Path search bound to one graph.

    Implementations only use the public :class:`Graph` contract, so the
    same instance works on every backend.
    """

    def __init__(self, graph: Graph):
        self.graph = graph

    def __repr__(self) -> str:
        return f"<{type(self).__name__} on {self.graph!r}>"

    @abstractmethod
    def run(self, source, target) -> list | None:
        """
        Search a path from ``source`` to ``target``.

        Returns
        -------
        list or None
            Nodes from ``source`` to ``target`` inclusive (at least two), or
            ``None`` if either endpoint is not a node or no path exists.
        """

    def _endpoints_known(self, source, target) -> bool:
        return self.graph.has_node(source) and self.graph.has_node(target)
