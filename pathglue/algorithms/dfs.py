from __future__ import annotations

from .base import Algorithm

__all__ = ["DepthFirstSearch", "dfs"]


class DepthFirstSearch(Algorithm):
    """
    First-found path by backtracking depth-first search.

    The traversal keeps a visited set (so cycles terminate) and the current
    path. Neighbours are tried in the order the backend yields them, which
    is unspecified for hash-based backends; the result is *a* simple path,
    not necessarily the shortest.

    The search is iterative: a stack of neighbour iterators replaces the call
    stack, so long chains do not hit the interpreter recursion limit.
    """

    def run(self, source, target) -> list | None:
        if not self._endpoints_known(source, target):
            return None
        # A path needs at least one edge
        if source == target:
            return None

        path = [source]
        visited = {source}
        frames = [self._neighbours(source)]

        while frames:
            for nbr in frames[-1]:
                if nbr in visited:
                    continue
                path.append(nbr)
                if nbr == target:
                    return path
                visited.add(nbr)
                frames.append(self._neighbours(nbr))
                break
            else:
                # exhausted: backtrack
                frames.pop()
                path.pop()
        return None

    def _neighbours(self, node):
        adj = self.graph.iter_adj(node)
        return iter(()) if adj is None else iter(adj)


def dfs(graph, source, target) -> list | None:
    """Shorthand for ``DepthFirstSearch(graph).run(source, target)``."""
    return DepthFirstSearch(graph).run(source, target)
