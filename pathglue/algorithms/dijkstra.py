from __future__ import annotations

import heapq
import math

from .base import Algorithm

__all__ = ["Dijkstra", "dijkstra"]


class Dijkstra(Algorithm):
    """
    Shortest path in edge count (every edge weighs 1).

    All nodes start in a binary heap keyed by ``(distance, node)``: 0 for the
    source, ``inf`` for the rest. Nodes are popped in distance order and
    their out-neighbours relaxed with ``distance + 1``. The node ordering only
    breaks ties between equal distances.

    Notes
    -----
    - The search stops as soon as the target is popped (its distance is then
      final) or the smallest remaining distance is infinite.
    - A relaxed node is pushed again with its new distance; the older entry
      is skipped when it surfaces.
    """

    INF = math.inf

    def run(self, source, target) -> list | None:
        if not self._endpoints_known(source, target):
            return None

        dist = {}
        pred = {}
        heap = []
        for node in self.graph.iter_nodes():
            d = 0 if node == source else self.INF
            dist[node] = d
            pred[node] = None
            heap.append((d, node))
        try:
            self._search(heap, dist, pred, target)
        except TypeError as e:
            raise TypeError(
                "Dijkstra needs mutually orderable nodes to break distance ties"
            ) from e

        if pred[target] is None:
            # unreachable, or target == source (no edge traversed)
            return None
        return self._walk_back(pred, source, target)

    def _search(self, heap, dist, pred, target):
        heapq.heapify(heap)
        while heap:
            d, node = heapq.heappop(heap)
            if d == self.INF or node == target:
                break
            if d > dist[node]:
                continue  # outdated entry
            for nbr in self.graph.iter_adj(node) or ():
                candidate = d + 1
                if candidate < dist[nbr]:
                    dist[nbr] = candidate
                    pred[nbr] = node
                    heapq.heappush(heap, (candidate, nbr))

    @staticmethod
    def _walk_back(pred, source, target) -> list:
        path = [target]
        cur = target
        while cur != source:
            cur = pred[cur]
            if cur is None:
                raise AssertionError(f"broken predecessor chain towards {target!r}")
            path.append(cur)
        path.reverse()
        return path


def dijkstra(graph, source, target) -> list | None:
    """Shorthand for ``Dijkstra(graph).run(source, target)``."""
    return Dijkstra(graph).run(source, target)
