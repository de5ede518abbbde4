from .base import Algorithm
from .dfs import DepthFirstSearch, dfs
from .dijkstra import Dijkstra, dijkstra

__all__ = ["Algorithm", "DepthFirstSearch", "dfs", "Dijkstra", "dijkstra"]
