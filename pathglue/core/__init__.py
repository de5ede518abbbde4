from .structure import NodeKey, ensure_node_key
from .mapping import IdentifierRegistry
from .graph import Graph
from .adjlist import AdjacencyListGraph
from .hashmatrix import HashMatrixGraph
from .incmatrix import IncidenceMatrixGraph
from .factory import available_backends, create_graph

__all__ = [
    "NodeKey",
    "ensure_node_key",
    "IdentifierRegistry",
    "Graph",
    "AdjacencyListGraph",
    "HashMatrixGraph",
    "IncidenceMatrixGraph",
    "available_backends",
    "create_graph",
]
