from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Protocol, runtime_checkable

__all__ = ["NodeKey", "ensure_node_key"]


@runtime_checkable
class NodeKey(Protocol):
    """Capability required of every value used as a graph node.

    Nodes are compared by value: they must be hashable, support equality,
    and be mutually orderable with the other nodes of the same graph. The
    ordering is only used to break ties between equal distances in
    shortest-path search.
    """

    def __hash__(self) -> int: ...

    def __eq__(self, other: object) -> bool: ...

    def __lt__(self, other: Any) -> bool: ...


def ensure_node_key(node):
    """Reject values that can never be stored as nodes.

    ``None`` is the absence marker returned by lookups, so it cannot be a
    node itself.

    Raises
    ------
    TypeError
        If ``node`` is ``None`` or unhashable.
    """
    if node is None:
        raise TypeError("None cannot be used as a graph node")
    if not isinstance(node, Hashable):
        raise TypeError(f"graph nodes must be hashable, got {type(node).__name__}")
    try:
        hash(node)
    except TypeError as e:
        # e.g. a tuple holding a list
        raise TypeError(f"graph nodes must be hashable, got {node!r}") from e
    return node
