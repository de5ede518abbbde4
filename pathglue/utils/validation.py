from __future__ import annotations

from collections.abc import Sequence

import numpy as np

__all__ = ["is_simple_path", "jsonify"]


def jsonify(x):
    """Make a value JSON-safe and compact for the mutation history."""
    if x is None or isinstance(x, (bool, int, float, str)):
        return x
    if isinstance(x, (set, frozenset)):
        return sorted((jsonify(v) for v in x), key=str)
    if isinstance(x, (list, tuple)):
        return [jsonify(v) for v in x]
    if isinstance(x, dict):
        return {str(k): jsonify(v) for k, v in x.items()}
    # NumPy scalars
    if isinstance(x, np.generic):
        return x.item()
    return str(x)


def is_simple_path(graph, path: Sequence | None) -> bool:
    """
    Check that ``path`` is a simple path of ``graph``.

    A simple path has at least two nodes, no repeated node, and every
    consecutive pair is a present edge.

    Parameters
    ----------
    graph : Graph
    path : sequence or None

    Returns
    -------
    bool
    """
    if path is None or len(path) < 2:
        return False
    try:
        if len(set(path)) != len(path):
            return False
    except TypeError:
        return False
    return all(graph.has_edge(f, t) for f, t in zip(path, path[1:]))
