import argparse

from pathglue.algorithms import dfs, dijkstra
from pathglue.core import available_backends, create_graph


def build_modulus_graph(limit=10, kind="hashmatrix"):
    """Link each ``lo = max(i - 3, 0)`` to the next few ``j`` sharing its residue mod 3."""
    G = create_graph(kind)
    for i in range(1, limit + 1):
        lo = max(i - 3, 0)
        for j in range(lo, lo + 4):
            if 1 <= j <= limit and lo != j and lo % 3 == j % 3:
                G.add_edge(lo, j)
    return G


def _fmt(path, label):
    if path is None:
        return f"No path found with {label}"
    return ", ".join(str(p) for p in path)


def main(limit=10, kind="hashmatrix"):
    G = build_modulus_graph(limit, kind)

    print("Created graph!")
    print(f"Node count: {G.node_count()}")
    print(f"Edge count: {G.edge_count()}")
    print(G)

    source, target = 1, limit
    print(f"Paths from {source} to {target}")
    print(f"DFS: {_fmt(dfs(G, source, target), 'DFS')}")
    print(f"DIJKSTRA: {_fmt(dijkstra(G, source, target), 'Dijkstra')}")
    return G


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Build the modulus demo graph and search 1 -> limit.")
    ap.add_argument("--limit", type=int, default=10, help="Largest node (default: 10)")
    ap.add_argument("--kind", default="hashmatrix", choices=available_backends(), help="Storage backend")
    args = ap.parse_args()
    main(args.limit, args.kind)
