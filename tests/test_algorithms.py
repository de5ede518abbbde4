import random
import unittest

import networkx as nx

from pathglue.algorithms import Algorithm, DepthFirstSearch, Dijkstra, dfs, dijkstra
from pathglue.core import create_graph
from pathglue.utils import is_simple_path

BACKENDS = ("adjlist", "hashmatrix", "incmatrix")


def build_graph(kind, nodes, edges):
    return create_graph(kind, nodes=nodes, edges=edges, history=False)


def chain():
    # Scenario A
    return [1, 2, 3, 4, 5], [(1, 2), (2, 3), (3, 4), (4, 5)]


def chain_with_shortcuts():
    # Scenario B
    nodes, edges = chain()
    return nodes, edges + [(1, 3), (3, 5)]


def broken_chain():
    # Scenario C
    return [1, 2, 3, 4, 5], [(1, 2), (3, 4), (4, 5)]


class TestAlgorithmContract(unittest.TestCase):

    def test_is_abstract(self):
        with self.assertRaises(TypeError):
            Algorithm(build_graph("adjlist", [], []))

    def test_bound_to_graph(self):
        G = build_graph("adjlist", *chain())
        algo = Dijkstra(G)
        self.assertIs(algo.graph, G)
        self.assertIn("Dijkstra", repr(algo))


class TestDepthFirstSearch(unittest.TestCase):

    def test_path_present(self):
        for kind in BACKENDS:
            with self.subTest(kind=kind):
                G = build_graph(kind, *chain())
                self.assertEqual(dfs(G, 1, 5), [1, 2, 3, 4, 5])

    def test_path_is_valid_with_shortcuts(self):
        for kind in BACKENDS:
            with self.subTest(kind=kind):
                G = build_graph(kind, *chain_with_shortcuts())
                p = DepthFirstSearch(G).run(1, 5)
                self.assertTrue(is_simple_path(G, p))
                self.assertEqual((p[0], p[-1]), (1, 5))

    def test_path_not_present(self):
        for kind in BACKENDS:
            with self.subTest(kind=kind):
                G = build_graph(kind, *broken_chain())
                self.assertIsNone(dfs(G, 1, 5))

    def test_nonexistent_endpoints(self):
        for kind in BACKENDS:
            with self.subTest(kind=kind):
                G = build_graph(kind, *broken_chain())
                self.assertIsNone(dfs(G, 0, 5))
                self.assertIsNone(dfs(G, 1, 6))
                self.assertIsNone(dfs(G, 0, 6))

    def test_source_equals_target(self):
        for kind in BACKENDS:
            with self.subTest(kind=kind):
                G = build_graph(kind, [1, 2], [(1, 2), (2, 1), (1, 1)])
                self.assertIsNone(dfs(G, 1, 1))

    def test_terminates_on_cycles(self):
        for kind in BACKENDS:
            with self.subTest(kind=kind):
                G = build_graph(kind, [], [(1, 2), (2, 3), (3, 1), (3, 3), (2, 1)])
                G.add_node(9)
                self.assertIsNone(dfs(G, 1, 9))
                self.assertEqual(dfs(G, 1, 3), [1, 2, 3])

    def test_backtracks_out_of_dead_ends(self):
        G = build_graph("hashmatrix", [], [("s", "d1"), ("d1", "d2"), ("s", "m"), ("m", "t")])
        self.assertEqual(dfs(G, "s", "t"), ["s", "m", "t"])

    def test_long_chain_does_not_recurse(self):
        n = 20000
        G = build_graph("adjlist", [], [(i, i + 1) for i in range(n)])
        p = dfs(G, 0, n)
        self.assertEqual(len(p), n + 1)
        self.assertEqual(p[0], 0)
        self.assertEqual(p[-1], n)


class TestDijkstra(unittest.TestCase):

    def test_path_present(self):
        for kind in BACKENDS:
            with self.subTest(kind=kind):
                G = build_graph(kind, *chain())
                self.assertEqual(dijkstra(G, 1, 5), [1, 2, 3, 4, 5])

    def test_gets_shortest_path(self):
        for kind in BACKENDS:
            with self.subTest(kind=kind):
                G = build_graph(kind, *chain_with_shortcuts())
                self.assertEqual(Dijkstra(G).run(1, 5), [1, 3, 5])

    def test_path_not_present(self):
        for kind in BACKENDS:
            with self.subTest(kind=kind):
                G = build_graph(kind, *broken_chain())
                self.assertIsNone(dijkstra(G, 1, 5))

    def test_nonexistent_endpoints(self):
        for kind in BACKENDS:
            with self.subTest(kind=kind):
                G = build_graph(kind, *broken_chain())
                self.assertIsNone(dijkstra(G, 0, 5))
                self.assertIsNone(dijkstra(G, 1, 6))

    def test_source_equals_target(self):
        G = build_graph("adjlist", [], [(1, 2), (2, 1), (1, 1)])
        self.assertIsNone(dijkstra(G, 1, 1))

    def test_direction_matters(self):
        G = build_graph("incmatrix", *chain())
        self.assertIsNone(dijkstra(G, 5, 1))

    def test_string_nodes(self):
        G = build_graph("hashmatrix", [], [("a", "b"), ("b", "c"), ("a", "x"), ("x", "y"), ("y", "c")])
        self.assertEqual(dijkstra(G, "a", "c"), ["a", "b", "c"])

    def test_mixed_node_types_are_rejected(self):
        for kind in BACKENDS:
            with self.subTest(kind=kind):
                G = build_graph(kind, [1, "a", 2], [(1, "a"), ("a", 2)])
                self.assertEqual(dfs(G, 1, 2), [1, "a", 2])
                with self.assertRaisesRegex(TypeError, "mutually orderable"):
                    dijkstra(G, 1, 2)

    def test_unhashable_endpoints(self):
        for kind in BACKENDS:
            with self.subTest(kind=kind):
                G = build_graph(kind, *chain())
                self.assertIsNone(dijkstra(G, (1, [2]), 5))
                self.assertIsNone(dfs(G, 1, (1, [2])))

    def test_after_mutation(self):
        G = build_graph("adjlist", *chain_with_shortcuts())
        G.remove_edge(3, 5)
        self.assertEqual(dijkstra(G, 1, 5), [1, 3, 4, 5])
        G.remove_node(3)
        self.assertIsNone(dijkstra(G, 1, 5))


class TestAgainstNetworkX(unittest.TestCase):
    """Random graphs: both searches return valid paths, Dijkstra a shortest one."""

    def random_edges(self, rng, n, m):
        return [(rng.randrange(n), rng.randrange(n)) for _ in range(m)]

    def test_random_graphs(self):
        rng = random.Random(7)
        for trial in range(30):
            n = rng.randint(2, 25)
            edges = self.random_edges(rng, n, rng.randint(0, 3 * n))
            ref = nx.DiGraph()
            ref.add_nodes_from(range(n))
            ref.add_edges_from(edges)
            s, t = rng.randrange(n), rng.randrange(n)
            reachable = s != t and nx.has_path(ref, s, t)

            for kind in BACKENDS:
                with self.subTest(trial=trial, kind=kind):
                    G = build_graph(kind, range(n), edges)
                    p_dfs = dfs(G, s, t)
                    p_dij = dijkstra(G, s, t)
                    if not reachable:
                        self.assertIsNone(p_dfs)
                        self.assertIsNone(p_dij)
                        continue
                    self.assertTrue(is_simple_path(G, p_dfs))
                    self.assertTrue(is_simple_path(G, p_dij))
                    self.assertEqual((p_dij[0], p_dij[-1]), (s, t))
                    self.assertEqual(len(p_dij) - 1, nx.shortest_path_length(ref, s, t))


if __name__ == "__main__":
    unittest.main()
