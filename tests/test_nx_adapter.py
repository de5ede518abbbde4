import unittest
import warnings

import networkx as nx

from pathglue.adapters import available_adapters, ensure_materialized, get_proxy
from pathglue.adapters.networkx import from_nx, to_nx
from pathglue.core import AdjacencyListGraph, HashMatrixGraph, IncidenceMatrixGraph


class TestNetworkXAdapter(unittest.TestCase):

    def setUp(self):
        G = AdjacencyListGraph()
        G.add_nodes(["A", "B", "C", "D"])
        G.add_edges([("A", "B"), ("B", "C"), ("C", "A")])
        self.G = G

    def test_to_nx(self):
        nxG = to_nx(self.G)
        self.assertIsInstance(nxG, nx.DiGraph)
        self.assertEqual(set(nxG.nodes), {"A", "B", "C", "D"})
        self.assertEqual(set(nxG.edges), {("A", "B"), ("B", "C"), ("C", "A")})
        self.assertTrue(all(d["weight"] == 1 for _, _, d in nxG.edges(data=True)))

    def test_roundtrip_each_backend(self):
        nxG = to_nx(self.G)
        for kind, cls in (("adjlist", AdjacencyListGraph),
                          ("hashmatrix", HashMatrixGraph),
                          ("incmatrix", IncidenceMatrixGraph)):
            with self.subTest(kind=kind):
                with warnings.catch_warnings():
                    warnings.simplefilter("error")
                    H = from_nx(nxG, kind=kind)
                self.assertIsInstance(H, cls)
                self.assertEqual(set(H.iter_nodes()), set(self.G.iter_nodes()))
                self.assertEqual(set(H.iter_edges()), set(self.G.iter_edges()))
                self.assertEqual(H.edge_count(), self.G.edge_count())

    def test_from_undirected_warns_and_doubles(self):
        with self.assertWarns(UserWarning):
            H = from_nx(nx.path_graph(3))
        self.assertEqual(set(H.iter_edges()), {(0, 1), (1, 0), (1, 2), (2, 1)})

    def test_from_multigraph_collapses(self):
        M = nx.MultiDiGraph()
        M.add_edge(1, 2)
        M.add_edge(1, 2)
        M.add_edge(2, 3)
        with self.assertWarns(UserWarning):
            H = from_nx(M, kind="hashmatrix")
        self.assertEqual(H.edge_count(), 2)

    def test_from_weighted_warns(self):
        W = nx.DiGraph()
        W.add_edge("x", "y", weight=2.5)
        with self.assertWarns(UserWarning):
            H = from_nx(W)
        self.assertTrue(H.has_edge("x", "y"))

    def test_options_forwarded(self):
        H = from_nx(to_nx(self.G), kind="incmatrix", capacity=1, history=False)
        self.assertEqual(H.history(), [])
        self.assertGreaterEqual(H.capacity, 4)


class TestLazyNXProxy(unittest.TestCase):

    def setUp(self):
        self.G = HashMatrixGraph()
        self.G.add_edges([(1, 2), (2, 3), (3, 4), (1, 3)])

    def test_forwards_networkx_functions(self):
        self.assertEqual(self.G.nx.shortest_path(1, 4), [1, 3, 4])
        self.assertEqual(self.G.nx.descendants(2), {3, 4})

    def test_forwards_graph_attributes(self):
        self.assertEqual(self.G.nx.number_of_edges(), 4)
        self.assertIsInstance(self.G.nx.graph, nx.DiGraph)

    def test_conversion_is_cached_until_mutation(self):
        first = ensure_materialized("networkx", self.G)
        again = ensure_materialized("networkx", self.G)
        self.assertIs(first["graph"], again["graph"])

        self.G.add_edge(4, 5)
        fresh = ensure_materialized("networkx", self.G)
        self.assertIsNot(fresh["graph"], first["graph"])
        self.assertTrue(fresh["graph"].has_edge(4, 5))
        self.assertEqual(self.G.nx.shortest_path(1, 5), [1, 3, 4, 5])

    def test_unknown_backend(self):
        self.assertEqual(available_adapters(), ["networkx"])
        with self.assertRaises(ValueError):
            get_proxy("igraph", self.G)


if __name__ == "__main__":
    unittest.main()
