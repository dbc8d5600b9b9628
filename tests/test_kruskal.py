import io

import pytest

from algodrills.graph import Graph
from algodrills.kruskal import Edge, edges_from_adjacency, kruskal, run_kruskal


def test_edges_from_adjacency():
    assert edges_from_adjacency([[(2, 3)], [(1, 3)]]) == [Edge(3, 1, 2), Edge(3, 2, 1)]


def test_edges_from_empty():
    assert edges_from_adjacency([[], []]) == []


def test_triangle_picks_lightest_edges():
    adj = [[(2, 1), (3, 3)], [(3, 2)], []]
    g = Graph(adj)
    tree = kruskal(edges_from_adjacency(adj), g.vertices)
    assert tree == [Edge(1, 1, 2), Edge(2, 2, 3)]


def test_tree_spans_all_vertices_without_cycle():
    adj = [[(2, 1)], [(4, 3)], [(4, 2), (1, 4)], []]
    g = Graph(adj)
    tree = kruskal(edges_from_adjacency(adj), g.vertices)
    assert len(tree) == len(g.vertices) - 1
    touched = {e.src for e in tree} | {e.dest for e in tree}
    assert touched == {1, 2, 3, 4}
    assert Edge(4, 3, 1) not in tree


def test_disconnected_graph_gives_forest():
    adj = [[(2, 5)], [], [(4, 6)], []]
    g = Graph(adj)
    tree = kruskal(edges_from_adjacency(adj), g.vertices)
    assert sorted(tree, key=lambda e: e.weight) == [Edge(5, 1, 2), Edge(6, 3, 4)]


def test_result_sorted_by_weight():
    adj = [[(2, 9), (3, 4)], [(3, 7)], []]
    g = Graph(adj)
    tree = kruskal(edges_from_adjacency(adj), g.vertices)
    weights = [e.weight for e in tree]
    assert weights == sorted(weights)


def test_unknown_vertex():
    g = Graph([[], []])
    with pytest.raises(ValueError):
        kruskal([Edge(1, 1, 7)], g.vertices)


def test_run_kruskal_output():
    out = io.StringIO()
    tree = run_kruskal(io.StringIO("3\n(2, 1)(3, 3)\n(3, 2)\n\n"), out)
    text = out.getvalue()
    assert "Printing Adjacency list" in text
    assert "(1, 1, 2) (2, 2, 3) " in text
    assert text.endswith(f"Total weight of MST: {sum(e.weight for e in tree)}\n")