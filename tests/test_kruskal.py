import itertools
import logging
import random

import pytest

from mstgraph.graph import Edge, Graph, UnknownNodeError
from mstgraph.solver import DisjointSet, KruskalMSTCalculator


def count_components(nodes, edges):
    ds = DisjointSet(nodes)
    for e in edges:
        ds.union(e.a, e.b)
    return len({ds.find(n) for n in nodes})


def is_forest(nodes, edges):
    ds = DisjointSet(nodes)
    return all(ds.union(e.a, e.b) for e in edges)


def brute_force_weight(graph):
    k = count_components(graph.nodes, graph.edges)
    size = len(graph.nodes) - k
    best = None
    for subset in itertools.combinations(graph.edges, size):
        if not is_forest(graph.nodes, subset):
            continue
        w = sum(e.weight for e in subset)
        if best is None or w < best:
            best = w
    return best


def random_graph(rng, max_nodes=7, max_weight=5):
    n = rng.randint(1, max_nodes)
    nodes = list(range(n))
    pairs = list(itertools.combinations(nodes, 2))
    chosen = rng.sample(pairs, rng.randint(0, min(len(pairs), 11)))
    edges = [Edge(a, b, rng.randint(1, max_weight)) for a, b in chosen]
    return Graph(nodes, edges)


def test_triangle():
    g = Graph({'A', 'B', 'C'},
              {Edge('A', 'B', 1),
               Edge('B', 'C', 2),
               Edge('A', 'C', 3)})
    mst = KruskalMSTCalculator(g).calculate_mst()
    assert mst.nodes == {'A', 'B', 'C'}
    assert mst.edges == {Edge('A', 'B', 1), Edge('B', 'C', 2)}
    assert mst.total_weight() == 3


def test_disconnected():
    g = Graph({'A', 'B', 'C', 'D'}, {Edge('A', 'B', 1), Edge('C', 'D', 1)})
    calc = KruskalMSTCalculator(g)
    mst = calc.calculate_mst()
    assert mst.nodes == {'A', 'B', 'C', 'D'}
    assert mst.edges == g.edges
    assert len(calc.mst_groups) == 2
    assert sorted(map(sorted, calc.mst_groups)) == [['A', 'B'], ['C', 'D']]


def test_empty():
    calc = KruskalMSTCalculator(Graph())
    mst = calc.calculate_mst()
    assert mst == Graph()
    assert calc.mst_groups == []


def test_isolated_node():
    g = Graph({1, 2, 3, 4}, {Edge(1, 2, 1), Edge(2, 3, 1), Edge(1, 3, 2)})
    calc = KruskalMSTCalculator(g)
    mst = calc.calculate_mst()
    assert mst.nodes == {1, 2, 3, 4}
    assert mst.edges == {Edge(1, 2, 1), Edge(2, 3, 1)}
    assert {4} in calc.mst_groups
    assert mst.adjacent_edges(4) == frozenset()


def test_self_loop_is_rejected():
    g = Graph({1, 2}, {Edge(1, 1, 0), Edge(1, 2, 3)})
    assert KruskalMSTCalculator(g).calculate_mst().edges == {Edge(1, 2, 3)}


def test_foreign_endpoint():
    g = Graph({1, 2}, {Edge(1, 2, 1), Edge(2, 99, 2)})
    with pytest.raises(UnknownNodeError) as exc:
        KruskalMSTCalculator(g).calculate_mst()
    assert exc.value.node == 99


def test_init_resets_state():
    g = Graph({1, 2, 3}, {Edge(1, 2, 1), Edge(2, 3, 2)})
    calc = KruskalMSTCalculator(g)
    calc.mst_edges.add(Edge(7, 8, 9))
    calc.mst_groups.append({7, 8})
    calc.init()
    assert calc.mst_edges == set()
    assert sorted(map(sorted, calc.mst_groups)) == [[1], [2], [3]]


def test_accept_edge():
    g = Graph({1, 2, 3}, {Edge(1, 2, 1), Edge(2, 3, 2), Edge(1, 3, 3)})
    calc = KruskalMSTCalculator(g)
    calc.init()
    assert calc.accept_edge(Edge(1, 2, 1))
    assert len(calc.mst_groups) == 2
    assert calc.accept_edge(Edge(2, 3, 2))
    assert calc.mst_groups == [{1, 2, 3}]
    assert not calc.accept_edge(Edge(1, 3, 3))
    assert calc.mst_groups == [{1, 2, 3}]
    # accept_edge never records edges itself
    assert calc.mst_edges == set()


def test_join_groups():
    g = Graph({1, 2, 3, 4})
    calc = KruskalMSTCalculator(g)
    calc.mst_groups[:] = [{1}, {2, 3}, {4}]

    calc.join_groups(0, 1)
    assert calc.mst_groups == [{1, 2, 3}, {4}]

    # equal sizes: the first group is kept
    calc.mst_groups[:] = [{1, 2}, {3, 4}]
    group = calc.mst_groups[1]
    calc.join_groups(1, 0)
    assert calc.mst_groups == [{1, 2, 3, 4}]
    assert calc.mst_groups[0] is group


def test_idempotent():
    rng = random.Random(1234)
    for _ in range(20):
        g = random_graph(rng)
        calc = KruskalMSTCalculator(g)
        first = calc.calculate_mst()
        second = calc.calculate_mst()
        assert first == second


def test_edge_count():
    rng = random.Random(42)
    for _ in range(50):
        g = random_graph(rng)
        k = count_components(g.nodes, g.edges)
        mst = KruskalMSTCalculator(g).calculate_mst()
        assert len(mst.edges) == len(g.nodes) - k
        assert mst.edges <= g.edges
        assert mst.nodes == g.nodes
        assert is_forest(mst.nodes, mst.edges)


def test_minimal_weight():
    rng = random.Random(7)
    for _ in range(30):
        g = random_graph(rng, max_nodes=6)
        mst = KruskalMSTCalculator(g).calculate_mst()
        assert mst.total_weight() == brute_force_weight(g)


def test_tie_break_is_deterministic():
    edges = [Edge('a', 'b', 1), Edge('b', 'c', 1), Edge('a', 'c', 1)]
    g = Graph({'a', 'b', 'c'}, edges)
    mst = KruskalMSTCalculator(g).calculate_mst()
    assert mst.edges == {Edge('a', 'b', 1), Edge('a', 'c', 1)}


def test_logging(caplog):
    caplog.set_level(logging.DEBUG, logger='mstgraph.solver.kruskal')
    g = Graph({'A', 'B', 'C'},
              {Edge('A', 'B', 1),
               Edge('B', 'C', 2),
               Edge('A', 'C', 3)})
    KruskalMSTCalculator(g).calculate_mst()
    assert 'accepted 2 of 3 edges' in caplog.text
