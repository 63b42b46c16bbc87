from __future__ import annotations

from typing import Hashable, Iterable, Optional, Union

from .graph import Edge, Graph
from .solver import get_calculator

EdgeLike = Union[Edge, tuple[Hashable, Hashable],
                 tuple[Hashable, Hashable, float]]


def _as_edge(e: EdgeLike) -> Edge:
    if isinstance(e, Edge):
        return e
    if isinstance(e, (tuple, list)) and len(e) in (2, 3):
        return Edge(*e)
    raise ValueError(f"Can not make an edge from {e!r}, "
                     "expected (u, v) or (u, v, weight).")


def graph_from_edges(edges: Iterable[EdgeLike], nodes: Iterable = ()) -> Graph:
    """
    Build a graph from an edge list

    Args:
        edges: ``Edge`` objects, ``(u, v)`` pairs with weight 1 or
            ``(u, v, weight)`` triples
        nodes: extra nodes, e.g. isolated ones

    Returns:
        Graph whose nodes are ``nodes`` plus every endpoint
    """
    edges = [_as_edge(e) for e in edges]
    nodes = set(nodes)
    for e in edges:
        nodes.add(e.a)
        nodes.add(e.b)
    return Graph(nodes, edges)


def minimum_spanning_tree(
        edges: Iterable[EdgeLike],
        algorithm: Optional[str] = None) -> list[tuple[Hashable, Hashable]]:
    """
    minimum spanning tree

    Args:
        edges: list of edges, ``(u, v)`` or ``(u, v, weight)``
        algorithm: registered calculator name, ``None`` for the configured one

    Returns:
        list of edges in the minimum spanning tree (a forest if the graph is
        disconnected), lightest first
    """
    graph = graph_from_edges(edges)
    if not graph.edges:
        return []
    tree = get_calculator(graph, algorithm).calculate_mst()
    return [(e.a, e.b) for e in sorted(tree.edges)]


def connected_components(graph: Graph,
                         algorithm: Optional[str] = None) -> list[frozenset]:
    """
    Connected components of ``graph``, read off its minimum spanning forest.

    Returns:
        list of node sets, larger components first
    """
    forest = get_calculator(graph, algorithm).calculate_mst()
    seen = set()
    components = []
    for start in sorted(forest.nodes, key=repr):
        if start in seen:
            continue
        component = {start}
        stack = [start]
        while stack:
            node = stack.pop()
            for n in forest.neighbors(node):
                if n not in component:
                    component.add(n)
                    stack.append(n)
        seen.update(component)
        components.append(frozenset(component))
    components.sort(key=len, reverse=True)
    return components
