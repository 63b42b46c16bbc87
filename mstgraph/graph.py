from __future__ import annotations

import functools
from typing import Hashable, Iterable, Iterator, Optional, Sequence

import numpy as np


class UnknownNodeError(KeyError):
    """A node was looked up in a graph (or edge) that does not contain it."""

    def __init__(self, node, where=None):
        self.node = node
        if where is None:
            msg = f"Node not found: {node!r}"
        else:
            msg = f"Node not found in {where}: {node!r}"
        super().__init__(msg)

    def __str__(self):
        return self.args[0]


class _Frozen():

    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")


@functools.total_ordering
class Edge(_Frozen):
    """
    Undirected weighted edge

    ``Edge(a, b, w)`` and ``Edge(b, a, w)`` are the same edge. Edges are
    ordered by weight, equal weights are ordered by the ``repr`` of their
    endpoints (smaller one first), see ``sort_key``.

    Attributes:
        a: first endpoint
        b: second endpoint
        weight: edge weight
    """

    __slots__ = ('a', 'b', 'weight')

    def __init__(self, a: Hashable, b: Hashable, weight=1):
        object.__setattr__(self, 'a', a)
        object.__setattr__(self, 'b', b)
        object.__setattr__(self, 'weight', weight)

    @property
    def nodes(self) -> frozenset:
        return frozenset((self.a, self.b))

    def is_loop(self) -> bool:
        return self.a == self.b

    def other(self, node: Hashable) -> Hashable:
        if node == self.a:
            return self.b
        if node == self.b:
            return self.a
        raise UnknownNodeError(node, repr(self))

    def sort_key(self):
        return (self.weight, tuple(sorted((repr(self.a), repr(self.b)))))

    def __iter__(self):
        yield self.a
        yield self.b
        yield self.weight

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight == other.weight and self.nodes == other.nodes

    def __lt__(self, other: Edge) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self):
        return hash((self.nodes, self.weight))

    def __repr__(self):
        return f"Edge({self.a!r}, {self.b!r}, {self.weight!r})"

    def __reduce__(self):
        return (Edge, (self.a, self.b, self.weight))


class Graph(_Frozen):
    """
    Immutable undirected graph.

    The adjacency index is computed once at construction by filtering all
    edges for every node. Endpoints are not checked against the node set,
    an edge touching a foreign node is only listed under the endpoints that
    belong to the graph.

    Args:
        nodes: iterable of hashable nodes
        edges: iterable of ``Edge``
    """

    __slots__ = ('_nodes', '_edges', '_adjacency')

    def __init__(self, nodes: Iterable = (), edges: Iterable[Edge] = ()):
        nodes = frozenset(nodes)
        edges = frozenset(edges)
        adjacency = {}
        for node in nodes:
            adjacency[node] = frozenset(
                e for e in edges if e.a == node or e.b == node)
        object.__setattr__(self, '_nodes', nodes)
        object.__setattr__(self, '_edges', edges)
        object.__setattr__(self, '_adjacency', adjacency)

    @classmethod
    def empty(cls) -> Graph:
        return _EMPTY

    @property
    def nodes(self) -> frozenset:
        return self._nodes

    @property
    def edges(self) -> frozenset[Edge]:
        return self._edges

    def adjacent_edges(self, node: Hashable) -> frozenset[Edge]:
        try:
            return self._adjacency[node]
        except KeyError:
            raise UnknownNodeError(node, 'graph') from None

    def degree(self, node: Hashable) -> int:
        return len(self.adjacent_edges(node))

    def neighbors(self, node: Hashable) -> frozenset:
        return frozenset(e.other(node) for e in self.adjacent_edges(node))

    def total_weight(self):
        return sum(e.weight for e in self._edges)

    def to_matrix(
            self,
            order: Optional[Sequence] = None) -> tuple[list, np.ndarray]:
        """
        Dense weight matrix of the graph.

        Args:
            order: node order of the rows and columns, defaults to the
                nodes sorted by ``repr``

        Returns:
            (nodes, matrix): ``matrix[i, j]`` is the lightest weight of the
            edges between ``nodes[i]`` and ``nodes[j]``, ``inf`` if there is
            none and ``0`` on the diagonal.
        """
        if order is None:
            order = sorted(self._nodes, key=repr)
        nodes = list(order)
        index = {n: i for i, n in enumerate(nodes)}
        for node in self._nodes:
            if node not in index:
                raise UnknownNodeError(node, 'order')

        matrix = np.full((len(nodes), len(nodes)), np.inf)
        np.fill_diagonal(matrix, 0)
        for e in self._edges:
            if e.a not in index or e.b not in index or e.is_loop():
                continue
            i, j = index[e.a], index[e.b]
            w = min(matrix[i, j], e.weight)
            matrix[i, j] = matrix[j, i] = w
        return nodes, matrix

    def __contains__(self, node) -> bool:
        return node in self._nodes

    def __iter__(self) -> Iterator:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._nodes == other._nodes and self._edges == other._edges

    def __hash__(self):
        return hash((self._nodes, self._edges))

    def __repr__(self):
        return (f"Graph(nodes={sorted(self._nodes, key=repr)!r}, "
                f"edges={sorted(self._edges)!r})")

    def __reduce__(self):
        return (Graph, (self._nodes, self._edges))


_EMPTY = Graph()
