from __future__ import annotations

import logging

from ..graph import Edge, Graph, UnknownNodeError
from .base import MSTCalculator, register_calculator

logger = logging.getLogger(__name__)


class DisjointSet():
    """
    Union-find over arbitrary hashable nodes, with path compression and
    union by rank.
    """

    def __init__(self, nodes=()):
        self.parent = {}
        self.rank = {}
        for node in nodes:
            self.add(node)

    def add(self, node):
        if node not in self.parent:
            self.parent[node] = node
            self.rank[node] = 0

    def __contains__(self, node):
        return node in self.parent

    def __len__(self):
        return len(self.parent)

    def find(self, u):
        if u not in self.parent:
            raise UnknownNodeError(u, 'disjoint set')
        root = u
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[u] != root:
            self.parent[u], u = root, self.parent[u]
        return root

    def union(self, u, v) -> bool:
        u = self.find(u)
        v = self.find(v)
        if u == v:
            return False
        if self.rank[u] < self.rank[v]:
            u, v = v, u
        self.parent[v] = u
        if self.rank[u] == self.rank[v]:
            self.rank[u] += 1
        return True


@register_calculator('disjoint_set')
class DisjointSetMSTCalculator(MSTCalculator):
    """
    Kruskal's algorithm over a ``DisjointSet``.

    Sorts edges exactly like ``KruskalMSTCalculator``, so both return the
    same edges for the same graph. No state outlives a call.
    """

    def calculate_mst(self) -> Graph:
        components = DisjointSet(self.graph.nodes)
        tree = set()
        for edge in sorted(self.graph.edges, key=Edge.sort_key):
            if components.union(edge.a, edge.b):
                tree.add(edge)
        logger.debug("disjoint_set: %d nodes, accepted %d edges",
                     len(self.graph.nodes), len(tree))
        return Graph(self.graph.nodes, tree)
