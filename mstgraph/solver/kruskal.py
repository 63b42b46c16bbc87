from __future__ import annotations

import logging
from typing import Hashable

from ..graph import Edge, Graph, UnknownNodeError
from .base import MSTCalculator, register_calculator

logger = logging.getLogger(__name__)


@register_calculator('kruskal')
class KruskalMSTCalculator(MSTCalculator):
    """
    Kruskal's algorithm with a plain list of node groups.

    Every node is in exactly one group of ``mst_groups``. Initially each node
    is alone in its group; two nodes share a group once they are connected
    by ``mst_edges``. Finding the group of a node scans the list, which makes
    the whole run O(E * V). ``DisjointSetMSTCalculator`` gives the same
    result in O(E log E).

    Attributes:
        graph: the graph to calculate the MST for
        mst_edges: edges accepted so far
        mst_groups: the connected components of ``mst_edges``
    """

    def __init__(self, graph: Graph):
        super().__init__(graph)
        self.mst_edges: set[Edge] = set()
        self.mst_groups: list[set] = []

    def calculate_mst(self) -> Graph:
        self.init()

        edges = sorted(self.graph.edges, key=Edge.sort_key)

        for edge in edges:
            if self.accept_edge(edge):
                self.mst_edges.add(edge)

        logger.debug("kruskal: %d nodes, accepted %d of %d edges, %d groups",
                     len(self.graph.nodes), len(self.mst_edges), len(edges),
                     len(self.mst_groups))
        return Graph(self.graph.nodes, self.mst_edges)

    def init(self):
        """Reset ``mst_edges`` and put every node in a group of its own."""
        self.mst_edges.clear()
        self.mst_groups.clear()
        for node in self.graph.nodes:
            self.mst_groups.append({node})

    def _find_groups(self, a: Hashable, b: Hashable) -> tuple[int, int]:
        a_index = b_index = -1
        for i, group in enumerate(self.mst_groups):
            if a in group:
                a_index = i
            if b in group:
                b_index = i
            if a_index >= 0 and b_index >= 0:
                break
        if a_index < 0:
            raise UnknownNodeError(a, 'graph')
        if b_index < 0:
            raise UnknownNodeError(b, 'graph')
        return a_index, b_index

    def accept_edge(self, edge: Edge) -> bool:
        """
        Process one edge.

        If both endpoints are already in the same group the edge would close
        a cycle and is skipped. Otherwise the two groups are merged with
        ``join_groups``.

        Returns:
            True if the edge joined two groups, False if it was skipped.
        """
        a_index, b_index = self._find_groups(edge.a, edge.b)
        if a_index == b_index:
            return False
        self.join_groups(a_index, b_index)
        return True

    def join_groups(self, a_index: int, b_index: int):
        """
        Merge two groups of ``mst_groups``.

        The larger group receives the members of the smaller one, the smaller
        one is removed from the list. On a tie the group at ``a_index`` is
        kept.
        """
        a_group = self.mst_groups[a_index]
        b_group = self.mst_groups[b_index]

        if len(a_group) < len(b_group):
            b_group.update(a_group)
            del self.mst_groups[a_index]
        else:
            a_group.update(b_group)
            del self.mst_groups[b_index]
