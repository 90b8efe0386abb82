"""
Kruskal minimum spanning forest
===============================

Greedy construction of a minimum spanning tree: edges are visited in
non-decreasing weight order and an edge is kept whenever its endpoints still
lie in different trees of a disjoint-set forest.  On a disconnected graph the
result is a minimum spanning *forest*, one tree per connected component.
"""

import logging
import math
from typing import Iterable, Optional, Set

from pygraphforest.DisjointSets import DisjointSets, ForestDisjointSets
from pygraphforest.Graph import Graph
from pygraphforest.GraphElements import GraphEdge


def spanning_forest_weight(edges: Iterable[GraphEdge]) -> float:
    """Total weight of a collection of weighted edges."""
    return math.fsum(edge.weight for edge in edges)


class KruskalMSP:
    """Compute minimum spanning forests of undirected weighted graphs."""

    def __init__(self, forest: Optional[DisjointSets] = None):
        """
        Parameters
        ----------
        forest : DisjointSets, optional
            Disjoint-set structure owned by this instance. It is cleared at the
            start of every computation. A new :class:`ForestDisjointSets` is
            used when omitted.
        """
        self.disjoint_sets = forest if forest is not None else ForestDisjointSets()

    def compute_msp(self, g: Graph) -> Set[GraphEdge]:
        """
        Compute a minimum spanning forest of ``g`` with Kruskal's algorithm.

        Parameters
        ----------
        g : Graph
            An undirected graph whose edges all carry a non-negative weight.
            The graph is only read.

        Returns
        -------
        Set[GraphEdge]
            The edges of the spanning forest.

        Raises
        ------
        TypeError
            If ``g`` is None.
        ValueError
            If ``g`` is directed, or an edge is unweighted or negative.
        """
        if g is None:
            raise TypeError("graph must not be None")
        if g.is_directed():
            raise ValueError("Kruskal's algorithm requires an undirected graph")

        edges = list(g.get_edges())
        for edge in edges:
            if not edge.has_weight():
                raise ValueError(f"{edge} has no weight")
            if edge.weight < 0:
                raise ValueError(f"{edge} has negative weight {edge.weight}")

        forest = self.disjoint_sets
        forest.clear()
        for node in g.get_nodes():
            forest.make_set(node)

        edges.sort(key=lambda e: e.weight)  # weight ascending

        spanning: Set[GraphEdge] = set()
        for edge in edges:
            u, v = edge.node1, edge.node2
            if forest.find_set(u) != forest.find_set(v):
                spanning.add(edge)
                forest.union(u, v)

        trees = g.node_count() - len(spanning)
        logging.debug(
            "Kruskal: %d nodes, %d edges -> %d spanning edges",
            g.node_count(), len(edges), len(spanning),
        )
        if trees > 1:
            logging.debug(
                "Graph is disconnected; returning a spanning forest of %d trees",
                trees,
            )
        return spanning
