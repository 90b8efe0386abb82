import logging
from typing import Dict, FrozenSet, Optional, Set

from pygraphforest.DisjointSets import DisjointSets, ForestDisjointSets
from pygraphforest.Graph import Graph
from pygraphforest.GraphElements import GraphNode


class ConnectedComponentsComputer:
    """Partition the nodes of an undirected graph into connected components."""

    def __init__(self, forest: Optional[DisjointSets] = None):
        self.disjoint_sets = forest if forest is not None else ForestDisjointSets()

    def compute_connected_components(self, g: Graph) -> Set[FrozenSet[GraphNode]]:
        """
        Compute the connected components of ``g``.

        Parameters
        ----------
        g : Graph
            An undirected graph. The graph is only read.

        Returns
        -------
        Set[FrozenSet[GraphNode]]
            One frozenset of nodes per component. Isolated nodes form
            singleton components; an empty graph has no components.
        """
        if g is None:
            raise TypeError("graph must not be None")
        if g.is_directed():
            raise ValueError("connected components require an undirected graph")

        forest = self.disjoint_sets
        forest.clear()
        nodes = g.get_nodes()
        for node in nodes:
            forest.make_set(node)

        for edge in g.get_edges():
            if not edge.is_directed():
                forest.union(edge.node1, edge.node2)

        components: Dict[GraphNode, Set[GraphNode]] = {}
        for node in nodes:
            components.setdefault(forest.find_set(node), set()).add(node)

        logging.debug(
            "Connected components: %d nodes -> %d components",
            len(nodes), len(components),
        )
        return {frozenset(members) for members in components.values()}
