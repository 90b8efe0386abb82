"""
Graph contract
==============

:class:`Graph` lists the operations every concrete graph must provide.  Nodes
are :class:`~pygraphforest.GraphElements.GraphNode` objects identified by
their label (never ``None``, unique within a graph); edges are
:class:`~pygraphforest.GraphElements.GraphEdge` objects.

Conventions shared by all implementations:

* a ``None`` node, edge or label raises ``TypeError``;
* a node that is not a member, or an edge whose kind does not match the
  graph, raises ``ValueError``;
* index lookups outside ``[0, node_count())`` raise ``IndexError``;
* queries that only make sense for directed graphs raise
  ``NotImplementedError`` on undirected ones.
"""

from abc import ABC, abstractmethod
from typing import Hashable, Iterator, Optional, Set

from pygraphforest.GraphElements import GraphEdge, GraphNode


class Graph(ABC):
    """Abstract graph whose nodes are labelled with hashable values."""

    @abstractmethod
    def node_count(self) -> int:
        """Number of nodes in the graph."""

    @abstractmethod
    def edge_count(self) -> int:
        """Number of edges in the graph."""

    def size(self) -> int:
        """Number of nodes plus number of edges."""
        return self.node_count() + self.edge_count()

    def is_empty(self) -> bool:
        return self.node_count() == 0

    @abstractmethod
    def clear(self) -> None:
        """Remove every node and edge."""

    @abstractmethod
    def is_directed(self) -> bool:
        pass

    @abstractmethod
    def get_nodes(self) -> Set[GraphNode]:
        pass

    @abstractmethod
    def add_node(self, node: GraphNode) -> bool:
        """
        Add a node.

        Returns
        -------
        bool
            True if the node was added, False if an equal node was already
            present.
        """

    @abstractmethod
    def remove_node(self, node: GraphNode) -> bool:
        """
        Remove a node and every edge touching it.

        Returns
        -------
        bool
            True if the node was removed, False if it was not present.
        """

    @abstractmethod
    def contains_node(self, node: GraphNode) -> bool:
        pass

    @abstractmethod
    def get_node_of(self, label: Hashable) -> Optional[GraphNode]:
        """Return the member node carrying ``label``, or None."""

    @abstractmethod
    def get_node_index_of(self, label: Hashable) -> int:
        """Return the index of the node carrying ``label``."""

    @abstractmethod
    def get_node_at_index(self, i: int) -> GraphNode:
        """Return the node whose index is ``i``."""

    @abstractmethod
    def get_adjacent_nodes_of(self, node: GraphNode) -> Set[GraphNode]:
        pass

    @abstractmethod
    def get_predecessor_nodes_of(self, node: GraphNode) -> Set[GraphNode]:
        pass

    @abstractmethod
    def get_edges(self) -> Set[GraphEdge]:
        pass

    @abstractmethod
    def add_edge(self, edge: GraphEdge) -> bool:
        """
        Add an edge between two member nodes.

        Returns
        -------
        bool
            True if the edge was added, False if an equal edge was already
            present.
        """

    @abstractmethod
    def remove_edge(self, edge: GraphEdge) -> bool:
        pass

    @abstractmethod
    def contains_edge(self, edge: GraphEdge) -> bool:
        pass

    @abstractmethod
    def get_edges_of(self, node: GraphNode) -> Set[GraphEdge]:
        """Edges leaving ``node`` (all incident edges when undirected)."""

    @abstractmethod
    def get_ingoing_edges_of(self, node: GraphNode) -> Set[GraphEdge]:
        pass

    def get_degree_of(self, node: GraphNode) -> int:
        """
        Degree of a node: incident edges for undirected graphs, outgoing plus
        ingoing edges for directed ones.
        """
        if not self.is_directed():
            return len(self.get_edges_of(node))
        return len(self.get_edges_of(node)) + len(self.get_ingoing_edges_of(node))

    def __len__(self) -> int:
        return self.node_count()

    def __contains__(self, node: object) -> bool:
        if not isinstance(node, GraphNode):
            return False
        return self.contains_node(node)

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self.get_nodes())
