"""
Graph elements
==============

Nodes and edges shared by every graph implementation in the package.

A :class:`GraphNode` is identified by its label alone; the remaining fields
(color, distances, predecessor, timestamps) are scratch space for traversal
algorithms and never take part in equality or hashing.  A :class:`GraphEdge`
joins two nodes, is either directed or undirected, and may carry a weight
(``nan`` when unweighted).
"""

import math
from typing import Any, Hashable, Optional

COLOR_WHITE = 0
COLOR_GREY = 1
COLOR_BLACK = 2


class GraphNode:
    """A labelled graph node with mutable scratch attributes."""

    __slots__ = (
        "_label",
        "color",
        "integer_distance",
        "floating_point_distance",
        "previous",
        "entering_time",
        "exiting_time",
    )

    def __init__(self, label: Hashable):
        """
        Parameters
        ----------
        label : Hashable
            Identity of the node. Two nodes with equal labels are the same node.
        """
        if label is None:
            raise TypeError("node label must not be None")
        self._label = label
        self.color = COLOR_WHITE
        self.integer_distance = 0
        self.floating_point_distance = 0.0
        self.previous: Optional["GraphNode"] = None
        self.entering_time = 0
        self.exiting_time = 0

    @property
    def label(self) -> Hashable:
        return self._label

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, GraphNode):
            return NotImplemented
        return self._label == other._label

    def __hash__(self) -> int:
        return hash(self._label)

    def __repr__(self) -> str:
        return f"GraphNode({self._label!r})"

    def __str__(self) -> str:
        return f"Node[ {self._label} ]"


class GraphEdge:
    """
    An edge between two nodes.

    Parameters
    ----------
    node1 : GraphNode
        First endpoint (the source, for directed edges).
    node2 : GraphNode
        Second endpoint (the target, for directed edges).
    directed : bool
        Whether the edge is directed.
    weight : float, optional
        Weight of the edge. Defaults to ``nan``, meaning unweighted.
    """

    __slots__ = ("_node1", "_node2", "_directed", "weight")

    def __init__(
        self,
        node1: GraphNode,
        node2: GraphNode,
        directed: bool,
        weight: float = math.nan,
    ):
        if node1 is None:
            raise TypeError("node1 must not be None")
        if node2 is None:
            raise TypeError("node2 must not be None")
        self._node1 = node1
        self._node2 = node2
        self._directed = bool(directed)
        self.weight = float(weight)

    @property
    def node1(self) -> GraphNode:
        return self._node1

    @property
    def node2(self) -> GraphNode:
        return self._node2

    @property
    def directed(self) -> bool:
        return self._directed

    def is_directed(self) -> bool:
        return self._directed

    def has_weight(self) -> bool:
        """Return True unless the weight is the ``nan`` sentinel."""
        return not math.isnan(self.weight)

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, GraphEdge):
            return NotImplemented
        if self._directed != other._directed:
            return False
        if self._node1 == other._node1 and self._node2 == other._node2:
            return True
        # undirected edges match with swapped endpoints too
        return (
            not self._directed
            and self._node1 == other._node2
            and self._node2 == other._node1
        )

    def __hash__(self) -> int:
        if self._directed:
            return hash((True, self._node1, self._node2))
        return hash((False, frozenset((self._node1, self._node2))))

    def __repr__(self) -> str:
        return (
            f"GraphEdge({self._node1!r}, {self._node2!r}, "
            f"directed={self._directed}, weight={self.weight!r})"
        )

    def __str__(self) -> str:
        arrow = "-->" if self._directed else "--"
        return f"Edge [ {self._node1} {arrow} {self._node2} ]"
