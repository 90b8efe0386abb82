"""
Adjacency matrix graph
======================

An undirected graph stored as a square ``numpy`` object matrix.

Nodes are indexed ``0 .. node_count() - 1`` in insertion order.  Cell
``(i, j)`` of the matrix is ``None`` when nodes ``i`` and ``j`` are not
adjacent and holds the :class:`~pygraphforest.GraphElements.GraphEdge`
joining them otherwise; the same edge object sits at ``(j, i)``.

Removing a node deletes its row and column and shifts every higher index down
by one, so indices always form the contiguous range ``[0, n)``.  The
node -> index map, the index -> node list and the matrix are private and are
only ever changed together, inside a single method call.
"""

from typing import Dict, Hashable, List, Optional, Set, Tuple

import numpy as np
from scipy import sparse

from pygraphforest.Graph import Graph
from pygraphforest.GraphElements import GraphEdge, GraphNode

_occupied = np.frompyfunc(lambda cell: cell is not None, 1, 1)


class AdjacencyMatrixUndirectedGraph(Graph):
    """Undirected graph backed by an adjacency matrix of edge references."""

    def __init__(self):
        self._index: Dict[GraphNode, int] = {}
        self._nodes: List[GraphNode] = []
        self._matrix: np.ndarray = np.empty((0, 0), dtype=object)

    # ------------------------------------------------------------------
    # sizes
    # ------------------------------------------------------------------

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        """
        Count the stored edges.

        Every edge occupies two symmetric cells except self-loops, which sit
        on the diagonal; the diagonal is counted twice so that halving the
        total is exact.
        """
        mask = self._occupied_mask()
        return int((mask.sum() + np.trace(mask)) // 2)

    def clear(self) -> None:
        self._index.clear()
        self._nodes.clear()
        self._matrix = np.empty((0, 0), dtype=object)

    def is_directed(self) -> bool:
        return False

    # ------------------------------------------------------------------
    # nodes
    # ------------------------------------------------------------------

    def get_nodes(self) -> Set[GraphNode]:
        return set(self._nodes)

    def add_node(self, node: GraphNode) -> bool:
        if node is None:
            raise TypeError("node must not be None")
        if node in self._index:
            return False

        n = len(self._nodes)
        grown = np.full((n + 1, n + 1), None, dtype=object)
        grown[:n, :n] = self._matrix

        self._matrix = grown
        self._index[node] = n
        self._nodes.append(node)
        return True

    def remove_node(self, node: GraphNode) -> bool:
        if node is None:
            raise TypeError("node must not be None")
        if node not in self._index:
            return False

        i = self._index.pop(node)
        self._matrix = np.delete(np.delete(self._matrix, i, axis=0), i, axis=1)
        del self._nodes[i]
        for k in range(i, len(self._nodes)):
            self._index[self._nodes[k]] = k
        return True

    def contains_node(self, node: GraphNode) -> bool:
        if node is None:
            raise TypeError("node must not be None")
        return node in self._index

    def get_node_of(self, label: Hashable) -> Optional[GraphNode]:
        if label is None:
            raise TypeError("label must not be None")
        i = self._index.get(GraphNode(label))
        if i is None:
            return None
        return self._nodes[i]

    def get_node_index_of(self, label: Hashable) -> int:
        if label is None:
            raise TypeError("label must not be None")
        i = self._index.get(GraphNode(label))
        if i is None:
            raise ValueError(f"no node labelled {label!r} in the graph")
        return i

    def get_node_at_index(self, i: int) -> GraphNode:
        if i < 0 or i >= len(self._nodes):
            raise IndexError(
                f"index {i} outside [0, {len(self._nodes)})"
            )
        return self._nodes[i]

    def get_adjacent_nodes_of(self, node: GraphNode) -> Set[GraphNode]:
        i = self._member_index(node)
        return {
            self._nodes[j]
            for j, edge in enumerate(self._matrix[i])
            if edge is not None
        }

    def get_predecessor_nodes_of(self, node: GraphNode) -> Set[GraphNode]:
        raise NotImplementedError("undirected graphs have no predecessor nodes")

    # ------------------------------------------------------------------
    # edges
    # ------------------------------------------------------------------

    def get_edges(self) -> Set[GraphEdge]:
        rows, cols = np.nonzero(self._occupied_mask())
        return {self._matrix[i, j] for i, j in zip(rows, cols)}

    def add_edge(self, edge: GraphEdge) -> bool:
        i, j = self._edge_cell(edge)
        if self._matrix[i, j] is not None:
            return False

        stored = GraphEdge(self._nodes[i], self._nodes[j], False, edge.weight)
        self._matrix[i, j] = stored
        self._matrix[j, i] = stored
        return True

    def remove_edge(self, edge: GraphEdge) -> bool:
        i, j = self._edge_cell(edge)
        if self._matrix[i, j] is None:
            return False

        self._matrix[i, j] = None
        self._matrix[j, i] = None
        return True

    def contains_edge(self, edge: GraphEdge) -> bool:
        i, j = self._edge_cell(edge)
        return self._matrix[i, j] is not None

    def get_edge(self, node1: GraphNode, node2: GraphNode) -> Optional[GraphEdge]:
        """Return the stored edge joining two member nodes, or None."""
        i = self._member_index(node1)
        j = self._member_index(node2)
        return self._matrix[i, j]

    def get_edges_of(self, node: GraphNode) -> Set[GraphEdge]:
        i = self._member_index(node)
        return {edge for edge in self._matrix[i] if edge is not None}

    def get_ingoing_edges_of(self, node: GraphNode) -> Set[GraphEdge]:
        raise NotImplementedError("undirected graphs have no ingoing edges")

    # ------------------------------------------------------------------
    # numeric views
    # ------------------------------------------------------------------

    def to_weight_matrix(self, missing: float = 0.0) -> np.ndarray:
        """
        Dense weight matrix in node-index order.

        Parameters
        ----------
        missing : float, optional
            Value written in cells with no edge. Default is 0.

        Returns
        -------
        np.ndarray
            An (n, n) float array. Unweighted edges contribute 1.0.
        """
        n = len(self._nodes)
        weights = np.full((n, n), missing, dtype=float)
        rows, cols = np.nonzero(self._occupied_mask())
        for i, j in zip(rows, cols):
            weights[i, j] = self._cell_weight(self._matrix[i, j])
        return weights

    def to_sparse_matrix(self) -> sparse.csr_array:
        """
        Sparse weight matrix in node-index order, with no stored entry for
        absent edges. Suitable for ``scipy.sparse.csgraph`` routines.
        """
        n = len(self._nodes)
        rows, cols = np.nonzero(self._occupied_mask())
        data = np.array(
            [self._cell_weight(self._matrix[i, j]) for i, j in zip(rows, cols)],
            dtype=float,
        )
        return sparse.csr_array((data, (rows, cols)), shape=(n, n))

    def check_invariants(self) -> None:
        """Assert that the index map, node list and matrix agree."""
        n = len(self._nodes)
        assert self._matrix.shape == (n, n), "matrix is not n x n"
        assert len(self._index) == n, "index map and node list differ in size"
        for i, node in enumerate(self._nodes):
            assert self._index[node] == i, f"{node} is not stored at index {i}"
        for i in range(n):
            for j in range(i, n):
                a, b = self._matrix[i, j], self._matrix[j, i]
                assert (a is None) == (b is None), f"cells ({i},{j}) asymmetric"
                if a is not None:
                    assert a == b, f"cells ({i},{j}) hold different edges"

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def _occupied_mask(self) -> np.ndarray:
        return _occupied(self._matrix).astype(bool)

    @staticmethod
    def _cell_weight(edge: GraphEdge) -> float:
        return edge.weight if edge.has_weight() else 1.0

    def _member_index(self, node: GraphNode) -> int:
        if node is None:
            raise TypeError("node must not be None")
        i = self._index.get(node)
        if i is None:
            raise ValueError(f"{node} is not a node of this graph")
        return i

    def _edge_cell(self, edge: GraphEdge) -> Tuple[int, int]:
        if edge is None:
            raise TypeError("edge must not be None")
        if edge.is_directed():
            raise ValueError("directed edges cannot be stored in an undirected graph")
        i = self._index.get(edge.node1)
        j = self._index.get(edge.node2)
        if i is None or j is None:
            raise ValueError(f"{edge} has an endpoint outside this graph")
        return i, j
