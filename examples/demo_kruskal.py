import itertools
import numpy as np
from pygraphforest import (
    AdjacencyMatrixUndirectedGraph,
    GraphEdge,
    GraphNode,
    KruskalMSP,
    show_spanning_forest,
    spanning_forest_weight,
)

rng = np.random.default_rng(0)
points = rng.uniform(0, 10, size=(12, 2))

# Complete graph on random points, weighted by euclidean distance
graph = AdjacencyMatrixUndirectedGraph()
nodes = [GraphNode(i) for i in range(len(points))]
for node in nodes:
    graph.add_node(node)
for a, b in itertools.combinations(range(len(points)), 2):
    weight = float(np.linalg.norm(points[a] - points[b]))
    graph.add_edge(GraphEdge(nodes[a], nodes[b], False, weight))

mst = KruskalMSP().compute_msp(graph)
print(f"{len(mst)} edges, total weight {spanning_forest_weight(mst):.3f}")

positions = {i: points[i] for i in range(len(points))}
show_spanning_forest(graph, positions, mst)
