from pygraphforest import (
    AdjacencyMatrixUndirectedGraph,
    ConnectedComponentsComputer,
    GraphEdge,
    GraphNode,
    plot_graph,
)

graph = AdjacencyMatrixUndirectedGraph()
for label in "abcdefg":
    graph.add_node(GraphNode(label))

for u, v in [("a", "b"), ("b", "c"), ("d", "e"), ("f", "f")]:
    graph.add_edge(GraphEdge(GraphNode(u), GraphNode(v), False))

components = ConnectedComponentsComputer().compute_connected_components(graph)
for component in sorted(components, key=lambda c: sorted(n.label for n in c)):
    print(sorted(node.label for node in component))

positions = {
    "a": (0, 0), "b": (1, 0), "c": (1, 1),
    "d": (3, 0), "e": (4, 1),
    "f": (6, 0), "g": (6, 2),
}
fig = plot_graph(graph, positions, title="Connected components")
fig.show()
