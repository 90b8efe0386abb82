from pygraphforest.GraphElements import (
    GraphNode,
    GraphEdge,
    COLOR_WHITE,
    COLOR_GREY,
    COLOR_BLACK
)
from pygraphforest.Graph import Graph
from pygraphforest.AdjacencyMatrixGraph import AdjacencyMatrixUndirectedGraph
from pygraphforest.DisjointSets import DisjointSets, ForestDisjointSets
from pygraphforest.KruskalMSP import KruskalMSP, spanning_forest_weight
from pygraphforest.ConnectedComponents import ConnectedComponentsComputer
from pygraphforest.plotting import plot_graph, show_spanning_forest

__all__ = [
    "GraphNode",
    "GraphEdge",
    "COLOR_WHITE",
    "COLOR_GREY",
    "COLOR_BLACK",
    "Graph",
    "AdjacencyMatrixUndirectedGraph",
    "DisjointSets",
    "ForestDisjointSets",
    "KruskalMSP",
    "spanning_forest_weight",
    "ConnectedComponentsComputer",
    "plot_graph",
    "show_spanning_forest",
]
