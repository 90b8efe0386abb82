from typing import Any, Dict, Hashable, Iterable, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
import plotly.graph_objects as go
from matplotlib.axes import Axes

from pygraphforest.Graph import Graph
from pygraphforest.GraphElements import GraphEdge


def plot_edges(
    segments: Iterable[Sequence[np.ndarray]],
    ax: Axes,
    line_color: str = "b",
    line_width: float = 1.0,
):
    """
    Plot a set of straight edges on a 2D Matplotlib axis.

    Parameters
    ----------
    segments : Iterable[Sequence[np.ndarray]]
        Pairs of 2D points, one pair per edge.
    ax : matplotlib.axes.Axes
        A Matplotlib Axes object to plot on.
    line_color : str, optional
        Color of the edges, by default 'b'.
    line_width : float, optional
        Width of the edge lines, by default 1.0.
    """
    for p1, p2 in segments:
        ax.plot(
            [p1[0], p2[0]],
            [p1[1], p2[1]],
            linestyle="-",
            color=line_color,
            linewidth=line_width,
        )


def _layout_array(graph: Graph, positions: Dict[Hashable, Sequence[float]]) -> Dict[Hashable, np.ndarray]:
    layout = {}
    for node in graph.get_nodes():
        if node.label not in positions:
            raise ValueError(f"no position given for node {node.label!r}")
        layout[node.label] = np.asarray(positions[node.label], dtype=float)
    return layout


def _split_edges(graph: Graph, highlight_edges: Optional[Iterable[GraphEdge]]):
    highlighted = set(highlight_edges) if highlight_edges is not None else set()
    plain, marked = [], []
    for edge in graph.get_edges():
        (marked if edge in highlighted else plain).append(edge)
    return plain, marked


def plot_graph(
    graph: Graph,
    positions: Dict[Hashable, Sequence[float]],
    title: str = "Graph",
    fig: Optional[go.Figure] = None,
    ax: Optional[Axes] = None,
    highlight_edges: Optional[Iterable[GraphEdge]] = None,
    marker_size: float = 8,
    marker_color: Any = "black",
    line_width: float = 1.0,
    line_color: Any = "lightgrey",
    highlight_color: Any = "red",
    show_labels: bool = True,
):
    """
    Draw a graph from a 2D layout using either Matplotlib or Plotly.

    Parameters
    ----------
    graph : Graph
        The graph to draw.
    positions : dict
        Mapping from node label to an ``(x, y)`` position. Every node of the
        graph must have one.
    title : str, optional
        Title of the plot. Default is "Graph".
    fig : plotly.graph_objects.Figure, optional
        A Plotly figure to add to. If None, a new figure is created.
    ax : matplotlib.axes.Axes, optional
        A Matplotlib axis object to plot on. If provided, Matplotlib is used.
    highlight_edges : iterable of GraphEdge, optional
        Edges drawn in ``highlight_color`` on top of the others, for example
        a spanning forest returned by :class:`~pygraphforest.KruskalMSP`.
    marker_size : float, optional
        Size of the node markers. Default is 8.
    marker_color : Any, optional
        Color of the node markers. Default is "black".
    line_width : float, optional
        Width of the edge lines. Highlighted edges are drawn twice as wide.
    line_color : Any, optional
        Color of ordinary edges. Default is "lightgrey".
    highlight_color : Any, optional
        Color of highlighted edges. Default is "red".
    show_labels : bool, optional
        Whether to write node labels next to the markers. Default is True.

    Returns
    -------
    plotly.graph_objects.Figure or matplotlib.axes.Axes
        The figure or axis object used for plotting.
    """
    layout = _layout_array(graph, positions)
    plain, marked = _split_edges(graph, highlight_edges)

    if ax is not None:
        ax.set_title(title)
        plot_edges(
            [(layout[e.node1.label], layout[e.node2.label]) for e in plain],
            ax, line_color=line_color, line_width=line_width,
        )
        plot_edges(
            [(layout[e.node1.label], layout[e.node2.label]) for e in marked],
            ax, line_color=highlight_color, line_width=2 * line_width,
        )
        if layout:
            pts = np.array(list(layout.values()))
            ax.scatter(pts[:, 0], pts[:, 1], color=marker_color, s=marker_size**2, zorder=3)
        if show_labels:
            for label, (x, y) in layout.items():
                ax.annotate(str(label), (x, y), textcoords="offset points", xytext=(4, 4))
        return ax

    return _plot_graph_plotly(
        layout, plain, marked, title, fig,
        marker_size, marker_color, line_width, line_color, highlight_color,
        show_labels,
    )


def _plot_graph_plotly(
    layout: Dict[Hashable, np.ndarray],
    plain,
    marked,
    title: str,
    fig: Optional[go.Figure],
    marker_size: float,
    marker_color: Any,
    line_width: float,
    line_color: Any,
    highlight_color: Any,
    show_labels: bool,
):
    """Internal helper to render a graph layout using Plotly."""
    if fig is None:
        fig = go.Figure()

    for edges, color, width in (
        (plain, line_color, line_width),
        (marked, highlight_color, 2 * line_width),
    ):
        for edge in edges:
            A = layout[edge.node1.label]
            B = layout[edge.node2.label]
            fig.add_trace(go.Scatter(
                x=[A[0], B[0]], y=[A[1], B[1]],
                mode="lines",
                line=dict(color=color, width=width),
                showlegend=False,
            ))

    labels = list(layout.keys())
    pts = np.array([layout[label] for label in labels]).reshape(-1, 2)
    fig.add_trace(go.Scatter(
        x=pts[:, 0], y=pts[:, 1],
        mode="markers+text" if show_labels else "markers",
        text=[str(label) for label in labels] if show_labels else None,
        textposition="top right",
        marker=dict(size=marker_size, color=marker_color),
        name="Nodes",
    ))

    fig.update_layout(
        title=title,
        xaxis=dict(showgrid=False, zeroline=False),
        yaxis=dict(showgrid=False, zeroline=False, scaleanchor="x"),
        margin=dict(l=0, r=0, b=0, t=30),
    )
    return fig


def show_spanning_forest(graph: Graph, positions: Dict[Hashable, Sequence[float]], spanning_edges: Iterable[GraphEdge]):
    """Open a Matplotlib window with ``spanning_edges`` highlighted on ``graph``."""
    _, ax = plt.subplots()
    plot_graph(graph, positions, title="Minimum spanning forest", ax=ax, highlight_edges=spanning_edges)
    plt.show()
    return ax
