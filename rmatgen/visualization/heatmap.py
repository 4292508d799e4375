"""Adjacency matrix heatmap with unused cells greyed out."""

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns
from matplotlib.colors import ListedColormap

from rmatgen.graph.adjacency import AdjacencyMatrix
from rmatgen.visualization.style import EDGE_COLOR, EMPTY_COLOR, UNUSED_COLOR
from rmatgen.visualization.terminal import unused_mask

# Matrices above this side length drop per-cell grid lines and tick labels
_DETAILED_MAX_SIZE = 32


def plot_adjacency_heatmap(matrix: AdjacencyMatrix, title: str | None = None) -> plt.Figure:
    """Plot the adjacency matrix: set cells colored, unused cells gray.

    Args:
        matrix: Filled adjacency store.
        title: Optional title; defaults to a summary of the graph class.

    Returns:
        The matplotlib Figure containing the heatmap.
    """
    # 0 = empty, 1 = edge, 2 = never fillable
    codes = matrix.cells.astype(np.int8)
    codes[unused_mask(matrix) & ~matrix.cells] = 2

    detailed = matrix.size <= _DETAILED_MAX_SIZE
    side = min(10.0, max(4.0, matrix.size * 0.3))
    fig, ax = plt.subplots(figsize=(side, side))

    sns.heatmap(
        codes,
        cmap=ListedColormap([EMPTY_COLOR, EDGE_COLOR, UNUSED_COLOR]),
        vmin=0,
        vmax=2,
        cbar=False,
        square=True,
        linewidths=0.5 if detailed else 0.0,
        linecolor="white",
        xticklabels=detailed,
        yticklabels=detailed,
        ax=ax,
    )
    ax.set_xlabel("Target vertex")
    ax.set_ylabel("Source vertex")
    if title is None:
        kind = "directed" if matrix.directed else "undirected"
        loops = "self loops" if matrix.self_connections_allowed else "no self loops"
        title = f"R-MAT adjacency ({matrix.vertices} vertices, {kind}, {loops})"
    ax.set_title(title)

    fig.tight_layout()
    return fig
