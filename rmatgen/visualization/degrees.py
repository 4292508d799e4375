"""Degree distribution plots."""

import matplotlib.pyplot as plt
import numpy as np

from rmatgen.graph.types import GraphStats
from rmatgen.visualization.style import DEGREE_COLOR


def plot_degree_histogram(stats: GraphStats, log_scale: bool = False) -> plt.Figure:
    """Histogram of vertex degrees, one bar per integer degree.

    Args:
        stats: Graph statistics holding the degree sequence.
        log_scale: Use a logarithmic count axis, useful for skewed
            R-MAT degree distributions.

    Returns:
        The matplotlib Figure.
    """
    degrees = np.asarray(stats.degrees)
    fig, ax = plt.subplots(figsize=(8, 5))

    if degrees.size == 0 or degrees.max() == 0:
        ax.text(
            0.5, 0.5, "No edges",
            transform=ax.transAxes, ha="center", va="center",
            fontsize=12, color="gray",
        )
    else:
        counts = np.bincount(degrees)
        ax.bar(np.arange(counts.size), counts, color=DEGREE_COLOR, width=0.9)
        if log_scale:
            ax.set_yscale("log")
        mean = degrees.mean()
        ax.axvline(mean, color="gray", linestyle="--", label=f"mean = {mean:.2f}")
        ax.legend()

    ax.set_xlabel("Degree")
    ax.set_ylabel("Vertices")
    ax.set_title(f"Degree distribution ({stats.vertices} vertices, {stats.edges} edges)")
    fig.tight_layout()
    return fig
