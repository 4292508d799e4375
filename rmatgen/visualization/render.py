"""Orchestrator: render all figures for a single generator run.

Saves to {output_dir}/figures/ as PNG + SVG.
"""

import logging
from pathlib import Path

from rmatgen.graph.adjacency import AdjacencyMatrix
from rmatgen.graph.types import GraphStats
from rmatgen.visualization.degrees import plot_degree_histogram
from rmatgen.visualization.heatmap import plot_adjacency_heatmap
from rmatgen.visualization.style import apply_style, save_figure

log = logging.getLogger(__name__)


def render_all(
    matrix: AdjacencyMatrix, stats: GraphStats, output_dir: str | Path
) -> list[Path]:
    """Generate the adjacency heatmap and degree histogram.

    Each plot is wrapped in try/except so one failure doesn't block the
    other.

    Returns:
        List of paths to generated figure files.
    """
    apply_style()
    figures_dir = Path(output_dir) / "figures"
    generated_files: list[Path] = []

    plots = [
        ("adjacency", lambda: plot_adjacency_heatmap(matrix)),
        ("degree_distribution", lambda: plot_degree_histogram(stats)),
    ]
    for name, plot in plots:
        try:
            fig = plot()
            generated_files.extend(save_figure(fig, figures_dir, name))
        except Exception:
            log.exception("Failed to render %s figure", name)

    log.info("Generated %d figure files in %s", len(generated_files), figures_dir)
    return generated_files
