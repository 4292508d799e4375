"""Rendering of generated graphs: colored terminal text and static figures."""

from rmatgen.visualization.render import render_all
from rmatgen.visualization.style import apply_style, save_figure
from rmatgen.visualization.terminal import format_stats, render_matrix

__all__ = [
    "render_all",
    "apply_style",
    "save_figure",
    "format_stats",
    "render_matrix",
]
