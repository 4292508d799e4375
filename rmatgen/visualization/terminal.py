"""Terminal rendering of an adjacency matrix as 0/1 tokens.

Set cells are drawn red; cells that can never hold an edge (the diagonal
without self loops, the unused upper triangle of an undirected graph) are
drawn gray. Coloring is presentation only; with ``color=False`` the output
is identical to the text serialization.
"""

import numpy as np

from rmatgen.graph.adjacency import AdjacencyMatrix
from rmatgen.graph.stats import max_degree_vertex
from rmatgen.graph.types import GraphStats

RED = "\x1b[31m"
GRAY = "\x1b[38;2;120;120;120m"
RESET = "\x1b[0m"


def unused_mask(matrix: AdjacencyMatrix) -> np.ndarray:
    """Boolean mask of cells the fill engine never writes."""
    size = matrix.size
    if matrix.directed:
        mask = np.zeros((size, size), dtype=np.bool_)
    else:
        # k=1 keeps the diagonal usable, k=0 marks it unused too
        mask = np.triu(np.ones((size, size), dtype=np.bool_),
                       k=1 if matrix.self_connections_allowed else 0)
    if not matrix.self_connections_allowed:
        np.fill_diagonal(mask, True)
    return mask


def render_matrix(matrix: AdjacencyMatrix, color: bool = True) -> str:
    """Render the matrix one row per line, each cell as ``"1 "``/``"0 "``."""
    cells = matrix.cells
    unused = unused_mask(matrix)
    lines = []
    for i in range(matrix.size):
        tokens = []
        for j in range(matrix.size):
            token = "1" if cells[i, j] else "0"
            if color and unused[i, j]:
                token = f"{GRAY}{token}{RESET}"
            elif color and cells[i, j]:
                token = f"{RED}{token}{RESET}"
            tokens.append(token + " ")
        lines.append("".join(tokens) + "\n")
    return "".join(lines)


def format_stats(stats: GraphStats) -> str:
    """Summary lines printed after the matrix."""
    vertex, degree = max_degree_vertex(stats)
    return (
        f"Density: {stats.density * 100.0:.4f}%\n"
        f"Edges: {stats.edges}\n"
        f"Vertices: {stats.vertices}\n"
        f"Vertex {vertex} has the highest degree with {degree}\n"
    )
