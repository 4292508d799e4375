"""Edge count, class-normalized density and per-vertex degree of a filled matrix."""

import numpy as np

from rmatgen.graph.adjacency import AdjacencyMatrix
from rmatgen.graph.types import GraphStats


def graph_density(
    edges: int, vertices: int, directed: bool, self_connections_allowed: bool
) -> float:
    """Density of ``edges`` relative to the graph class maximum.

    Directed graphs use v*v (self loops) or v*(v-1) (no self loops).
    Undirected graphs store one triangle only, so the count is doubled
    against v*(v+1) or v*(v-1). A zero denominator (a single vertex
    without self loops) yields 0.0.
    """
    v = float(vertices)
    if self_connections_allowed:
        denominator = v * v if directed else v * (v + 1.0)
    else:
        denominator = v * (v - 1.0)

    if denominator == 0.0:
        return 0.0

    density = edges / denominator
    if not directed:
        density *= 2.0
    return density


def vertex_degrees(matrix: AdjacencyMatrix) -> np.ndarray:
    """Per-vertex degree indexed by vertex id.

    Directed: out-degree (row sums). Undirected: only the lower triangle
    is read, with each upper cell (row, col) folded onto (col, row), so
    every stored edge counts for both endpoints and a self loop counts once.
    """
    cells = matrix.cells
    if matrix.directed:
        return cells.sum(axis=1, dtype=np.int64)

    lower = np.tril(cells)
    # row part: (row, col) with col <= row; folded part: (col, row) with col > row
    return lower.sum(axis=1, dtype=np.int64) + np.tril(cells, k=-1).sum(
        axis=0, dtype=np.int64
    )


def compute_stats(matrix: AdjacencyMatrix) -> GraphStats:
    """Summarize the current state of ``matrix``."""
    edges = matrix.count()
    vertices = matrix.vertices
    return GraphStats(
        density=graph_density(
            edges, vertices, matrix.directed, matrix.self_connections_allowed
        ),
        edges=edges,
        vertices=vertices,
        degrees=vertex_degrees(matrix),
    )


def max_degree_vertex(stats: GraphStats) -> tuple[int, int]:
    """(vertex, degree) of the highest-degree vertex, highest id on ties."""
    degrees = stats.degrees
    vertex = len(degrees) - 1 - int(np.argmax(degrees[::-1]))
    return vertex, int(degrees[vertex])
