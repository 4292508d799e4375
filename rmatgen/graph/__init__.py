"""R-MAT graph generation: quadrant probabilities, adjacency store, fill, stats."""

from rmatgen.graph.adjacency import (
    AdjacencyMatrix,
    load_matrix_text,
    matrix_from_text,
    matrix_to_text,
    save_matrix_text,
)
from rmatgen.graph.cache import (
    generate_or_load_graph,
    graph_cache_key,
    load_graph,
    save_graph,
)
from rmatgen.graph.probabilities import (
    InvalidProbabilitySpecError,
    QuarterProbabilities,
    parse_probabilities,
)
from rmatgen.graph.rmat import (
    InvalidRegionError,
    attempt_placement,
    fill_graph,
    fillable_cell_count,
    generate_rmat_graph,
    place_edge,
    target_edge_count,
)
from rmatgen.graph.stats import (
    compute_stats,
    graph_density,
    max_degree_vertex,
    vertex_degrees,
)
from rmatgen.graph.types import FillResult, GraphStats

__all__ = [
    "AdjacencyMatrix",
    "FillResult",
    "GraphStats",
    "InvalidProbabilitySpecError",
    "InvalidRegionError",
    "QuarterProbabilities",
    "attempt_placement",
    "compute_stats",
    "fill_graph",
    "fillable_cell_count",
    "generate_or_load_graph",
    "generate_rmat_graph",
    "graph_cache_key",
    "graph_density",
    "load_graph",
    "load_matrix_text",
    "matrix_from_text",
    "matrix_to_text",
    "max_degree_vertex",
    "parse_probabilities",
    "place_edge",
    "save_graph",
    "save_matrix_text",
    "target_edge_count",
    "vertex_degrees",
]
