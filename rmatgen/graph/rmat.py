"""R-MAT fill engine: recursive quadrant descent with backtracking.

Each placement descends from the whole matrix into one quadrant at a time,
chosen by the quadrant probability model, until a single cell is reached.
An occupied or forbidden cell fails the branch and the parent tries its
remaining quadrants, so a placement only fails once every reachable cell of
the region is taken.

For undirected graphs the top-right and bottom-left quadrants mirror each
other, so top-right draws are remapped to bottom-left and only the lower
triangle (row >= col) is ever written.
"""

import logging
import math

from rmatgen.config.experiment import GeneratorConfig
from rmatgen.graph.adjacency import AdjacencyMatrix
from rmatgen.graph.probabilities import (
    BOTTOM_LEFT,
    TOP_RIGHT,
    QuarterProbabilities,
)
from rmatgen.graph.types import FillResult
from rmatgen.reproducibility.seed import make_rng

log = logging.getLogger(__name__)


class InvalidRegionError(RuntimeError):
    """Raised when recursive descent reaches an impossible region.

    Signals an internal consistency failure (bad region size or quadrant
    label), never a user-recoverable condition.
    """


def fillable_cell_count(n: int, directed: bool, self_connections_allowed: bool) -> int:
    """Number of cells that may hold an edge for the given graph class.

    Off-diagonal cells (4**n - 2**n), halved for undirected graphs, plus
    the 2**n diagonal cells when self connections are allowed.
    """
    fillable = 4**n - 2**n
    if not directed:
        fillable //= 2
    if self_connections_allowed:
        fillable += 2**n
    return fillable


def target_edge_count(target_density: float, fillable: int) -> int:
    return math.floor(target_density * fillable)


def attempt_placement(
    matrix: AdjacencyMatrix,
    probabilities: QuarterProbabilities,
    start_row: int,
    start_col: int,
    size: int,
    collapse_upper_triangle: bool,
) -> bool:
    """Set one previously empty cell inside the given square region.

    Args:
        matrix: Adjacency store to write into.
        probabilities: Quadrant model used to pick the descent order.
        start_row: Top row of the region.
        start_col: Left column of the region.
        size: Side length of the region (a power of two).
        collapse_upper_triangle: Fold top-right draws onto bottom-left.
            Stays active only while descending along the diagonal.

    Returns:
        True if a cell was set, False if every reachable cell of the region
        is already set or forbidden.

    Raises:
        InvalidRegionError: On a region smaller than one cell, an odd
            region size, or a quadrant label outside 0..3.
    """
    if size < 1:
        raise InvalidRegionError(
            f"Region at ({start_row}, {start_col}) has size {size} < 1"
        )

    if size == 1:
        if not matrix.is_fillable(start_row, start_col):
            return False
        if matrix.get(start_row, start_col):
            return False
        matrix.set(start_row, start_col)
        return True

    if size % 2:
        raise InvalidRegionError(
            f"Region at ({start_row}, {start_col}) has odd size {size}"
        )

    tried = [False] * 4
    if collapse_upper_triangle:
        tried[TOP_RIGHT] = True

    half = size // 2
    while not all(tried):
        quadrant = probabilities.sample()
        if collapse_upper_triangle and quadrant == TOP_RIGHT:
            quadrant = BOTTOM_LEFT
        if not 0 <= quadrant < 4:
            raise InvalidRegionError(f"Quadrant label {quadrant} out of range")
        if tried[quadrant]:
            # one draw over the untried quadrants only; zero-mass ones still
            # come up, in label order, once nothing else is left
            quadrant = probabilities.sample_untried(tried, collapse_upper_triangle)
        tried[quadrant] = True

        row = start_row + (half if quadrant > 1 else 0)
        col = start_col + (half if quadrant % 2 else 0)
        collapse_child = collapse_upper_triangle and quadrant != BOTTOM_LEFT

        if attempt_placement(matrix, probabilities, row, col, half, collapse_child):
            return True

    return False


def place_edge(matrix: AdjacencyMatrix, probabilities: QuarterProbabilities) -> bool:
    """Place a single edge anywhere in the matrix."""
    return attempt_placement(
        matrix, probabilities, 0, 0, matrix.size, not matrix.directed
    )


def fill_graph(
    matrix: AdjacencyMatrix,
    probabilities: QuarterProbabilities,
    target_density: float,
) -> FillResult:
    """Place edges until the target edge count is reached or capacity runs out.

    Target = floor(target_density * fillable cells). Running out of free
    cells first ends the loop early; the result is flagged ``exhausted``
    instead of raising, and whatever was filled stays in the matrix.

    Args:
        matrix: Adjacency store to populate (mutated in place).
        probabilities: Quadrant probability model.
        target_density: Desired density in [0, 1].

    Returns:
        FillResult with filled/target/fillable counts.

    Raises:
        ValueError: If target_density is outside [0, 1].
    """
    if not 0.0 <= target_density <= 1.0:
        raise ValueError(f"target_density must be in [0, 1], got {target_density}")

    fillable = fillable_cell_count(
        matrix.n, matrix.directed, matrix.self_connections_allowed
    )
    target = target_edge_count(target_density, fillable)
    log.debug(
        "Filling %dx%d matrix: fillable=%d, target=%d (density %.4f)",
        matrix.size,
        matrix.size,
        fillable,
        target,
        target_density,
    )

    filled = 0
    exhausted = False
    while filled < target:
        if not place_edge(matrix, probabilities):
            exhausted = True
            log.warning(
                "Matrix capacity exhausted: filled %d < target %d", filled, target
            )
            break
        filled += 1

    log.info("Filled %d fields (target %d, fillable %d)", filled, target, fillable)
    return FillResult(
        filled=filled, target=target, fillable=fillable, exhausted=exhausted
    )


def generate_rmat_graph(
    config: GeneratorConfig,
) -> tuple[AdjacencyMatrix, FillResult]:
    """Build and fill an R-MAT adjacency matrix from a generator config.

    The random source is seeded from ``config.seed``; the same config
    always yields the same matrix unless the seed is None.
    """
    graph = config.graph
    probabilities = QuarterProbabilities(
        tuple(graph.probabilities), make_rng(config.seed)
    )
    matrix = AdjacencyMatrix.new(graph.directed, graph.self_connections_allowed, graph.n)
    result = fill_graph(matrix, probabilities, graph.target_density)
    log.info(
        "R-MAT graph generated (n=%d, vertices=%d, directed=%s, edges=%d)",
        graph.n,
        matrix.vertices,
        graph.directed,
        matrix.count(),
    )
    return matrix, result
