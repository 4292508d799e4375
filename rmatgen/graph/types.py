"""Result containers for R-MAT fill runs and adjacency statistics."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class GraphStats:
    """Read-only snapshot of the statistics of a filled adjacency matrix.

    Computed fresh from the matrix; recompute to refresh. Uses frozen=True
    but omits slots=True since the degree array is a numpy object.
    """

    density: float  # edges relative to the maximum for the graph class
    edges: int  # raw count of set cells (not adjusted for symmetry)
    vertices: int  # matrix side length, 2**n
    degrees: np.ndarray  # int array of length vertices, indexed by vertex id


@dataclass(frozen=True, slots=True)
class FillResult:
    """Outcome of one fill run.

    ``exhausted`` is True when placement ran out of fillable cells before
    reaching ``target``; this is a normal termination, not an error.
    """

    filled: int  # successful placements
    target: int  # floor(target_density * fillable)
    fillable: int  # fillable cell count for the graph class
    exhausted: bool = False
