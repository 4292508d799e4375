"""Dense boolean adjacency store and its plain-text serialization.

The matrix side is always a power of two (2**n). Cells are only ever set,
never cleared. Undirected matrices are populated in the lower triangle
(row >= col) only.

Text format: one line per row, every cell written as ``"1 "`` or ``"0 "``,
each row terminated by a newline.
"""

import logging
from pathlib import Path

import numpy as np

log = logging.getLogger(__name__)


class AdjacencyMatrix:
    """Square boolean matrix of side 2**n holding directed edge cells."""

    def __init__(
        self,
        cells: np.ndarray,
        directed: bool,
        self_connections_allowed: bool,
    ) -> None:
        if cells.ndim != 2 or cells.shape[0] != cells.shape[1]:
            raise ValueError(f"Adjacency must be square, got shape {cells.shape}")
        size = cells.shape[0]
        if size < 1 or size & (size - 1):
            raise ValueError(f"Adjacency side must be a power of two, got {size}")
        if not self_connections_allowed and cells.diagonal().any():
            raise ValueError(
                "Diagonal cells are set but self connections are not allowed"
            )
        if not directed and np.triu(cells, k=1).any():
            raise ValueError(
                "Undirected adjacency has cells set above the diagonal"
            )

        self._cells = cells.astype(np.bool_, copy=True)
        self.directed = directed
        self.self_connections_allowed = self_connections_allowed
        self.n = size.bit_length() - 1

    @classmethod
    def new(
        cls, directed: bool, self_connections_allowed: bool, n: int
    ) -> "AdjacencyMatrix":
        """Allocate an all-false 2**n x 2**n matrix."""
        if n < 0:
            raise ValueError(f"Vertex exponent n must be non-negative, got {n}")
        size = 2**n
        return cls(
            np.zeros((size, size), dtype=np.bool_),
            directed,
            self_connections_allowed,
        )

    @property
    def size(self) -> int:
        return self._cells.shape[0]

    @property
    def vertices(self) -> int:
        return self.size

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the underlying boolean array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(
                f"Cell ({row}, {col}) outside {self.size}x{self.size} matrix"
            )

    def get(self, row: int, col: int) -> bool:
        self._check_bounds(row, col)
        return bool(self._cells[row, col])

    def set(self, row: int, col: int) -> None:
        """Mark cell (row, col) as an edge.

        Raises:
            IndexError: If the cell lies outside the matrix.
            ValueError: If the cell is already set, is a forbidden
                diagonal cell, or lies above the diagonal of an undirected
                matrix.
        """
        self._check_bounds(row, col)
        if not self.is_fillable(row, col):
            raise ValueError(
                f"Cell ({row}, {col}) is on the diagonal and self "
                f"connections are not allowed"
            )
        if not self.directed and col > row:
            raise ValueError(
                f"Cell ({row}, {col}) is above the diagonal of an undirected matrix"
            )
        if self._cells[row, col]:
            raise ValueError(f"Cell ({row}, {col}) is already set")
        self._cells[row, col] = True

    def is_fillable(self, row: int, col: int) -> bool:
        return self.self_connections_allowed or row != col

    def count(self) -> int:
        return int(np.count_nonzero(self._cells))

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return (
            f"AdjacencyMatrix(n={self.n}, {kind}, "
            f"self_connections_allowed={self.self_connections_allowed}, "
            f"edges={self.count()})"
        )


def matrix_to_text(matrix: AdjacencyMatrix) -> str:
    """Serialize the matrix as ``"1 "``/``"0 "`` tokens, one row per line."""
    return "".join(
        "".join("1 " if cell else "0 " for cell in row) + "\n"
        for row in matrix.cells
    )


def matrix_from_text(
    text: str, directed: bool, self_connections_allowed: bool
) -> AdjacencyMatrix:
    """Parse text produced by :func:`matrix_to_text`.

    Raises:
        ValueError: On tokens other than 0/1, a non-square grid, or cells
            the graph class forbids.
    """
    rows = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        tokens = line.split()
        if not tokens:
            continue
        if any(token not in ("0", "1") for token in tokens):
            raise ValueError(f"Line {line_no}: expected only 0/1 tokens")
        rows.append([token == "1" for token in tokens])

    if not rows or any(len(row) != len(rows) for row in rows):
        raise ValueError(
            f"Expected a square grid, got {len(rows)} rows of lengths "
            f"{sorted({len(row) for row in rows})}"
        )
    return AdjacencyMatrix(
        np.array(rows, dtype=np.bool_), directed, self_connections_allowed
    )


def save_matrix_text(matrix: AdjacencyMatrix, path: str | Path) -> Path:
    """Write the text serialization of ``matrix`` to ``path``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(matrix_to_text(matrix))
    log.info("Adjacency matrix (%dx%d) saved to %s", matrix.size, matrix.size, path)
    return path


def load_matrix_text(
    path: str | Path, directed: bool, self_connections_allowed: bool
) -> AdjacencyMatrix:
    """Read a matrix previously written by :func:`save_matrix_text`."""
    return matrix_from_text(
        Path(path).read_text(), directed, self_connections_allowed
    )
