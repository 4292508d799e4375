"""Graph caching by config hash with compressed sparse matrix storage.

Filled matrices are stored as scipy CSR ``.npz`` archives next to a JSON
metadata file, so rerunning a seeded config skips the fill entirely.
Unseeded configs are never cached since they are not reproducible.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import numpy as np
import scipy.sparse

from rmatgen.config.experiment import GeneratorConfig
from rmatgen.config.hashing import graph_config_hash
from rmatgen.graph.adjacency import AdjacencyMatrix
from rmatgen.graph.rmat import generate_rmat_graph
from rmatgen.graph.types import FillResult

log = logging.getLogger(__name__)

DEFAULT_CACHE_DIR = Path(".cache/graphs")


def graph_cache_key(config: GeneratorConfig) -> str:
    """Cache key = graph_config_hash + seed, e.g. ``"a1b2c3d4e5f6a7b8_s42"``.

    Raises:
        ValueError: If the config has no seed.
    """
    if config.seed is None:
        raise ValueError("Unseeded configs cannot be cached")
    return f"{graph_config_hash(config)}_s{config.seed}"


def _cache_path(config: GeneratorConfig, cache_dir: Path = DEFAULT_CACHE_DIR) -> Path:
    return Path(cache_dir) / graph_cache_key(config)


def save_graph(
    matrix: AdjacencyMatrix,
    fill_result: FillResult,
    config: GeneratorConfig,
    cache_dir: Path = DEFAULT_CACHE_DIR,
) -> Path:
    """Save a filled matrix and its fill result to the cache.

    Stores:
    - adjacency.npz: scipy sparse CSR matrix of the set cells
    - metadata.json: graph class flags, n, fill counts, provenance

    Returns:
        Path to the cache directory for this graph.
    """
    cache_path = _cache_path(config, cache_dir)
    cache_path.mkdir(parents=True, exist_ok=True)

    scipy.sparse.save_npz(
        str(cache_path / "adjacency.npz"),
        scipy.sparse.csr_matrix(matrix.cells.astype(np.int8)),
    )

    metadata = {
        "n": matrix.n,
        "directed": matrix.directed,
        "self_connections_allowed": matrix.self_connections_allowed,
        "filled": fill_result.filled,
        "target": fill_result.target,
        "fillable": fill_result.fillable,
        "exhausted": fill_result.exhausted,
        "config_hash": graph_config_hash(config),
        "seed": config.seed,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    with open(cache_path / "metadata.json", "w") as f:
        json.dump(metadata, f, indent=2)

    log.info("Graph cached at %s", cache_path)
    return cache_path


def load_graph(
    config: GeneratorConfig, cache_dir: Path = DEFAULT_CACHE_DIR
) -> tuple[AdjacencyMatrix, FillResult] | None:
    """Load a cached graph, or None on a cache miss."""
    cache_path = _cache_path(config, cache_dir)

    for fname in ("adjacency.npz", "metadata.json"):
        if not (cache_path / fname).exists():
            return None

    sparse = scipy.sparse.load_npz(str(cache_path / "adjacency.npz"))
    with open(cache_path / "metadata.json") as f:
        metadata = json.load(f)

    matrix = AdjacencyMatrix(
        sparse.toarray().astype(np.bool_),
        directed=metadata["directed"],
        self_connections_allowed=metadata["self_connections_allowed"],
    )
    fill_result = FillResult(
        filled=metadata["filled"],
        target=metadata["target"],
        fillable=metadata["fillable"],
        exhausted=metadata["exhausted"],
    )

    log.info("Graph loaded from cache: %s", cache_path)
    return matrix, fill_result


def generate_or_load_graph(
    config: GeneratorConfig, cache_dir: Path = DEFAULT_CACHE_DIR
) -> tuple[AdjacencyMatrix, FillResult]:
    """Generate a graph or load it from the cache when available.

    Unseeded configs always generate and are not written to the cache.
    """
    if config.seed is None:
        log.info("Unseeded config, generating without cache")
        return generate_rmat_graph(config)

    key = graph_cache_key(config)
    cached = load_graph(config, cache_dir)
    if cached is not None:
        log.info("Cache hit for %s", key)
        return cached

    log.info("Cache miss for %s, generating...", key)
    matrix, fill_result = generate_rmat_graph(config)
    save_graph(matrix, fill_result, config, cache_dir)
    return matrix, fill_result
