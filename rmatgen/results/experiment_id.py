"""Run ID generation with a scannable parameter slug."""

from datetime import datetime, timezone

from rmatgen.config.experiment import GeneratorConfig


def generate_experiment_id(config: GeneratorConfig) -> str:
    """Generate a scannable run ID from config parameters.

    Format: n{n}_{d|u}{s|ns}_s{seed}_{YYYYMMDD}_{HHMMSS}
    Example: n4_uns_s42_20261017_143012 (undirected, no self loops)

    Unseeded runs use ``srand`` in place of the seed.
    """
    graph = config.graph
    ts = datetime.now(timezone.utc)
    kind = "d" if graph.directed else "u"
    loops = "s" if graph.self_connections_allowed else "ns"
    seed = "rand" if config.seed is None else str(config.seed)
    return f"n{graph.n}_{kind}{loops}_s{seed}_{ts.strftime('%Y%m%d_%H%M%S')}"
