"""Result schema validation and writing.

Uses a Python validation function (not jsonschema) to check required
fields, types and degree sequence consistency before writing result.json.
"""

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from rmatgen.config.experiment import GeneratorConfig
from rmatgen.config.hashing import full_config_hash, graph_config_hash
from rmatgen.graph.stats import max_degree_vertex
from rmatgen.graph.types import FillResult, GraphStats
from rmatgen.reproducibility.git_hash import get_git_hash
from rmatgen.results.experiment_id import generate_experiment_id

SCHEMA_VERSION = "1.0"

REQUIRED_TOP_FIELDS = {
    "schema_version",
    "experiment_id",
    "timestamp",
    "description",
    "tags",
    "config",
    "metrics",
}

REQUIRED_SCALARS = {"density", "edges", "vertices"}
REQUIRED_FILL_FIELDS = {"filled", "target", "fillable", "exhausted"}


def build_metrics(stats: GraphStats, fill_result: FillResult) -> dict[str, Any]:
    """Assemble the metrics block from stats and the fill outcome."""
    vertex, degree = max_degree_vertex(stats)
    return {
        "scalars": {
            "density": stats.density,
            "edges": stats.edges,
            "vertices": stats.vertices,
            "max_degree_vertex": vertex,
            "max_degree": degree,
        },
        "degrees": [int(d) for d in stats.degrees],
        "fill": asdict(fill_result),
    }


def validate_result(result: dict[str, Any]) -> list[str]:
    """Validate a result dict against the project schema.

    Returns a list of error strings. An empty list means the result is valid.
    """
    errors: list[str] = []

    missing = REQUIRED_TOP_FIELDS - set(result.keys())
    if missing:
        errors.append(f"Missing required top-level fields: {sorted(missing)}")

    if "schema_version" in result and not isinstance(result["schema_version"], str):
        errors.append("schema_version must be a string")

    if "tags" in result and not isinstance(result["tags"], list):
        errors.append("tags must be a list")

    if "config" in result and not isinstance(result["config"], dict):
        errors.append("config must be a dict")

    if "timestamp" in result:
        ts = result["timestamp"]
        if not isinstance(ts, str):
            errors.append("timestamp must be a string")
        else:
            try:
                datetime.fromisoformat(ts)
            except ValueError:
                errors.append("timestamp must be in ISO 8601 format")

    metrics = result.get("metrics")
    if metrics is None:
        return errors
    if not isinstance(metrics, dict):
        errors.append("metrics must be a dict")
        return errors

    scalars = metrics.get("scalars")
    if not isinstance(scalars, dict):
        errors.append("metrics.scalars is required")
    else:
        for name in sorted(REQUIRED_SCALARS - set(scalars)):
            errors.append(f"metrics.scalars missing field: {name}")
        density = scalars.get("density")
        if isinstance(density, (int, float)) and not 0.0 <= density <= 1.0:
            errors.append(f"metrics.scalars.density {density} outside [0, 1]")

    fill = metrics.get("fill")
    if fill is not None:
        if not isinstance(fill, dict):
            errors.append("metrics.fill must be a dict")
        else:
            for name in sorted(REQUIRED_FILL_FIELDS - set(fill)):
                errors.append(f"metrics.fill missing field: {name}")

    # Degree sequence must cover every vertex
    degrees = metrics.get("degrees")
    if degrees is not None and isinstance(scalars, dict):
        vertices = scalars.get("vertices")
        if not isinstance(degrees, list):
            errors.append("metrics.degrees must be a list")
        elif vertices is not None and len(degrees) != vertices:
            errors.append(
                f"degrees length ({len(degrees)}) != vertices ({vertices})"
            )

    return errors


def write_result(
    config: GeneratorConfig,
    stats: GraphStats,
    fill_result: FillResult,
    metadata: dict[str, Any] | None = None,
    results_dir: str | Path = "results",
) -> Path:
    """Write results/{experiment_id}/result.json.

    Args:
        config: The generator configuration.
        stats: Stats of the filled matrix.
        fill_result: Outcome of the fill run.
        metadata: Optional extra metadata merged into the metadata block.
        results_dir: Base directory for result output.

    Returns:
        The run output directory.

    Raises:
        ValueError: If the assembled result fails validation.
    """
    experiment_id = generate_experiment_id(config)
    out_dir = Path(results_dir) / experiment_id
    out_dir.mkdir(parents=True, exist_ok=True)

    result = {
        "schema_version": SCHEMA_VERSION,
        "experiment_id": experiment_id,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "description": config.description,
        "tags": list(config.tags),
        "config": asdict(config),
        "metrics": build_metrics(stats, fill_result),
        "metadata": {
            "code_hash": get_git_hash(),
            "config_hash": full_config_hash(config),
            "graph_config_hash": graph_config_hash(config),
            **(metadata or {}),
        },
    }

    errors = validate_result(result)
    if errors:
        raise ValueError(
            "Result validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        )

    with open(out_dir / "result.json", "w") as f:
        json.dump(result, f, indent=2)

    return out_dir


def load_result(result_path: str | Path) -> dict[str, Any]:
    """Load and validate a result.json file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the loaded result fails validation.
    """
    path = Path(result_path)
    with open(path) as f:
        result = json.load(f)

    errors = validate_result(result)
    if errors:
        raise ValueError(
            f"Result validation failed for {path}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )
    return result
