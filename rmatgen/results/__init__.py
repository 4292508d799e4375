"""Result schema validation, writing, and run ID generation."""

from rmatgen.results.schema import (
    build_metrics,
    load_result,
    validate_result,
    write_result,
)
from rmatgen.results.experiment_id import generate_experiment_id

__all__ = [
    "build_metrics",
    "validate_result",
    "write_result",
    "load_result",
    "generate_experiment_id",
]
