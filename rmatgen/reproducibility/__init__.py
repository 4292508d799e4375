"""Reproducibility infrastructure: seeded RNGs and code provenance tracking."""

from rmatgen.reproducibility.seed import make_rng, verify_seed_determinism
from rmatgen.reproducibility.git_hash import get_git_hash

__all__ = [
    "make_rng",
    "verify_seed_determinism",
    "get_git_hash",
]
