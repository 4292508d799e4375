"""Default generator configuration used by the CLI, tests and cache keys."""

from rmatgen.config.experiment import GeneratorConfig

# n=4 (16 vertices), undirected, no self loops, probabilities
# (0.5, 0.125, 0.125, 0.25), target_density=0.25, seed=42.
DEFAULT_CONFIG = GeneratorConfig()
