"""Frozen, slotted dataclasses describing one R-MAT generation run."""

import math
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class GraphConfig:
    """R-MAT graph class and fill parameters."""

    n: int = 4  # vertex-count exponent, vertices = 2**n
    directed: bool = False
    self_connections_allowed: bool = False
    # quadrant order: top-left, top-right, bottom-left, bottom-right
    probabilities: tuple[float, ...] = (0.5, 0.125, 0.125, 0.25)
    target_density: float = 0.25

    def __post_init__(self) -> None:
        if self.n < 0:
            raise ValueError(f"n must be non-negative, got {self.n}")
        if not 0.0 <= self.target_density <= 1.0:
            raise ValueError(
                f"target_density must be in [0, 1], got {self.target_density}"
            )
        if len(self.probabilities) != 4:
            raise ValueError(
                f"probabilities must have 4 values, got {len(self.probabilities)}"
            )
        if not all(math.isfinite(p) for p in self.probabilities):
            raise ValueError(f"probabilities must be finite, got {self.probabilities}")
        if math.fsum(self.probabilities) != 1.0:
            raise ValueError(
                f"probabilities must sum to 1, got {math.fsum(self.probabilities)}"
            )


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Top-level generator configuration.

    ``seed=None`` draws the random source from OS entropy, which makes the
    run non-reproducible and disables graph caching.
    """

    graph: GraphConfig = field(default_factory=GraphConfig)
    seed: int | None = 42
    description: str = ""
    tags: tuple[str, ...] = ()
