"""Quadrant probability model for recursive R-MAT descent.

Quadrant labels are fixed: 0 = top-left, 1 = top-right, 2 = bottom-left,
3 = bottom-right. A draw is an inverse-CDF categorical sample over the four
labels in that order.
"""

import math
from dataclasses import dataclass, field

import numpy as np

TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT = range(4)

PROBABILITY_FORMAT = "[0.5, 0.125, 0.125, 0.25]"


class InvalidProbabilitySpecError(ValueError):
    """Raised when quadrant probabilities are malformed or do not sum to 1."""


@dataclass(frozen=True, slots=True)
class QuarterProbabilities:
    """Four quadrant probabilities with an injected random source.

    The values must sum to exactly 1.0 (correctly rounded sum). The
    generator is excluded from equality and repr so two models with the
    same values compare equal regardless of RNG state.
    """

    values: tuple[float, float, float, float]
    rng: np.random.Generator = field(
        default_factory=np.random.default_rng, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        if len(self.values) != 4:
            raise InvalidProbabilitySpecError(
                f"Expected 4 probabilities, got {len(self.values)}"
            )
        if not all(math.isfinite(p) for p in self.values):
            raise InvalidProbabilitySpecError(
                f"Probabilities must be finite, got {self.values}"
            )
        total = math.fsum(self.values)
        if total != 1.0:
            raise InvalidProbabilitySpecError(
                f"Probabilities must sum to 1 (they sum to {total})"
            )
        if any(p < 0.0 for p in self.values):
            raise InvalidProbabilitySpecError(
                f"Probabilities must be non-negative, got {self.values}"
            )

    def sample(self) -> int:
        """Draw one quadrant label from {0, 1, 2, 3}."""
        r = self.rng.random()
        p0, p1, p2, _ = self.values
        if r < p0:
            return TOP_LEFT
        if r < p0 + p1:
            return TOP_RIGHT
        if r < p0 + p1 + p2:
            return BOTTOM_LEFT
        return BOTTOM_RIGHT

    def mass(self, quadrant: int, collapse_upper_triangle: bool = False) -> float:
        """Probability that a draw lands on ``quadrant``.

        With ``collapse_upper_triangle`` top-right draws are remapped to
        bottom-left, so bottom-left absorbs top-right's mass.
        """
        if collapse_upper_triangle:
            if quadrant == TOP_RIGHT:
                return 0.0
            if quadrant == BOTTOM_LEFT:
                return self.values[TOP_RIGHT] + self.values[BOTTOM_LEFT]
        return self.values[quadrant]

    def sample_untried(
        self, tried: list[bool], collapse_upper_triangle: bool = False
    ) -> int:
        """Draw a label among the quadrants not yet tried.

        Follows the distribution of ``sample`` conditioned on the untried
        quadrants, so it matches redrawing until an untried label comes up
        while always taking a single draw. With no mass left the lowest
        untried label is returned.

        Raises:
            ValueError: If every quadrant has been tried.
        """
        untried = [q for q in range(4) if not tried[q]]
        if not untried:
            raise ValueError("Every quadrant has already been tried")
        masses = [self.mass(q, collapse_upper_triangle) for q in untried]
        remaining_mass = sum(masses)
        if remaining_mass <= 0.0:
            return untried[0]

        r = self.rng.random() * remaining_mass
        cumulative = 0.0
        for quadrant, mass in zip(untried, masses):
            cumulative += mass
            if r < cumulative:
                return quadrant
        # rounding can leave r at the top of the range
        return untried[-1]


def parse_probabilities(
    text: str, rng: np.random.Generator | None = None
) -> QuarterProbabilities:
    """Parse ``"[a, b, c, d]"`` into a QuarterProbabilities model.

    Whitespace around the brackets and values is ignored.

    Args:
        text: Bracketed, comma-separated list of four numbers.
        rng: Random source for sampling. A fresh default generator
            (OS entropy) is used when omitted.

    Returns:
        The validated probability model.

    Raises:
        InvalidProbabilitySpecError: If a value does not parse, the count
            is not four, a value is infinite or NaN, or the values do not
            sum to 1.
    """
    body = text.strip().removeprefix("[").removesuffix("]")
    try:
        values = tuple(float(token.strip()) for token in body.split(","))
    except ValueError:
        raise InvalidProbabilitySpecError(
            f"Error parsing probabilities {text!r}, "
            f"the format is: {PROBABILITY_FORMAT}"
        ) from None

    if len(values) != 4:
        raise InvalidProbabilitySpecError(
            f"Expected 4 probabilities, got {len(values)} in {text!r}"
        )
    if not all(math.isfinite(p) for p in values):
        raise InvalidProbabilitySpecError(
            f"Probabilities must be finite numbers, got {text!r}"
        )

    if rng is None:
        return QuarterProbabilities(values)
    return QuarterProbabilities(values, rng)
