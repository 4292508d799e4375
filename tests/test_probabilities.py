"""Tests for the quadrant probability model and its text parser."""

from unittest.mock import Mock

import numpy as np
import pytest

from rmatgen.graph.probabilities import (
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    TOP_LEFT,
    TOP_RIGHT,
    InvalidProbabilitySpecError,
    QuarterProbabilities,
    parse_probabilities,
)


def _fixed_rng(*draws: float) -> Mock:
    return Mock(random=Mock(side_effect=list(draws)))


class TestConstruction:
    """Probabilities must be four values summing to exactly 1."""

    def test_uniform_probabilities_accepted(self) -> None:
        probs = QuarterProbabilities((0.25, 0.25, 0.25, 0.25))
        assert probs.values == (0.25, 0.25, 0.25, 0.25)

    def test_sum_is_correctly_rounded(self) -> None:
        # left-to-right addition of these gives 0.9999999999999999
        probs = QuarterProbabilities((0.7, 0.1, 0.1, 0.1))
        assert probs.values == (0.7, 0.1, 0.1, 0.1)

    def test_sum_below_one_rejected(self) -> None:
        with pytest.raises(InvalidProbabilitySpecError, match="sum to 1"):
            QuarterProbabilities((0.1, 0.2, 0.3, 0.3))

    def test_sum_above_one_rejected(self) -> None:
        with pytest.raises(InvalidProbabilitySpecError, match="sum to 1"):
            QuarterProbabilities((0.5, 0.5, 0.5, 0.5))

    def test_wrong_count_rejected(self) -> None:
        with pytest.raises(InvalidProbabilitySpecError, match="Expected 4"):
            QuarterProbabilities((0.5, 0.5))  # type: ignore[arg-type]

    def test_negative_value_rejected(self) -> None:
        with pytest.raises(InvalidProbabilitySpecError, match="non-negative"):
            QuarterProbabilities((1.5, -0.5, 0.0, 0.0))

    @pytest.mark.parametrize(
        "values",
        [
            (float("inf"), float("-inf"), 1.0, 0.0),
            (float("nan"), 0.5, 0.25, 0.25),
        ],
    )
    def test_non_finite_rejected(self, values) -> None:
        with pytest.raises(InvalidProbabilitySpecError, match="finite"):
            QuarterProbabilities(values)

    def test_error_is_value_error(self) -> None:
        assert issubclass(InvalidProbabilitySpecError, ValueError)

    def test_equality_ignores_rng(self) -> None:
        a = QuarterProbabilities((0.25,) * 4, np.random.default_rng(1))
        b = QuarterProbabilities((0.25,) * 4, np.random.default_rng(2))
        assert a == b


class TestSample:
    """Inverse-CDF sampling over the four fixed-order quadrants."""

    @pytest.mark.parametrize(
        "draw, expected",
        [
            (0.0, TOP_LEFT),
            (0.49, TOP_LEFT),
            (0.5, TOP_RIGHT),
            (0.74, TOP_RIGHT),
            (0.75, BOTTOM_LEFT),
            (0.87, BOTTOM_LEFT),
            (0.875, BOTTOM_RIGHT),
            (0.999, BOTTOM_RIGHT),
        ],
    )
    def test_thresholds(self, draw: float, expected: int) -> None:
        probs = QuarterProbabilities((0.5, 0.25, 0.125, 0.125), _fixed_rng(draw))
        assert probs.sample() == expected

    def test_certain_quadrant(self) -> None:
        probs = QuarterProbabilities((0.0, 0.0, 0.0, 1.0), np.random.default_rng(0))
        assert {probs.sample() for _ in range(100)} == {BOTTOM_RIGHT}

    def test_empirical_frequencies(self) -> None:
        probs = QuarterProbabilities(
            (0.5, 0.25, 0.125, 0.125), np.random.default_rng(42)
        )
        draws = np.array([probs.sample() for _ in range(20_000)])
        freqs = np.bincount(draws, minlength=4) / draws.size
        np.testing.assert_allclose(freqs, [0.5, 0.25, 0.125, 0.125], atol=0.02)

    def test_seeded_sampling_is_reproducible(self) -> None:
        a = QuarterProbabilities((0.25,) * 4, np.random.default_rng(7))
        b = QuarterProbabilities((0.25,) * 4, np.random.default_rng(7))
        assert [a.sample() for _ in range(50)] == [b.sample() for _ in range(50)]


class TestMass:
    """Per-quadrant mass, with top-right folded into bottom-left on collapse."""

    def test_plain_mass(self) -> None:
        probs = QuarterProbabilities((0.5, 0.25, 0.125, 0.125))
        assert [probs.mass(q) for q in range(4)] == [0.5, 0.25, 0.125, 0.125]

    def test_collapsed_mass(self) -> None:
        probs = QuarterProbabilities((0.5, 0.25, 0.125, 0.125))
        masses = [probs.mass(q, collapse_upper_triangle=True) for q in range(4)]
        assert masses == [0.5, 0.0, 0.375, 0.125]


class TestSampleUntried:
    """Single draw restricted to the quadrants not tried yet."""

    def test_skips_tried_quadrants(self) -> None:
        # untried masses 0.25 and 0.125: 0.7 * 0.375 = 0.2625 lands past top-right
        probs = QuarterProbabilities((0.5, 0.25, 0.125, 0.125), _fixed_rng(0.7))
        assert probs.sample_untried([True, False, True, False]) == BOTTOM_RIGHT

    def test_low_draw_takes_first_untried(self) -> None:
        probs = QuarterProbabilities((0.5, 0.25, 0.125, 0.125), _fixed_rng(0.1))
        assert probs.sample_untried([True, False, True, False]) == TOP_RIGHT

    def test_tiny_mass_quadrant_is_reachable(self) -> None:
        # sample() never returns bottom-right here: 0.5 + 0.25 + 0.25 == 1.0
        probs = QuarterProbabilities((0.5, 0.25, 0.25, 1e-17), _fixed_rng(0.3))
        assert probs.sample_untried([True, True, True, False]) == BOTTOM_RIGHT

    def test_zero_mass_left_takes_lowest_untried(self) -> None:
        rng = _fixed_rng()
        probs = QuarterProbabilities((1.0, 0.0, 0.0, 0.0), rng)
        assert probs.sample_untried([True, False, False, False]) == TOP_RIGHT
        rng.random.assert_not_called()

    def test_collapse_folds_top_right_into_bottom_left(self) -> None:
        probs = QuarterProbabilities((0.5, 0.25, 0.125, 0.125), _fixed_rng(0.5))
        tried = [True, True, False, False]
        assert probs.sample_untried(tried, collapse_upper_triangle=True) == BOTTOM_LEFT

    def test_all_tried_rejected(self) -> None:
        probs = QuarterProbabilities((0.25,) * 4)
        with pytest.raises(ValueError, match="already been tried"):
            probs.sample_untried([True] * 4)


class TestParseProbabilities:
    """Bracketed, comma-separated text with flexible whitespace."""

    @pytest.mark.parametrize(
        "text",
        [
            "[0.25, 0.25, 0.25, 0.25]",
            "[0.25,0.25,0.25,0.25]",
            "  [ 0.25 ,0.25,  0.25 , 0.25 ]  ",
        ],
    )
    def test_accepts_flexible_whitespace(self, text: str) -> None:
        assert parse_probabilities(text).values == (0.25, 0.25, 0.25, 0.25)

    def test_uses_injected_rng(self) -> None:
        probs = parse_probabilities("[0.5, 0.25, 0.125, 0.125]", _fixed_rng(0.8))
        assert probs.sample() == BOTTOM_LEFT

    def test_non_numeric_rejected(self) -> None:
        with pytest.raises(InvalidProbabilitySpecError, match="format"):
            parse_probabilities("[a, b, c, d]")

    def test_empty_rejected(self) -> None:
        with pytest.raises(InvalidProbabilitySpecError):
            parse_probabilities("[]")

    def test_three_values_rejected(self) -> None:
        with pytest.raises(InvalidProbabilitySpecError, match="Expected 4"):
            parse_probabilities("[0.5, 0.25, 0.25]")

    def test_five_values_rejected(self) -> None:
        with pytest.raises(InvalidProbabilitySpecError, match="Expected 4"):
            parse_probabilities("[0.5, 0.25, 0.125, 0.125, 0.0]")

    def test_bad_sum_rejected(self) -> None:
        with pytest.raises(InvalidProbabilitySpecError, match="sum to 1"):
            parse_probabilities("[0.1, 0.2, 0.3, 0.3]")

    @pytest.mark.parametrize(
        "text", ["[inf, -inf, 1, 0]", "[nan, 0.5, 0.25, 0.25]", "[1, 0, 0, inf]"]
    )
    def test_non_finite_rejected(self, text: str) -> None:
        with pytest.raises(InvalidProbabilitySpecError, match="finite"):
            parse_probabilities(text)
