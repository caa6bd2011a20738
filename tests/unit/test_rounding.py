"""
Unit tests for weight rounding and one-rep-max estimation.
"""
import math

import pytest

from backend.core.rounding import (
    compute_training_max,
    estimate_one_rep_max,
    round_to_increment,
)


@pytest.mark.unit
class TestRoundToIncrement:
    """Tests for round_to_increment."""

    def test_rounds_to_nearest_five(self):
        assert round_to_increment(203) == 205
        assert round_to_increment(202) == 200

    def test_half_rounds_up(self):
        """202.5 sits exactly between 200 and 205."""
        assert round_to_increment(202.5) == 205
        assert round_to_increment(207.5) == 210

    def test_returns_int_for_whole_weights(self):
        result = round_to_increment(256.5)
        assert result == 255
        assert isinstance(result, int)

    def test_fractional_increment(self):
        assert round_to_increment(101.25, 2.5) == 102.5
        assert round_to_increment(100.9, 2.5) == 100

    def test_non_positive_increment_disables_rounding(self):
        assert round_to_increment(101.3, 0) == 101.3
        assert round_to_increment(101.3, -5) == 101.3

    def test_zero_stays_zero(self):
        assert round_to_increment(0) == 0

    def test_non_finite_passes_through(self):
        assert math.isinf(round_to_increment(float("inf")))
        assert math.isnan(round_to_increment(float("nan")))


@pytest.mark.unit
class TestEstimateOneRepMax:
    """Tests for the Epley estimate."""

    def test_standard_five_reps(self):
        # 100 * (1 + 5/30) = 116.67
        assert estimate_one_rep_max(100, 5) == 117

    def test_ten_reps(self):
        # 185 * (1 + 10/30) = 246.67
        assert estimate_one_rep_max(185, 10) == 247

    def test_single_rep_returns_weight(self):
        """1 rep means the weight IS the 1RM."""
        assert estimate_one_rep_max(225, 1) == 225

    def test_zero_reps_returns_zero(self):
        assert estimate_one_rep_max(225, 0) == 0

    def test_zero_weight_returns_zero(self):
        assert estimate_one_rep_max(0, 5) == 0

    def test_negative_input_returns_zero(self):
        assert estimate_one_rep_max(-100, 5) == 0
        assert estimate_one_rep_max(100, -3) == 0

    def test_non_finite_input_returns_zero(self):
        assert estimate_one_rep_max(float("nan"), 5) == 0
        assert estimate_one_rep_max(100, float("inf")) == 0


@pytest.mark.unit
class TestComputeTrainingMax:
    """Tests for the 90% training max."""

    def test_ninety_percent_rounded(self):
        assert compute_training_max(300) == 270
        # 283.5 -> 285
        assert compute_training_max(315) == 285

    def test_respects_increment(self):
        # 202.5 stays on a 2.5 increment
        assert compute_training_max(225, 2.5) == 202.5

    def test_never_exceeds_one_rep_max(self):
        # 90% of 9 is 8.1, which rounds to 10 on a 5 increment
        assert compute_training_max(9) == 5

    def test_zero_or_invalid_max(self):
        assert compute_training_max(0) == 0
        assert compute_training_max(-10) == 0
        assert compute_training_max(float("nan")) == 0
