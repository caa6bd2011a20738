"""
Weight rounding and one-rep-max estimation.

Every weight the catalog emits passes through round_to_increment so it can
be loaded on standard plates. All functions here are total over numbers:
degenerate input falls back to 0 (or passes through) instead of raising.
"""

import math
from typing import Union

Number = Union[int, float]

# Smallest plate jump for a barbell in pounds (2 x 2.5)
DEFAULT_INCREMENT = 5

# Training max as a fraction of the one-rep max
TRAINING_MAX_FACTOR = 0.9


def _as_number(value: float) -> Number:
    """Collapse integral floats to int so 205.0 renders as 205."""
    if float(value).is_integer():
        return int(value)
    return round(value, 4)


def round_to_increment(value: float, increment: float = DEFAULT_INCREMENT) -> Number:
    """
    Round a weight to the nearest multiple of ``increment``.

    Halves round up (202.5 -> 205 with a 5 increment).

    Args:
        value: Raw weight
        increment: Plate increment; non-positive values disable rounding

    Returns:
        Rounded weight
    """
    if not math.isfinite(value):
        return value
    if increment <= 0:
        return _as_number(value)
    steps = math.floor(value / increment + 0.5)
    return _as_number(steps * increment)


def estimate_one_rep_max(weight: float, reps: float) -> Number:
    """
    Estimate a one-rep max from a submaximal set using the Epley formula.

    Formula: 1RM = weight * (1 + reps/30), rounded to an integer.

    Args:
        weight: Weight lifted
        reps: Number of reps completed

    Returns:
        Estimated 1RM; 0 for missing, non-positive or non-finite input
    """
    if not weight or not reps:
        return 0
    if not (math.isfinite(weight) and math.isfinite(reps)):
        return 0
    if weight <= 0 or reps <= 0:
        return 0
    if reps == 1:
        return _as_number(weight)

    return math.floor(weight * (1.0 + reps / 30.0) + 0.5)


def compute_training_max(
    one_rep_max: float,
    increment: float = DEFAULT_INCREMENT,
) -> Number:
    """
    Compute a training max (90% of the one-rep max, rounded).

    The result never exceeds the one-rep max: for very light maxes where
    rounding 90% up would overshoot, the increment at or below the max is used.

    Args:
        one_rep_max: Estimated or tested 1RM
        increment: Plate increment

    Returns:
        Training max
    """
    if not math.isfinite(one_rep_max) or one_rep_max <= 0:
        return 0

    training_max = round_to_increment(one_rep_max * TRAINING_MAX_FACTOR, increment)
    if training_max > one_rep_max and increment > 0:
        training_max = _as_number(math.floor(one_rep_max / increment) * increment)
    return training_max
