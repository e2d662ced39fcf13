"""Combine per-walker arrival steps into one synchronised step count."""

import logging
from functools import reduce
from typing import Iterable

import numpy as np

log = logging.getLogger(__name__)


class EmptyInputSetError(ValueError):
    """Raised when combine() is given no step counts."""


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm; gcd(n, 0) == n."""
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple of two positive integers.

    Python ints are unbounded, so the intermediate product cannot overflow.
    """
    return a * b // gcd(a, b)


def combine(step_counts: Iterable[int]) -> int:
    """Least common multiple of all step counts, reduced pairwise.

    Args:
        step_counts: Positive per-walker arrival steps.

    Returns:
        Smallest step count divisible by every input.

    Raises:
        EmptyInputSetError: If no values are given.
        ValueError: If any value is not a positive integer.
    """
    values = list(step_counts)
    not_ints = [
        v for v in values
        if isinstance(v, bool) or not isinstance(v, (int, np.integer))
    ]
    if not_ints:
        raise ValueError(f"Step counts must be integers, got {not_ints}")
    values = [int(v) for v in values]
    if not values:
        raise EmptyInputSetError("combine() requires at least one step count")
    bad = [v for v in values if v <= 0]
    if bad:
        raise ValueError(f"Step counts must be positive, got {bad}")

    result = reduce(lcm, values)
    log.debug("LCM of %d step count(s) = %d", len(values), result)
    return result
