# imgproc - Statistics
"""
Numeric reductions over samples of real numbers.

Usage:
    from imgproc.statistics import mean, standard_deviation

    mean([2, 4, 4, 4, 5, 5, 7, 9])                # 5.0
    standard_deviation([2, 4, 4, 4, 5, 5, 7, 9])  # 2.0
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from .exceptions import EmptyInput


def _as_sample(nums: Iterable[float]) -> np.ndarray:
    if not isinstance(nums, np.ndarray):
        nums = list(nums)
    sample = np.asarray(nums, dtype=np.float64).ravel()
    if sample.size == 0:
        raise EmptyInput("Expected at least one value, got an empty sample")
    return sample


def mean(nums: Iterable[float]) -> float:
    """Arithmetic mean of a list of numbers.

    Args:
        nums: Real numbers, consumed once

    Returns:
        Sum of all values divided by their count

    Raises:
        EmptyInput: If ``nums`` holds no values
    """
    return float(np.mean(_as_sample(nums)))


average = mean


def standard_deviation(nums: Iterable[float]) -> float:
    """Population standard deviation: sqrt(mean((x - mean(nums)) ** 2)).

    Raises:
        EmptyInput: If ``nums`` holds no values
    """
    return float(np.std(_as_sample(nums)))


__all__ = ['mean', 'average', 'standard_deviation']
