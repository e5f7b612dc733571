"""
Test mean and population standard deviation.
"""

import math

import numpy as np
import pytest

from imgproc import mean, average, standard_deviation, EmptyInput

SAMPLE = [2, 4, 4, 4, 5, 5, 7, 9]


class TestMean:
    """Tests for mean/average."""

    def test_mean(self):
        assert mean(SAMPLE) == 5

    def test_average_is_mean(self):
        assert average is mean

    def test_mean_returns_float(self):
        assert isinstance(mean([1, 2]), float)
        assert mean([1, 2]) == 1.5

    def test_single_value(self):
        assert mean([3.25]) == 3.25

    def test_accepts_iterables(self):
        """Generators, tuples and numpy arrays are accepted."""
        assert mean(x for x in SAMPLE) == 5
        assert mean(tuple(SAMPLE)) == 5
        assert mean(np.array(SAMPLE, dtype=np.uint8)) == 5

    def test_empty_raises(self):
        with pytest.raises(EmptyInput):
            mean([])

    def test_empty_generator_raises(self):
        with pytest.raises(EmptyInput):
            mean(x for x in [])


class TestStandardDeviation:
    """Tests for the population standard deviation."""

    def test_standard_deviation(self):
        assert standard_deviation(SAMPLE) == 2

    def test_is_population_not_sample(self):
        """Divides by n, not n - 1."""
        assert standard_deviation([1, 3]) == 1
        assert not math.isclose(standard_deviation([1, 3]), math.sqrt(2))

    def test_constant_sample(self):
        assert standard_deviation([7, 7, 7]) == 0

    def test_single_value(self):
        assert standard_deviation([42]) == 0

    def test_matches_formula(self):
        values = [0.5, 1.5, 10.0, -3.0]
        mu = sum(values) / len(values)
        expected = math.sqrt(sum((x - mu) ** 2 for x in values) / len(values))

        assert math.isclose(standard_deviation(values), expected)

    def test_empty_raises(self):
        with pytest.raises(EmptyInput):
            standard_deviation([])

    def test_empty_is_value_error(self):
        with pytest.raises(ValueError):
            standard_deviation(())
