"""Tests for numeric aggregation."""

from fractions import Fraction

import numpy as np
import pytest

from seqkit import InvalidArgumentError
from seqkit import stats


class TestMean:
    @pytest.mark.parametrize(
        "seq, expected",
        [
            ([2, 4, 6], 4),
            ([1, 2], 1.5),
            ([0.1, 0.2, 0.3], 0.2),
            ((5,), 5),
            (np.array([1.0, 3.0]), 2.0),
            ([Fraction(1, 2), Fraction(3, 2)], 1.0),
        ],
    )
    def test_mean(self, seq, expected):
        assert stats.mean(seq) == pytest.approx(expected)

    def test_mean_returns_float(self):
        result = stats.mean([2, 4, 6])
        assert isinstance(result, float)
        assert result == 4

    def test_mean_large_integers_exact(self):
        assert stats.mean([10**20, 10**20 + 2]) == float(10**20 + 1)

    def test_mean_empty(self):
        with pytest.raises(InvalidArgumentError, match="empty sequence"):
            stats.mean([])

    def test_mean_non_numeric(self):
        with pytest.raises(TypeError, match="element 1 is str"):
            stats.mean([1, "2"])
        with pytest.raises(TypeError, match="element 0 is bool"):
            stats.mean([True, 1])

    def test_mean_nan_warns(self):
        with pytest.warns(UserWarning, match="contains NaN"):
            result = stats.mean([1.0, float("nan")])
        assert np.isnan(result)


class TestSum:
    def test_sum(self):
        assert stats.sum([1, 2, 3]) == 6

    def test_sum_empty(self):
        result = stats.sum([])
        assert result == 0
        assert isinstance(result, int)

    def test_sum_integers_stay_int(self):
        result = stats.sum(np.array([1, 2, 3], dtype=np.int64))
        assert result == 6
        assert isinstance(result, int)

    def test_sum_floats(self):
        assert stats.sum([0.5, 0.25, 1]) == pytest.approx(1.75)

    def test_sum_non_numeric(self):
        with pytest.raises(TypeError, match="sum requires real numbers"):
            stats.sum([1, None])

    def test_sum_nan_warns(self):
        with pytest.warns(UserWarning, match="contains NaN"):
            stats.sum([np.nan])


class TestExtremes:
    @pytest.mark.parametrize(
        "seq, expected_max, expected_min",
        [
            ([3, 1, 2], 3, 1),
            ([-1.5, -2.5], -1.5, -2.5),
            (["b", "a", "c"], "c", "a"),
            ((7,), 7, 7),
        ],
    )
    def test_max_min(self, seq, expected_max, expected_min):
        assert stats.max(seq) == expected_max
        assert stats.min(seq) == expected_min

    def test_max_returns_first_of_ties(self):
        first, second = [1, 2], [1, 2]
        assert stats.max([first, second]) is first
        assert stats.min([second, first]) is second

    @pytest.mark.parametrize("func", [stats.max, stats.min])
    def test_empty(self, func):
        with pytest.raises(InvalidArgumentError, match="empty sequence"):
            func([])

    def test_incomparable(self):
        with pytest.raises(TypeError):
            stats.max([1, "a"])


def test_mean_too_large_for_float():
    with pytest.raises(InvalidArgumentError, match="too large to represent as a float"):
        stats.mean([10**400, 1])
