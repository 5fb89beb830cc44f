"""
Tests for the scalar model-fit criteria.

Reference values are computed by hand from the closed-form expressions.
"""

import math

import pytest

from pysubsets.core.exceptions import DomainError
from pysubsets.selection._criteria import CRITERIA
from pysubsets.selection import (
    adjusted_r_squared,
    aic,
    aicc,
    bic,
    mallows_cp,
    r_squared,
)


class TestRSquared:

    def test_value(self):
        assert r_squared(25.0, 100.0) == pytest.approx(0.75)

    def test_perfect_fit(self):
        assert r_squared(0.0, 10.0) == 1.0

    def test_adjusted_value(self):
        # 1 - 0.25 * 19 / 17
        assert adjusted_r_squared(25.0, 100.0, 20, 2) == pytest.approx(1 - 0.25 * 19 / 17)

    def test_adjusted_below_plain(self):
        assert adjusted_r_squared(25.0, 100.0, 20, 2) < r_squared(25.0, 100.0)

    def test_adjusted_penalizes_predictor_without_rss_gain(self):
        for p in range(1, 6):
            assert adjusted_r_squared(25.0, 100.0, 20, p + 1) < adjusted_r_squared(25.0, 100.0, 20, p)

    def test_adjusted_undefined(self):
        with pytest.raises(DomainError, match="n - p - 1 = 0"):
            adjusted_r_squared(1.0, 2.0, 4, 3)


class TestMallowsCp:

    def test_full_model_equals_k_plus_one(self):
        # p = K = 3, n = 20, df_full = 16
        assert mallows_cp(7.3, 7.3, 16, 20, 3) == 4.0

    def test_value(self):
        # RSS / MSE_full - n + 2(p + 1), MSE_full = 8 / 16
        assert mallows_cp(12.0, 8.0, 16, 20, 1) == pytest.approx(12.0 / 0.5 - 20 + 4)


class TestInformationCriteria:

    def test_aic(self):
        assert aic(10.0, 20, 3) == pytest.approx(20 * math.log(0.5) + 6)

    def test_bic(self):
        assert bic(10.0, 20, 3) == pytest.approx(20 * math.log(0.5) + 3 * math.log(20))

    def test_aicc(self):
        expected = 20 * math.log(0.5) + 6 + 2 * 3 * 4 / 16
        assert aicc(10.0, 20, 3) == pytest.approx(expected)

    def test_aicc_exceeds_aic(self):
        assert aicc(10.0, 20, 3) > aic(10.0, 20, 3)

    def test_aicc_converges_to_aic(self):
        assert aicc(1e4, 10**6, 3) - aic(1e4, 10**6, 3) < 1e-4

    @pytest.mark.parametrize("n,k", [(4, 3), (3, 3)])
    def test_aicc_undefined(self, n, k):
        with pytest.raises(DomainError, match="AICc undefined") as exc_info:
            aicc(1.0, n, k)
        assert exc_info.value.n == n
        assert exc_info.value.k == k

    def test_bic_penalizes_more_than_aic(self):
        # ln(n) > 2 once n >= 8
        assert bic(10.0, 50, 4) > aic(10.0, 50, 4)


class TestCriteriaTable:

    def test_directions(self):
        assert CRITERIA['r2'][1] == 'max'
        assert CRITERIA['adj_r2'][1] == 'max'
        for name in ('rss', 'cp', 'aic', 'aicc', 'bic'):
            assert CRITERIA[name][1] == 'min'
