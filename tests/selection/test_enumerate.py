"""
Tests for subset enumeration, per-subset fits and best-fit selection.
"""

from itertools import combinations
from math import comb

import numpy as np
import pytest

from pysubsets.selection._common import SubsetFit
from pysubsets.selection._enumerate import (
    count_subsets,
    enumerate_subsets,
    fit_subset,
    search,
    select_best,
    with_intercept,
)


def _fit(predictors, rss):
    return SubsetFit(
        predictors=predictors, coefficients=np.zeros(len(predictors) + 1),
        rss=rss, df_residual=10,
    )


class TestEnumeration:

    def test_lexicographic_order(self):
        assert list(enumerate_subsets(4, 2)) == [
            (0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3),
        ]

    @pytest.mark.parametrize("k,size", [(5, 1), (6, 3), (8, 8)])
    def test_counts(self, k, size):
        assert len(list(enumerate_subsets(k, size))) == comb(k, size)

    def test_count_subsets(self):
        assert count_subsets(4, 4) == 15
        assert count_subsets(8, 8) == 255
        assert count_subsets(6, 2) == 6 + 15


class TestFitSubset:

    def test_with_intercept_layout(self):
        X = np.arange(12, dtype=float).reshape(4, 3)
        D = with_intercept(X, (2, 0))
        np.testing.assert_array_equal(D[:, 0], np.ones(4))
        np.testing.assert_array_equal(D[:, 1], X[:, 2])
        np.testing.assert_array_equal(D[:, 2], X[:, 0])

    def test_matches_lstsq(self, sparse_subset_data):
        X, y = sparse_subset_data
        result = fit_subset(y, X, (1, 4))
        D = np.column_stack([np.ones(len(y)), X[:, [1, 4]]])
        beta, *_ = np.linalg.lstsq(D, y, rcond=None)
        np.testing.assert_allclose(result.coefficients, beta, rtol=1e-10)
        resid = y - D @ beta
        assert result.rss == pytest.approx(float(resid @ resid), rel=1e-10)
        assert result.df_residual == len(y) - 3
        assert result.predictors == (1, 4)

    def test_recovers_generating_coefficients(self, sparse_subset_data):
        X, y = sparse_subset_data
        result = fit_subset(y, X, (1, 4))
        np.testing.assert_allclose(result.coefficients, [2.0, 3.0, -1.5], atol=0.15)


class TestSelectBest:

    def test_keeps_smallest(self):
        fits = [_fit((0,), 5.0), _fit((1,), 2.0), _fit((2,), 3.0)]
        best = select_best(fits, keep=2)
        assert [f.predictors for f in best] == [(1,), (2,)]

    def test_tie_broken_by_predictors(self):
        fits = [_fit((2, 3), 1.0), _fit((0, 3), 1.0), _fit((1, 2), 1.0)]
        best = select_best(fits, keep=3)
        assert [f.predictors for f in best] == [(0, 3), (1, 2), (2, 3)]

    def test_tie_independent_of_input_order(self):
        fits = [_fit((0,), 1.0), _fit((1,), 1.0)]
        assert select_best(fits, 1)[0].predictors == (0,)
        assert select_best(list(reversed(fits)), 1)[0].predictors == (0,)

    def test_keep_larger_than_available(self):
        fits = [_fit((0,), 1.0), _fit((1,), 2.0)]
        assert len(select_best(fits, keep=5)) == 2


class TestSearch:

    def test_one_list_per_size(self, sparse_subset_data):
        X, y = sparse_subset_data
        best = search(y, X, max_size=3, keep=2)
        assert sorted(best) == [1, 2, 3]
        assert all(len(fits) == 2 for fits in best.values())

    def test_matches_brute_force(self, sparse_subset_data):
        X, y = sparse_subset_data
        best = search(y, X, max_size=3, keep=1)
        for size in (1, 2, 3):
            all_rss = {
                s: fit_subset(y, X, s).rss for s in combinations(range(X.shape[1]), size)
            }
            expected = min(all_rss, key=all_rss.get)
            assert best[size][0].predictors == expected

    def test_signal_columns_found(self, sparse_subset_data):
        X, y = sparse_subset_data
        best = search(y, X, max_size=2, keep=1)
        assert best[1][0].predictors == (1,)
        assert best[2][0].predictors == (1, 4)

    def test_ranked_rss_nondecreasing(self, sparse_subset_data):
        X, y = sparse_subset_data
        best = search(y, X, max_size=4, keep=3)
        for fits in best.values():
            rss = [f.rss for f in fits]
            assert rss == sorted(rss)
