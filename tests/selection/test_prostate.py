"""
Validation on the prostate cancer data.

Known results (Hastie, Tibshirani & Friedman, ESL Table 3.3 / Figure 3.5;
R leaps::regsubsets on the same data):
    size 1: lcavol
    size 2: lcavol, lweight
    size 3: lcavol, lweight, svi
    sizes 4-8 add lbph, age, pgg45, lcp, gleason in that order
"""

import numpy as np
import pytest

from pysubsets.datasets import (
    PROSTATE_COLUMNS,
    PROSTATE_PREDICTORS,
    PROSTATE_RESPONSE,
    load_prostate,
    prostate,
)
from pysubsets.selection import SubsetDesign, best_subsets, evaluate


@pytest.fixture(scope="module")
def design():
    return SubsetDesign.from_datasource(load_prostate(), y=PROSTATE_RESPONSE)


@pytest.fixture(scope="module")
def solution(design):
    return best_subsets(design)


class TestDataset:

    def test_shape(self):
        assert prostate.shape == (97, 9)
        assert len(PROSTATE_COLUMNS) == 9
        assert PROSTATE_PREDICTORS == PROSTATE_COLUMNS[:-1]

    def test_svi_is_binary(self):
        svi = prostate[:, PROSTATE_COLUMNS.index('svi')]
        assert set(np.unique(svi)) == {0.0, 1.0}

    def test_observation_32_lweight_corrected(self):
        assert prostate[31, PROSTATE_COLUMNS.index('lweight')] == pytest.approx(3.804438)

    def test_load_returns_copy(self):
        ds = load_prostate()
        ds['lpsa'][0] = 999.0
        assert prostate[0, -1] != 999.0

    def test_design(self, design):
        assert design.n == 97
        assert design.k_total == 8
        assert design.names == PROSTATE_PREDICTORS


class TestBestSubsets:

    def test_size_one(self, solution):
        assert solution.record(1).names == ('lcavol',)

    def test_size_one_is_most_correlated(self, design, solution):
        corr = [abs(np.corrcoef(design.X[:, j], design.y)[0, 1]) for j in range(8)]
        assert solution.record(1).predictors == (int(np.argmax(corr)),)

    def test_size_two(self, solution):
        assert solution.record(2).names == ('lcavol', 'lweight')

    def test_size_three(self, solution):
        assert solution.record(3).names == ('lcavol', 'lweight', 'svi')

    def test_full_model(self, solution):
        assert solution.record(8).names == PROSTATE_PREDICTORS
        assert solution.record(8).cp == pytest.approx(9.0)

    def test_nested_at_every_size(self, solution):
        for size in range(1, 8):
            smaller = set(solution.record(size).predictors)
            larger = set(solution.record(size + 1).predictors)
            assert smaller < larger

    def test_order_of_additions(self, solution):
        added = []
        previous = set()
        for size in range(1, 9):
            current = set(solution.record(size).names)
            added.extend(current - previous)
            previous = current
        assert added == [
            'lcavol', 'lweight', 'svi', 'lbph', 'age', 'pgg45', 'lcp', 'gleason',
        ]

    def test_models_evaluated(self, solution):
        assert solution.n_models_evaluated == 255

    def test_r_squared_increases(self, solution):
        r2 = [r.r_squared for r in solution.records]
        assert all(a < b for a, b in zip(r2, r2[1:]))

    def test_size_one_aicc(self, solution):
        # n ln(RSS/n) + 2k + 2k(k+1)/(n-k-1), k = 2
        r = solution.record(1)
        assert r.rss == pytest.approx(58.915, abs=0.05)
        assert r.aicc == pytest.approx(-44.2, abs=0.15)


class TestEvaluate:

    def test_raw_arrays(self):
        X = prostate[:, :8]
        y = prostate[:, 8]
        records = evaluate(y, X, max_size=3)
        assert [r.predictors for r in records] == [(0,), (0, 1), (0, 1, 4)]
