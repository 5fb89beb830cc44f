"""
Tests for regression fit().

Tests the complete pipeline: Design construction, backend selection,
and solution properties.
"""

import pytest
import numpy as np

from pysubsets.core.datasource import DataSource
from pysubsets.core.exceptions import (
    DimensionError,
    InputError,
    SingularMatrixError,
    ValidationError,
)
from pysubsets.regression import fit, RegressionDesign
from pysubsets.regression.solution import LinearSolution
from pysubsets.regression.backends.cpu import CPUQRBackend
from pysubsets.core.protocols import Backend


class TestFitBasic:
    """Basic fit() functionality tests."""

    def test_fit_from_arrays(self, simple_regression_data):
        X, y, _ = simple_regression_data
        result = fit(X, y)
        assert isinstance(result, LinearSolution)
        assert result.coefficients.shape == (3,)
        assert result.backend_name == 'cpu_qr'

    def test_fit_from_design(self, simple_regression_data):
        X, y, _ = simple_regression_data
        design = RegressionDesign.build(X, y)
        result = fit(design)
        assert isinstance(result, LinearSolution)

    def test_fit_from_datasource(self, simple_regression_data):
        X, y, _ = simple_regression_data
        ds = DataSource.from_arrays(data=np.column_stack([X, y]), columns=['a', 'b', 'c', 'resp'])
        design = RegressionDesign.from_datasource(ds, y='resp')
        assert design.p == 3
        np.testing.assert_allclose(fit(design).coefficients, fit(X, y).coefficients)

    def test_fit_requires_y_with_arrays(self, simple_regression_data):
        X, _, _ = simple_regression_data
        with pytest.raises(ValueError, match="y required"):
            fit(X)

    def test_unknown_backend(self, simple_regression_data):
        X, y, _ = simple_regression_data
        with pytest.raises(ValueError, match="Unknown backend"):
            fit(X, y, backend='gpu')

    def test_coefficients_close_to_truth(self, simple_regression_data):
        X, y, beta_true = simple_regression_data
        result = fit(X, y)
        np.testing.assert_allclose(result.coefficients, beta_true, atol=0.1)

    def test_matches_lstsq(self, rng):
        X = np.column_stack([np.ones(60), rng.standard_normal((60, 2))])
        y = rng.standard_normal(60)
        expected, *_ = np.linalg.lstsq(X, y, rcond=None)
        np.testing.assert_allclose(fit(X, y).coefficients, expected, rtol=1e-10)

    def test_residuals_sum_to_near_zero_with_intercept(self, rng):
        """For models with intercept, residuals should sum to ~0."""
        n = 100
        X = np.column_stack([
            np.ones(n),
            rng.standard_normal(n),
            rng.standard_normal(n),
        ])
        y = X @ [1.0, 2.0, -0.5] + rng.standard_normal(n) * 0.1
        result = fit(X, y)
        assert abs(result.residuals.sum()) < 1e-10


class TestFitProperties:
    """Test derived properties of LinearSolution."""

    def test_standard_errors_positive(self, simple_regression_data):
        X, y, _ = simple_regression_data
        se = fit(X, y).standard_errors
        assert np.all(se > 0)
        assert np.all(np.isfinite(se))

    def test_p_values_in_zero_one(self, simple_regression_data):
        X, y, _ = simple_regression_data
        pv = fit(X, y).p_values
        assert np.all(pv >= 0.0)
        assert np.all(pv <= 1.0)

    def test_strong_effects_significant(self, simple_regression_data):
        X, y, _ = simple_regression_data
        assert np.all(fit(X, y).p_values < 1e-6)

    def test_fitted_plus_residuals_equals_y(self, simple_regression_data):
        X, y, _ = simple_regression_data
        result = fit(X, y)
        np.testing.assert_allclose(
            result.fitted_values + result.residuals, y, atol=1e-12
        )

    def test_rss_matches_residuals(self, simple_regression_data):
        X, y, _ = simple_regression_data
        result = fit(X, y)
        expected_rss = float(result.residuals @ result.residuals)
        assert abs(result.rss - expected_rss) < 1e-12

    def test_r_squared_formula(self, simple_regression_data):
        X, y, _ = simple_regression_data
        result = fit(X, y)
        expected = 1.0 - result.rss / result.tss
        assert abs(result.r_squared - expected) < 1e-15

    def test_df_residual(self, simple_regression_data):
        X, y, _ = simple_regression_data
        result = fit(X, y)
        assert result.df_residual == 97
        assert result.rank == 3

    def test_summary_runs(self, simple_regression_data):
        X, y, _ = simple_regression_data
        s = fit(X, y).summary()
        assert "R-squared" in s
        assert "Pr(>|t|)" in s
        assert "Backend: cpu_qr" in s

    def test_repr(self, simple_regression_data):
        X, y, _ = simple_regression_data
        assert repr(fit(X, y)).startswith("LinearSolution(n=100, p=3")


class TestFitErrors:

    def test_rank_deficient_raises(self, collinear_data):
        X, y = collinear_data
        with pytest.raises(SingularMatrixError):
            fit(X, y)

    def test_length_mismatch(self, simple_regression_data):
        X, y, _ = simple_regression_data
        with pytest.raises(DimensionError):
            fit(X, y[:-1])

    def test_nan_rejected(self, simple_regression_data):
        X, y, _ = simple_regression_data
        y = y.copy()
        y[0] = np.nan
        with pytest.raises(InputError, match="NaN"):
            fit(X, y)


class TestBackend:

    def test_satisfies_protocol(self):
        assert isinstance(CPUQRBackend(), Backend)

    def test_timing_sections(self, simple_regression_data):
        X, y, _ = simple_regression_data
        timing = fit(X, y).timing
        assert {'total_seconds', 'solve', 'statistics'} <= set(timing)


class TestNames:

    def test_default_names(self, simple_regression_data):
        X, y, _ = simple_regression_data
        assert fit(X, y).names == ('x0', 'x1', 'x2')

    def test_names_label_summary(self, simple_regression_data):
        X, y, _ = simple_regression_data
        s = fit(X, y, names=['lcavol', 'lweight', 'svi']).summary()
        assert "lweight" in s

    def test_names_from_datasource(self, simple_regression_data):
        X, y, _ = simple_regression_data
        ds = DataSource.from_arrays(data=np.column_stack([X, y]), columns=['a', 'b', 'c', 'resp'])
        design = RegressionDesign.from_datasource(ds, x=['c', 'a'], y='resp')
        assert design.names == ('c', 'a')

    def test_name_count_mismatch(self, simple_regression_data):
        X, y, _ = simple_regression_data
        with pytest.raises(ValidationError, match="2 names for 3"):
            fit(X, y, names=['a', 'b'])

    def test_coefficient_table(self, simple_regression_data):
        X, y, _ = simple_regression_data
        result = fit(X, y, names=['a', 'b', 'c'])
        table = result.coefficient_table()
        assert list(table.columns) == ['Estimate', 'Std. Error', 't value', 'Pr(>|t|)']
        assert list(table.index) == ['a', 'b', 'c']
        np.testing.assert_array_equal(table['Estimate'].to_numpy(), result.coefficients)
