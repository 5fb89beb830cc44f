"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray
from scipy import stats

from pysubsets.core.result import Result

if TYPE_CHECKING:
    import pandas as pd
    from pysubsets.regression.design import RegressionDesign


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for linear regression.

    This is the immutable data computed by backends.
    """
    coefficients: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    rss: float
    tss: float
    rank: int
    df_residual: int


@dataclass
class LinearSolution:
    """
    User-facing regression results.

    Wraps the backend Result and provides convenient accessors
    for all regression outputs including standard errors and t-statistics.
    """
    _result: Result[LinearParams]
    _design: 'RegressionDesign'

    # Cached computations
    _standard_errors: NDArray[np.floating[Any]] | None = None
    _t_statistics: NDArray[np.floating[Any]] | None = None

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return self._result.params.coefficients

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def r_squared(self) -> float:
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)

    @property
    def adjusted_r_squared(self) -> float:
        n = self._design.n
        p = self._result.params.rank
        if n - p <= 0 or self.tss == 0:
            return self.r_squared
        return 1.0 - (1.0 - self.r_squared) * (n - 1) / (n - p)

    @property
    def residual_std_error(self) -> float:
        df = self._result.params.df_residual
        if df <= 0:
            return 0.0
        return float(np.sqrt(self.rss / df))

    @property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        """
        Standard errors of coefficients.

        Computed as SE(β) = sqrt(diag(σ² (X'X)⁻¹))
        """
        if self._standard_errors is not None:
            return self._standard_errors

        df = self._result.params.df_residual
        p = len(self.coefficients)

        if df <= 0:
            self._standard_errors = np.full(p, np.nan, dtype=np.float64)
            return self._standard_errors

        sigma_sq = self.rss / df
        XtX_inv = np.linalg.inv(self._design.XtX())
        self._standard_errors = np.sqrt(sigma_sq * np.diag(XtX_inv))
        return self._standard_errors

    @property
    def t_statistics(self) -> NDArray[np.floating[Any]]:
        """t-statistics for coefficients."""
        if self._t_statistics is not None:
            return self._t_statistics

        se = self.standard_errors
        with np.errstate(divide='ignore', invalid='ignore'):
            t = self.coefficients / se
            t = np.where(np.isfinite(t), t, np.nan)
        self._t_statistics = t
        return self._t_statistics

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        """Two-sided p-values from Student's t with df_residual degrees of freedom."""
        df = self.df_residual
        if df <= 0:
            return np.full(len(self.coefficients), np.nan, dtype=np.float64)
        return 2.0 * stats.t.sf(np.abs(self.t_statistics), df)

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def names(self) -> tuple[str, ...]:
        """Coefficient labels, one per column of X."""
        return self._design.names

    def coefficient_table(self) -> 'pd.DataFrame':
        """R's coef(summary(lm)) as a DataFrame indexed by coefficient name."""
        import pandas as pd

        return pd.DataFrame(
            {
                'Estimate': self.coefficients,
                'Std. Error': self.standard_errors,
                't value': self.t_statistics,
                'Pr(>|t|)': self.p_values,
            },
            index=pd.Index(self.names, name='term'),
        )

    def summary(self) -> str:
        """Generate R-style summary output."""
        width = max(12, max(len(nm) for nm in self.names) + 2)
        lines = [
            "Linear Regression Results",
            "=" * (width + 52),
            f"Observations: {self._design.n}",
            f"Predictors: {self._design.p}",
            f"Rank: {self.rank}",
            f"R-squared: {self.r_squared:.6f}",
            f"Adj. R-squared: {self.adjusted_r_squared:.6f}",
            f"Residual Std. Error: {self.residual_std_error:.6f} on {self.df_residual} DF",
            "",
            "Coefficients:",
            "-" * (width + 52),
            f"{'':<{width}} {'Estimate':>14} {'Std.Error':>12} {'t value':>10} {'Pr(>|t|)':>12}",
            "-" * (width + 52),
        ]

        for name, coef, se, t, pv in zip(
            self.names, self.coefficients, self.standard_errors,
            self.t_statistics, self.p_values,
        ):
            se_str = f"{se:12.6f}" if not np.isnan(se) else "          NA"
            t_str = f"{t:10.3f}" if not np.isnan(t) else "        NA"
            p_str = f"{pv:12.4e}" if not np.isnan(pv) else "          NA"
            lines.append(f"{name:<{width}} {coef:14.6f} {se_str} {t_str} {p_str}")

        lines.append("-" * (width + 52))
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSolution(n={self._design.n}, p={self._design.p}, "
            f"rank={self.rank}, r_squared={self.r_squared:.4f})"
        )
