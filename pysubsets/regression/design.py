"""
Regression Design.

Design wraps a DataSource and extracts X (design matrix) and y (response).
It knows it's building a regression. DataSource doesn't.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence
import numpy as np
from numpy.typing import NDArray

from pysubsets.core.datasource import DataSource
from pysubsets.core.capabilities import CAPABILITY_REPEATABLE
from pysubsets.core.exceptions import ValidationError
from pysubsets.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
)


@dataclass(frozen=True)
class RegressionDesign:
    """
    Regression design matrix specification.

    Wraps a DataSource and provides X, y for regression.
    Immutable after construction. No intercept column is added: callers
    that want one include a column of ones in X.

    Construction:
        RegressionDesign.from_datasource(ds, y='target')           # X = all other columns
        RegressionDesign.from_datasource(ds, x=['a','b'], y='c')  # X = specified columns
        RegressionDesign.from_datasource(ds)                        # Uses ds['X'] and ds['y']
        RegressionDesign.build(X, y)                                # Direct from arrays
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _p: int
    _names: tuple[str, ...]
    _source: DataSource | None = None

    @classmethod
    def from_datasource(
        cls,
        source: DataSource,
        *,
        x: str | list[str] | None = None,
        y: str | None = None,
    ) -> RegressionDesign:
        """
        Build design from DataSource.

        Args:
            source: The DataSource
            x: Predictor column(s). If None and source has 'X', uses that.
               If None and y is specified, uses all columns except y.
            y: Response column. If None, uses 'y' from source.
        """
        if y is not None:
            y_arr = source[y]
        elif 'y' in source:
            y_arr = source['y']
        else:
            raise ValueError("Must specify y or DataSource must have 'y'")

        x_names: list[str] | None = None
        if x is not None:
            x_names = [x] if isinstance(x, str) else list(x)
            X_arr = _get_columns(source, x_names)
        elif 'X' in source:
            X_arr = source['X']
        elif y is not None:
            x_cols = [k for k in (source.columns or sorted(source.keys())) if k != y]
            if not x_cols:
                raise ValueError("No predictor columns available")
            X_arr = _get_columns(source, x_cols)
            x_names = x_cols
        else:
            raise ValueError("Must specify x or DataSource must have 'X'")

        return cls.build(X_arr, y_arr, source=source, names=x_names)

    @classmethod
    def build(
        cls,
        X: Any,
        y: Any,
        source: DataSource | None = None,
        names: Sequence[str] | None = None,
    ) -> RegressionDesign:
        """
        Build design from array-likes with validation.

        names label the columns of X in summaries; default x0, x1, ...
        """
        X = check_array(X, 'X')
        y = check_array(y, 'y')

        # Ensure correct shapes
        if X.ndim == 1:
            X = X.reshape(-1, 1)
        if y.ndim == 2 and y.shape[1] == 1:
            y = y.ravel()

        check_2d(X, 'X')
        check_1d(y, 'y')
        check_consistent_length(X, y, names=('X', 'y'))
        check_finite(X, 'X')
        check_finite(y, 'y')

        n, p = X.shape
        check_min_samples(X, p, 'X')

        if names is None:
            names = [f"x{j}" for j in range(p)]
        names = tuple(str(nm) for nm in names)
        if len(names) != p:
            raise ValidationError(f"names: got {len(names)} names for {p} columns of X")

        return cls(
            _X=X.astype(np.float64, copy=False),
            _y=y.astype(np.float64, copy=False),
            _n=n,
            _p=p,
            _names=names,
            _source=source,
        )

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Design matrix (n x p)."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def p(self) -> int:
        """Number of columns in X."""
        return self._p

    @property
    def names(self) -> tuple[str, ...]:
        """Column labels of X."""
        return self._names

    @property
    def source(self) -> DataSource | None:
        """Original DataSource, if available."""
        return self._source

    def supports(self, capability: str) -> bool:
        """Check if underlying data supports a capability."""
        if self._source is not None:
            return self._source.supports(capability)
        # Arrays in memory support these
        return capability in (CAPABILITY_REPEATABLE,)

    def XtX(self) -> NDArray[np.floating[Any]]:
        """Compute X'X (for standard errors)."""
        return self._X.T @ self._X


def _get_columns(source: DataSource, names: list[str]) -> NDArray:
    """Stack multiple columns from DataSource into a matrix."""
    arrays = []
    for name in names:
        arr = check_array(source[name], name)
        if arr.ndim == 1:
            arr = arr.reshape(-1, 1)
        arrays.append(arr)
    return np.hstack(arrays)
