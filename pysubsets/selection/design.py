"""
Best-subsets Design.

Holds the validated response vector, the candidate predictor matrix and
the predictor names. The intercept is implicit: it is part of every
candidate model and is not one of the K candidate columns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pysubsets.core.capabilities import CAPABILITY_REPEATABLE
from pysubsets.core.datasource import DataSource
from pysubsets.core.exceptions import InputError, ValidationError
from pysubsets.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_not_constant,
)
from pysubsets.selection._encoding import encode_treatment

if TYPE_CHECKING:
    import pandas as pd


@dataclass(frozen=True)
class SubsetDesign:
    """
    Best-subsets search inputs. Immutable after construction.

    Construction:
        SubsetDesign.from_arrays(X, y, names=[...])
        SubsetDesign.from_datasource(ds, y='lpsa')                 # X = all other columns
        SubsetDesign.from_datasource(ds, x=['a', 'b'], y='c')
        SubsetDesign.from_dataframe(df, y='c', categorical=['g'])  # dummy-encodes 'g'
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _k: int
    _names: tuple[str, ...]
    _source: DataSource | None = None

    @classmethod
    def from_arrays(
        cls,
        X: Any,
        y: Any,
        names: Sequence[str] | None = None,
    ) -> SubsetDesign:
        """Build design directly from array-likes."""
        return cls._build(X, y, names=names, source=None)

    @classmethod
    def from_datasource(
        cls,
        source: DataSource,
        *,
        y: str | None = None,
        x: list[str] | None = None,
        categorical: Sequence[str] | None = None,
    ) -> SubsetDesign:
        """
        Build design from a DataSource.

        Args:
            source: The DataSource
            y: Response column. If None, uses 'y' from source.
            x: Predictor columns. If None and source has 'X', uses that;
               otherwise all columns except y, in source order.
            categorical: Columns to treatment-code before the search.
               Any other non-numeric column raises InputError.
        """
        if y is not None:
            y_arr = source[y]
        elif 'y' in source:
            y_arr = source['y']
        else:
            raise ValueError("Must specify y or DataSource must have 'y'")

        if x is None and 'X' in source:
            return cls._build(source['X'], y_arr, names=None, source=source)

        if x is None:
            response = y if y is not None else 'y'
            ordered = source.columns or sorted(source.keys())
            x = [c for c in ordered if c != response]
            if not x:
                raise ValueError("No predictor columns available")

        categorical = set(categorical or ())
        unknown = categorical - set(x)
        if unknown:
            raise ValidationError(
                f"categorical: columns {sorted(unknown)} are not predictors"
            )

        blocks: list[NDArray] = []
        names: list[str] = []
        for col in x:
            raw = source[col]
            if col in categorical:
                coded, coded_names, _ = encode_treatment(raw, col)
                blocks.append(coded)
                names.extend(coded_names)
            else:
                arr = _numeric_column(raw, col)
                blocks.append(arr.reshape(-1, 1))
                names.append(col)

        return cls._build(np.hstack(blocks), y_arr, names=names, source=source)

    @classmethod
    def from_dataframe(
        cls,
        df: 'pd.DataFrame',
        *,
        y: str,
        x: list[str] | None = None,
        categorical: Sequence[str] | None = None,
    ) -> SubsetDesign:
        """Build design from a pandas DataFrame (see from_datasource)."""
        return cls.from_datasource(
            DataSource.from_dataframe(df), y=y, x=x, categorical=categorical,
        )

    @classmethod
    def _build(
        cls,
        X: Any,
        y: Any,
        names: Sequence[str] | None,
        source: DataSource | None,
    ) -> SubsetDesign:
        """Internal builder with validation."""
        X = check_array(X, 'predictors')
        y = check_array(y, 'response')

        if X.ndim == 1:
            X = X.reshape(-1, 1)
        if y.ndim == 2 and y.shape[1] == 1:
            y = y.ravel()

        check_2d(X, 'predictors')
        check_1d(y, 'response')
        check_consistent_length(y, X, names=('response', 'predictors'))
        check_finite(X, 'predictors')
        check_finite(y, 'response')
        check_not_constant(y, 'response')

        n, k = X.shape
        if k == 0:
            raise ValidationError("predictors: no candidate columns")

        if names is None:
            names = [f"x{j}" for j in range(k)]
        names = tuple(str(nm) for nm in names)
        if len(names) != k:
            raise ValidationError(
                f"names: got {len(names)} names for {k} predictor columns"
            )
        if len(set(names)) != k:
            raise ValidationError(f"names: duplicate predictor names in {list(names)}")

        return cls(
            _X=X.astype(np.float64, copy=False),
            _y=y.astype(np.float64, copy=False),
            _n=n,
            _k=k,
            _names=names,
            _source=source,
        )

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Candidate predictor matrix (n x K), no intercept column."""
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
    def k_total(self) -> int:
        """Number of candidate predictors K."""
        return self._k

    @property
    def names(self) -> tuple[str, ...]:
        """Predictor names, one per column of X."""
        return self._names

    @property
    def source(self) -> DataSource | None:
        """Original DataSource, if available."""
        return self._source

    def supports(self, capability: str) -> bool:
        """Check if underlying data supports a capability."""
        if self._source is not None:
            return self._source.supports(capability)
        return capability in (CAPABILITY_REPEATABLE,)

    def full_matrix(self) -> NDArray[np.floating[Any]]:
        """Design matrix of the full model, [1, X]."""
        return np.column_stack([np.ones(self._n), self._X])


def _numeric_column(raw: Any, name: str) -> NDArray[np.floating[Any]]:
    """Numeric predictor column, rejecting unencoded categoricals."""
    arr = np.asarray(raw)
    if arr.dtype == object or not (
        np.issubdtype(arr.dtype, np.number) or arr.dtype == np.bool_
    ):
        raise InputError(
            f"{name}: non-numeric column (dtype {arr.dtype}); "
            f"pass it in categorical=[...] to dummy-encode it"
        )
    return check_array(arr, name)
