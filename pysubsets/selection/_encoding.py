"""
Indicator (dummy) coding for categorical predictors.

The subset search works on numeric matrices only, so categorical columns
are expanded before the search starts. Treatment coding is used: k-1
indicator columns with the first sorted level as the baseline.
"""

from typing import Any

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from pysubsets.core.exceptions import InputError


def encode_treatment(
    factor: NDArray,
    name: str,
) -> tuple[NDArray[np.floating[Any]], list[str], str]:
    """
    Treatment (dummy) coding for a single factor.

    Drops the first level (baseline) and creates k-1 indicator columns.

    Args:
        factor: 1D array of group labels (strings or integers)
        name: Column name, used to label the indicator columns

    Returns:
        (X_coded, column_names, baseline) where:
            X_coded: (n, k-1) float64 indicator matrix
            column_names: "name[level]" for each non-baseline level
            baseline: the dropped baseline level

    Raises:
        InputError: If the factor has missing values or a single level
    """
    values = np.asarray(factor, dtype=object)
    n_missing = int(pd.isna(values).sum())
    if n_missing:
        raise InputError(
            f"{name}: {n_missing} missing values in categorical column"
        )

    factor_str = np.array([str(v) for v in values])
    levels = sorted(set(factor_str.tolist()))
    if len(levels) < 2:
        raise InputError(
            f"{name}: categorical column has a single level {levels!r}, nothing to encode"
        )
    baseline = levels[0]
    contrasts = levels[1:]

    X = np.zeros((len(factor_str), len(contrasts)), dtype=np.float64)
    for j, level in enumerate(contrasts):
        X[:, j] = (factor_str == level).astype(np.float64)

    return X, [f"{name}[{level}]" for level in contrasts], baseline
