"""
Common data types for best-subsets selection.

Contains the frozen parameter payloads that go inside Result[P] envelopes.
Each payload is a pure data container with no methods.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class SubsetFit:
    """
    Least squares fit of the response on intercept + one predictor subset.

    Returned by the linear fit used inside the enumeration.
    """
    predictors: tuple[int, ...]
    coefficients: NDArray[np.floating[Any]]   # intercept first
    rss: float
    df_residual: int


@dataclass(frozen=True)
class FitStatistics:
    """
    Fit statistics for one retained subset.

    `size` counts predictors only; `k = size + 1` counts the intercept too.
    `rank_in_size` is 1 for the smallest-RSS subset of that size.
    """
    size: int
    predictors: tuple[int, ...]
    names: tuple[str, ...]
    k: int
    rss: float
    r_squared: float
    adj_r_squared: float
    cp: float
    aic: float
    aicc: float
    bic: float
    rank_in_size: int = 1


@dataclass(frozen=True)
class SubsetParams:
    """Parameter payload for an exhaustive best-subsets search."""
    records: tuple[FitStatistics, ...]     # ordered by (size, rank_in_size)
    n: int
    k_total: int                           # K, number of candidate predictors
    max_size: int
    best_per_size: int
    tss: float
    rss_full: float
    mse_full: float                        # RSS_full / (n - K - 1)
    predictor_names: tuple[str, ...]
    n_models_evaluated: int
