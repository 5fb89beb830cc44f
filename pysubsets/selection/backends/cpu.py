"""
CPU reference backend for best-subsets selection.

Exhaustively fits every predictor subset up to max_size by QR least
squares and scores the retained subsets. Matches the output of R's
leaps::regsubsets(method='exhaustive') on the same data.
"""

import math
from typing import Any

import numpy as np

from pysubsets.core.result import Result
from pysubsets.core.exceptions import DomainError
from pysubsets.core.validation import check_column_rank
from pysubsets.core.compute.timing import Timer
from pysubsets.core.compute.tolerances import exact_fit_threshold, is_ill_conditioned
from pysubsets.selection._common import FitStatistics, SubsetFit, SubsetParams
from pysubsets.selection._criteria import (
    adjusted_r_squared,
    aic,
    aicc,
    bic,
    mallows_cp,
    r_squared,
)
from pysubsets.selection._enumerate import count_subsets, fit_subset, search
from pysubsets.selection.design import SubsetDesign


class CPUExhaustiveBackend:
    """
    CPU backend enumerating all subsets.

    Implements the Backend protocol for SubsetDesign -> SubsetParams.
    Search depth and the number of subsets kept per size are fixed at
    construction; solve() has no other inputs than the design.
    """

    def __init__(self, max_size: int, best_per_size: int = 1):
        self._max_size = max_size
        self._best_per_size = best_per_size

    @property
    def name(self) -> str:
        return 'cpu_exhaustive'

    def solve(self, design: SubsetDesign) -> Result[SubsetParams]:
        """
        Run the exhaustive search.

        Algorithm:
            1. Fit the full model once (intercept + all K predictors)
               to get MSE_full for Mallows' Cp
            2. For each size p = 1..max_size fit all C(K, p) subsets and
               keep the best_per_size smallest RSS
            3. Score the retained subsets

        Raises:
            DomainError: If the full model leaves no residual degrees of
                freedom or fits the response exactly
            SingularMatrixError: If [1, X] is rank-deficient
        """
        timer = Timer()
        timer.start()
        warnings: list[str] = []

        X, y = design.X, design.y
        n, k_total = design.n, design.k_total
        max_size, keep = self._max_size, self._best_per_size

        df_full = n - k_total - 1
        if df_full <= 0:
            raise DomainError(
                f"Full model with K={k_total} predictors leaves {df_full} residual "
                f"degrees of freedom (n={n}); Mallows' Cp is undefined",
                n=n, k=k_total + 1,
            )

        with timer.section('full_model'):
            check_column_rank(design.full_matrix(), 'predictors (with intercept)')
            full = fit_subset(y, X, tuple(range(k_total)))
            tss = float(np.sum((y - np.mean(y)) ** 2))
            condition_number = _scaled_condition_number(X)

        if full.rss <= exact_fit_threshold(n, tss):
            raise DomainError(
                "Full model fits the response exactly (RSS ~ 0); "
                "residual variance and Mallows' Cp are undefined",
                n=n, k=k_total + 1,
            )
        mse_full = full.rss / df_full

        if is_ill_conditioned(condition_number):
            warnings.append(
                f"Predictors are ill-conditioned (scaled condition number "
                f"{condition_number:.3g}); RSS ties between subsets may be "
                f"resolved by rounding error"
            )

        with timer.section('enumeration'):
            best = search(y, X, max_size, keep)

        with timer.section('statistics'):
            records: list[FitStatistics] = []
            for size in range(1, max_size + 1):
                for rank, subset_fit in enumerate(best[size], start=1):
                    record, note = _score(
                        subset_fit, design.names, n, tss, full.rss, df_full, rank,
                    )
                    records.append(record)
                    if note is not None and note not in warnings:
                        warnings.append(note)

        timer.stop()

        n_models = count_subsets(k_total, max_size)
        params = SubsetParams(
            records=tuple(records),
            n=n,
            k_total=k_total,
            max_size=max_size,
            best_per_size=keep,
            tss=tss,
            rss_full=full.rss,
            mse_full=mse_full,
            predictor_names=design.names,
            n_models_evaluated=n_models,
        )

        info: dict[str, Any] = {
            'method': 'exhaustive',
            'n_models_evaluated': n_models,
            'condition_number': condition_number,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings),
        )


def _score(
    subset_fit: SubsetFit,
    names: tuple[str, ...],
    n: int,
    tss: float,
    rss_full: float,
    df_full: int,
    rank: int,
) -> tuple[FitStatistics, str | None]:
    """Fit statistics for one retained subset, plus an optional warning."""
    p = len(subset_fit.predictors)
    k = p + 1
    rss = subset_fit.rss
    note = None

    if n - k - 1 > 0:
        aicc_value = aicc(rss, n, k)
    else:
        # The correction term 2k(k+1)/(n-k-1) diverges at n - k - 1 = 0
        aicc_value = math.inf
        note = f"AICc undefined at size {p} (n - k - 1 = 0); reported as inf"

    record = FitStatistics(
        size=p,
        predictors=subset_fit.predictors,
        names=tuple(names[j] for j in subset_fit.predictors),
        k=k,
        rss=rss,
        r_squared=r_squared(rss, tss),
        adj_r_squared=adjusted_r_squared(rss, tss, n, p),
        cp=mallows_cp(rss, rss_full, df_full, n, p),
        aic=aic(rss, n, k),
        aicc=aicc_value,
        bic=bic(rss, n, k),
        rank_in_size=rank,
    )
    return record, note


def _scaled_condition_number(X: np.ndarray) -> float:
    """Condition number of the standardized predictors (intercept excluded)."""
    centered = X - X.mean(axis=0)
    norms = np.sqrt(np.sum(centered ** 2, axis=0))
    return float(np.linalg.cond(centered / norms))
