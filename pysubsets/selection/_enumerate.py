"""
Exhaustive subset enumeration.

Every subset of a given size is fitted by least squares (intercept +
columns) and only the smallest-RSS fits are kept. Subsets are generated
in lexicographic column order by itertools.combinations; the ranking key
is (RSS, column tuple), so equal RSS values resolve to the
lexicographically smallest subset regardless of generation order.
"""

import heapq
from itertools import combinations
from math import comb
from typing import Any, Iterable, Iterator

import numpy as np
from numpy.typing import NDArray

from pysubsets.core.compute.linalg.qr import qr_lstsq
from pysubsets.selection._common import SubsetFit


def with_intercept(
    X: NDArray[np.floating[Any]],
    predictors: tuple[int, ...],
) -> NDArray[np.floating[Any]]:
    """Design matrix [1, X[:, predictors]]."""
    n = X.shape[0]
    return np.column_stack([np.ones(n), X[:, list(predictors)]])


def fit_subset(
    y: NDArray[np.floating[Any]],
    X: NDArray[np.floating[Any]],
    predictors: tuple[int, ...],
) -> SubsetFit:
    """
    Least squares fit of y on intercept + the given columns of X.

    The caller guarantees that the full design [1, X] has full column
    rank, which every column subset then inherits.
    """
    design = with_intercept(X, predictors)
    lsq = qr_lstsq(design, y, check_rank=False)
    return SubsetFit(
        predictors=tuple(predictors),
        coefficients=lsq.coefficients,
        rss=lsq.rss,
        df_residual=design.shape[0] - design.shape[1],
    )


def enumerate_subsets(k_total: int, size: int) -> Iterator[tuple[int, ...]]:
    """All size-element subsets of range(k_total), in lexicographic order."""
    return combinations(range(k_total), size)


def count_subsets(k_total: int, max_size: int) -> int:
    """Number of models fitted by a search up to max_size."""
    return sum(comb(k_total, size) for size in range(1, max_size + 1))


def select_best(fits: Iterable[SubsetFit], keep: int) -> list[SubsetFit]:
    """
    The `keep` fits with smallest RSS, ordered best first.

    Ties on RSS are broken by the column-index tuple (lexicographic).
    """
    return heapq.nsmallest(keep, fits, key=lambda f: (f.rss, f.predictors))


def search(
    y: NDArray[np.floating[Any]],
    X: NDArray[np.floating[Any]],
    max_size: int,
    keep: int,
) -> dict[int, list[SubsetFit]]:
    """
    Best `keep` fits for every size 1..max_size.

    Returns:
        size -> list of SubsetFit, best first
    """
    k_total = X.shape[1]
    best: dict[int, list[SubsetFit]] = {}
    for size in range(1, max_size + 1):
        fits = (fit_subset(y, X, subset) for subset in enumerate_subsets(k_total, size))
        best[size] = select_best(fits, keep)
    return best
