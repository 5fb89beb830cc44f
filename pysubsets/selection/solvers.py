"""
Solver dispatch for best-subsets selection.

Public API:
    best_subsets(X, y, ...) -> SubsetSolution
    evaluate(response, predictors, max_size, best_per_size) -> tuple[FitStatistics, ...]
"""

import warnings
from typing import Any, Literal, Sequence

from pysubsets.core.exceptions import DomainError, ValidationError
from pysubsets.core.validation import check_positive_int
from pysubsets.selection._common import FitStatistics
from pysubsets.selection.backends.cpu import CPUExhaustiveBackend
from pysubsets.selection.design import SubsetDesign
from pysubsets.selection.solution import SubsetSolution


BackendChoice = Literal['auto', 'cpu', 'cpu_exhaustive']


def best_subsets(
    X_or_design: Any,
    y: Any = None,
    *,
    max_size: int | None = None,
    best_per_size: int = 1,
    names: Sequence[str] | None = None,
    backend: BackendChoice = 'auto',
) -> SubsetSolution:
    """
    Exhaustive best-subsets linear regression.

    For every size p = 1..max_size, fits y ~ 1 + (p predictors) for all
    C(K, p) predictor subsets and keeps the best_per_size subsets with the
    smallest residual sum of squares. The retained subsets are scored by
    R², adjusted R², Mallows' Cp, AIC, AICc and BIC.

    The intercept is always included and is not a candidate predictor.

    Args:
        X_or_design: Predictor matrix (n x K) or a prebuilt SubsetDesign.
        y: Response vector (n,). Required when X is an array.
        max_size: Largest subset size to search. Default min(K, n - 2).
        best_per_size: Number of subsets to keep per size. Default 1.
        names: Predictor names (ignored when a design is passed).
        backend: 'auto' or 'cpu' (exhaustive CPU search).

    Returns:
        SubsetSolution with the result table and model-choice helpers

    Raises:
        DimensionError: If y and X disagree on the number of rows
        InputError: If inputs are non-numeric or contain NaN/Inf
        DomainError: If max_size >= n - 1, or the full model has no
            residual degrees of freedom
        ValidationError: If max_size or best_per_size is out of range
        SingularMatrixError: If [1, X] is rank-deficient

    Examples:
        >>> from pysubsets.datasets import load_prostate
        >>> design = SubsetDesign.from_datasource(load_prostate(), y='lpsa')
        >>> result = best_subsets(design)
        >>> result.best('bic').names
        >>> print(result.summary())
    """
    if isinstance(X_or_design, SubsetDesign):
        design = X_or_design
    else:
        if y is None:
            raise ValueError("y required when X is an array")
        design = SubsetDesign.from_arrays(X_or_design, y, names=names)

    max_size = _check_search_size(design, max_size)
    best_per_size = check_positive_int(best_per_size, 'best_per_size')

    backend_impl = _get_backend(backend, max_size, best_per_size)
    result = backend_impl.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return SubsetSolution(_result=result, _design=design)


def evaluate(
    response: Any,
    predictors: Any,
    max_size: int,
    best_per_size: int = 1,
) -> tuple[FitStatistics, ...]:
    """
    Score the best predictor subsets of every size up to max_size.

    Functional form of best_subsets(): takes the response first and
    returns only the ordered fit-statistics records (by size, then by
    rank within size).
    """
    solution = best_subsets(
        predictors, response, max_size=max_size, best_per_size=best_per_size,
    )
    return solution.records


def _check_search_size(design: SubsetDesign, max_size: int | None) -> int:
    """
    Resolve and validate the search depth.

    Raises:
        DomainError: If max_size >= n - 1
        ValidationError: If max_size < 1 or max_size > K
    """
    n, k_total = design.n, design.k_total
    if max_size is None:
        max_size = min(k_total, n - 2)
    max_size = check_positive_int(max_size, 'max_size')

    if max_size >= n - 1:
        raise DomainError(
            f"max_size={max_size} requires n > max_size + 1 observations, got n={n}",
            n=n, k=max_size + 1,
        )
    if max_size > k_total:
        raise ValidationError(
            f"max_size={max_size} exceeds the number of candidate predictors K={k_total}"
        )
    return max_size


def _get_backend(
    choice: BackendChoice,
    max_size: int,
    best_per_size: int,
) -> CPUExhaustiveBackend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_exhaustive'):
        return CPUExhaustiveBackend(max_size=max_size, best_per_size=best_per_size)
    raise ValueError(f"Unknown backend: {choice!r}")
