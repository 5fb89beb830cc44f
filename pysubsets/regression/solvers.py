"""
Solver dispatch for regression.

This module provides the fit() function (public API) and backend selection.
"""

from typing import Literal, Sequence
from numpy.typing import ArrayLike

from pysubsets.regression.design import RegressionDesign
from pysubsets.regression.solution import LinearSolution
from pysubsets.regression.backends.cpu import CPUQRBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_qr']


def fit(
    X_or_design: ArrayLike | RegressionDesign,
    y: ArrayLike | None = None,
    *,
    names: Sequence[str] | None = None,
    backend: BackendChoice = 'auto',
) -> LinearSolution:
    """
    Fit a linear regression model.

    Solves the ordinary least squares problem:
        min_β ||y - Xβ||²

    No intercept is added; include a column of ones in X for one.

    Args:
        X_or_design: Design matrix (n x p) or a prebuilt RegressionDesign.
        y: Response vector (n,). Required when X is an array.
        names: Column labels used by summary() and coefficient_table()
            (ignored when a design is passed).
        backend: Computational backend to use:
            - 'auto': Select best available (currently the CPU QR backend)
            - 'cpu' / 'cpu_qr': CPU QR decomposition

    Returns:
        LinearSolution with coefficients, diagnostics, and summary methods

    Raises:
        InputError: If inputs are non-numeric or contain NaN/Inf
        DimensionError: If X and y have inconsistent dimensions
        SingularMatrixError: If X is rank-deficient

    Example:
        >>> import numpy as np
        >>> from pysubsets.regression import fit
        >>>
        >>> X = np.column_stack([np.ones(100), np.random.randn(100, 2)])
        >>> y = X @ [1, 2, 3] + np.random.randn(100) * 0.1
        >>>
        >>> result = fit(X, y)
        >>> print(result.coefficients)
    """
    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    if isinstance(X_or_design, RegressionDesign):
        design = X_or_design
    else:
        if y is None:
            raise ValueError("y required when X is an array")
        design = RegressionDesign.build(X_or_design, y, names=names)

    # === Select Backend ===
    backend_impl = _get_backend(backend)

    # === Solve ===
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    return LinearSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice) -> CPUQRBackend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_qr'):
        return CPUQRBackend()
    raise ValueError(f"Unknown backend: {choice!r}")
