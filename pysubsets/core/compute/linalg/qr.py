"""
QR least squares kernel.

Every least squares fit in the package goes through qr_lstsq: the single
regression fit in pysubsets.regression and each of the C(K, p) subset
fits of the best-subsets search. The residual sum of squares is taken
from the residual vector, not from ||y||² - ||Q'y||².
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular

from pysubsets.core.exceptions import SingularMatrixError


@dataclass(frozen=True)
class QRFactor:
    """
    Reduced QR factorization X = QR with its numerical rank.

    Attributes:
        Q: (n x p) with orthonormal columns
        R: (p x p) upper triangular
        rank: Number of |R_jj| above max(n, p) * eps * max|R_jj|
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int


@dataclass(frozen=True)
class LeastSquaresFit:
    """Coefficients, fitted values and residuals of one least squares fit."""
    coefficients: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    rss: float
    rank: int


def qr_factor(X: NDArray[np.floating[Any]]) -> QRFactor:
    """Economy QR via LAPACK (numpy), with rank read off the R diagonal."""
    Q, R = np.linalg.qr(X, mode='reduced')

    diag_R = np.abs(np.diag(R))
    if diag_R.size == 0 or diag_R.max() == 0.0:
        return QRFactor(Q=Q, R=R, rank=0)

    tol = max(X.shape) * np.finfo(X.dtype).eps * diag_R.max()
    return QRFactor(Q=Q, R=R, rank=int(np.sum(diag_R > tol)))


def qr_lstsq(
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    *,
    check_rank: bool = True,
    name: str = 'X',
) -> LeastSquaresFit:
    """
    Minimize ||y - Xβ||² by QR: β = R⁻¹ Q'y.

    Args:
        X: Design matrix (n x p), n >= p
        y: Response vector (n,)
        check_rank: Raise on a rank-deficient X. Callers that already
            proved full column rank (subsets of a full-rank design) pass
            False to skip the comparison.
        name: Matrix name used in the error

    Raises:
        SingularMatrixError: If check_rank and rank(X) < p
    """
    p = X.shape[1]
    factor = qr_factor(X)

    if check_rank and factor.rank < p:
        raise SingularMatrixError(
            f"{name}: rank-deficient (rank={factor.rank}, expected={p}). "
            f"This indicates perfect multicollinearity.",
            matrix_name=name,
            rank=factor.rank,
            expected_rank=p,
        )

    beta = solve_triangular(factor.R, factor.Q.T @ y, lower=False)
    fitted = X @ beta
    residuals = y - fitted
    return LeastSquaresFit(
        coefficients=beta,
        fitted_values=fitted,
        residuals=residuals,
        rss=float(residuals @ residuals),
        rank=factor.rank,
    )
