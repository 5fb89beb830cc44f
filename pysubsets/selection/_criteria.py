"""
Model-fit criteria for comparing least squares fits of different sizes.

All functions are scalar and pure. Conventions:

    p   number of predictors (intercept excluded)
    k   number of estimated regression coefficients, k = p + 1
    n   number of observations

Information criteria use the "extractAIC" scale:

    AIC  = n ln(RSS/n) + 2k
    AICc = AIC + 2k(k+1) / (n - k - 1)
    BIC  = n ln(RSS/n) + k ln(n)

The Gaussian constant n(ln 2π + 1) is dropped and σ² is not counted as
a parameter. Differences between models are identical to those of the
full log-likelihood form, so rankings are unaffected.
"""

import math

from pysubsets.core.exceptions import DomainError


def r_squared(rss: float, tss: float) -> float:
    """Coefficient of determination, 1 - RSS/TSS."""
    return 1.0 - rss / tss


def adjusted_r_squared(rss: float, tss: float, n: int, p: int) -> float:
    """
    Adjusted R², 1 - (1 - R²)(n - 1)/(n - p - 1).

    Raises:
        DomainError: If n - p - 1 <= 0
    """
    if n - p - 1 <= 0:
        raise DomainError(
            f"adjusted R-squared undefined: n - p - 1 = {n - p - 1} (n={n}, p={p})",
            n=n, k=p + 1,
        )
    return 1.0 - (1.0 - r_squared(rss, tss)) * (n - 1) / (n - p - 1)


def mallows_cp(rss: float, rss_full: float, df_full: int, n: int, p: int) -> float:
    """
    Mallows' Cp, RSS/MSE_full - n + 2(p + 1), with MSE_full = RSS_full / df_full.

    RSS/MSE_full is evaluated as (RSS/RSS_full) * df_full so that the full
    model gets exactly K + 1.
    """
    return (rss / rss_full) * df_full - n + 2 * (p + 1)


def aic(rss: float, n: int, k: int) -> float:
    """Akaike information criterion, n ln(RSS/n) + 2k."""
    return n * math.log(rss / n) + 2 * k


def aicc(rss: float, n: int, k: int) -> float:
    """
    Bias-corrected AIC, AIC + 2k(k+1)/(n - k - 1).

    Raises:
        DomainError: If n - k - 1 <= 0
    """
    if n - k - 1 <= 0:
        raise DomainError(
            f"AICc undefined: n - k - 1 = {n - k - 1} (n={n}, k={k})",
            n=n, k=k,
        )
    return aic(rss, n, k) + 2 * k * (k + 1) / (n - k - 1)


def bic(rss: float, n: int, k: int) -> float:
    """Schwarz Bayesian information criterion, n ln(RSS/n) + k ln(n)."""
    return n * math.log(rss / n) + k * math.log(n)


# criterion name -> (FitStatistics attribute, 'min' or 'max')
CRITERIA: dict[str, tuple[str, str]] = {
    'r2': ('r_squared', 'max'),
    'adj_r2': ('adj_r_squared', 'max'),
    'rss': ('rss', 'min'),
    'cp': ('cp', 'min'),
    'aic': ('aic', 'min'),
    'aicc': ('aicc', 'min'),
    'bic': ('bic', 'min'),
}
