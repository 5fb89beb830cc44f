"""
Numerical thresholds for the best-subsets search.

Above ILL_CONDITIONED_THRESHOLD the RSS ordering of near-equivalent
subsets may be decided by rounding, and the search says so.
"""

import numpy as np


# Scaled condition number of the predictors (intercept excluded)
ILL_CONDITIONED_THRESHOLD = 1e4


def is_ill_conditioned(condition_number: float) -> bool:
    return condition_number > ILL_CONDITIONED_THRESHOLD


def exact_fit_threshold(n: int, tss: float) -> float:
    """
    RSS at or below which a fit counts as exact.

    n * eps * TSS: an interpolating fit leaves only rounding residue of
    this order.
    """
    return n * float(np.finfo(np.float64).eps) * tss
