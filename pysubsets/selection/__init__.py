"""
Best-subsets variable selection for linear regression.

Public API:
    best_subsets(X, y, ...) -> SubsetSolution     # exhaustive search + scoring
    evaluate(response, predictors, max_size, ...) -> tuple[FitStatistics, ...]

Criteria (all on the extractAIC scale, see _criteria):
    R², adjusted R², RSS, Mallows' Cp, AIC, AICc, BIC
"""

from pysubsets.selection._common import FitStatistics, SubsetFit, SubsetParams
from pysubsets.selection._criteria import (
    adjusted_r_squared,
    aic,
    aicc,
    bic,
    mallows_cp,
    r_squared,
)
from pysubsets.selection.design import SubsetDesign
from pysubsets.selection.solution import SubsetSolution
from pysubsets.selection.solvers import best_subsets, evaluate

__all__ = [
    "best_subsets",
    "evaluate",
    "SubsetDesign",
    "SubsetSolution",
    "FitStatistics",
    "SubsetFit",
    "SubsetParams",
    "r_squared",
    "adjusted_r_squared",
    "mallows_cp",
    "aic",
    "aicc",
    "bic",
]
