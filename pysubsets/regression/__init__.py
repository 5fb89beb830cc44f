"""
Ordinary least squares through the shared QR kernel.

Used on its own or via SubsetSolution.refit() to report a chosen subset
with standard errors and p-values. No intercept is added: pass a column
of ones (SubsetSolution.refit() does).

    >>> from pysubsets.regression import fit
    >>> result = fit(X, y, names=['(Intercept)', 'lcavol', 'lweight'])
    >>> result.coefficient_table()
"""

from pysubsets.regression.design import RegressionDesign
from pysubsets.regression.solution import LinearSolution, LinearParams
from pysubsets.regression.solvers import fit

__all__ = [
    "fit",
    "RegressionDesign",
    "LinearSolution",
    "LinearParams",
]
