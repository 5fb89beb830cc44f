"""
PySubsets: best-subsets regression scoring for Python.

Exhaustive predictor-subset search for linear models, with R-matching
fit statistics (R², adjusted R², Mallows' Cp, AIC, AICc, BIC).

Submodules:
    selection: Exhaustive best-subsets search and model choice
    regression: Ordinary least squares (QR)
    datasets: Reference datasets (prostate cancer)
"""

__version__ = "0.1.0"

from pysubsets.core.datasource import DataSource
from pysubsets import regression
from pysubsets import selection
from pysubsets import datasets
from pysubsets.selection import best_subsets, evaluate

__all__ = [
    "__version__",
    "DataSource",
    "regression",
    "selection",
    "datasets",
    "best_subsets",
    "evaluate",
]
