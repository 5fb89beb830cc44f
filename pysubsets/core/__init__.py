"""
Infrastructure shared by pysubsets.regression and pysubsets.selection.

    protocols    DataSource and Backend structural interfaces
    result       Result[P] envelope returned by every backend
    exceptions   PySubsetsError hierarchy
    validation   fail-fast input checks used at Design construction
    compute      timing, conditioning thresholds, QR least squares
"""

from pysubsets.core.protocols import DataSource, Backend
from pysubsets.core.result import Result
from pysubsets.core.exceptions import (
    PySubsetsError,
    ValidationError,
    DimensionError,
    InputError,
    DomainError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "DataSource",
    "Backend",
    "Result",
    "PySubsetsError",
    "ValidationError",
    "DimensionError",
    "InputError",
    "DomainError",
    "NumericalError",
    "SingularMatrixError",
]
