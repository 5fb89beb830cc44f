"""
Exception hierarchy for PySubsets.

All exceptions inherit from PySubsetsError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PySubsetsError(Exception):
    """Base exception for all PySubsets errors."""
    pass


class ValidationError(PySubsetsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when the response and predictors disagree on the number of rows.
    """
    pass


class InputError(ValidationError):
    """
    Input data is non-numeric or incomplete.

    Raised for object/string dtypes, unencoded categorical columns,
    and NaN or Inf entries.
    """
    pass


class DomainError(PySubsetsError):
    """
    Sample size is too small for the requested number of parameters.

    Raised when a statistic (AICc, Cp) or the requested search depth
    has no residual degrees of freedom left to be defined.

    Attributes:
        n: Number of observations
        k: Number of parameters involved (including intercept), if known
    """

    def __init__(
        self,
        message: str,
        n: int | None = None,
        k: int | None = None,
    ):
        super().__init__(message)
        self.n = n
        self.k = k


class NumericalError(PySubsetsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when a matrix operation requires invertibility but the matrix
    is singular or numerically rank-deficient.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically min(n, p))
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank
