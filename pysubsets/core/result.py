"""
Generic result container for all PySubsets computations.

The Result class provides a standardized envelope that all domain-specific
results use. This enables shared tooling for timing, reproducibility,
and serialization while allowing domains to define their own parameter structures.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, models evaluated, diagnostics)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Library versions that produced a result."""
    import numpy as np
    import scipy

    from pysubsets import __version__

    return {
        'pysubsets_version': __version__,
        'numpy_version': np.__version__,
        'scipy_version': scipy.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (coefficients, fit statistics, etc.)
        info: Structured metadata (method, number of models evaluated)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions; filled automatically when omitted

    Examples:
        >>> Result(
        ...     params=LinearParams(coefficients=beta, ...),
        ...     info={'method': 'qr', 'rank': 5},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_qr'
        ... )

        >>> Result(
        ...     params=SubsetParams(records=..., ...),
        ...     info={'method': 'exhaustive', 'n_models_evaluated': 255},
        ...     timing={'total_seconds': 0.05, 'enumeration': 0.04},
        ...     backend_name='cpu_exhaustive'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
