"""
Structural interfaces shared by the regression and selection layers.

Protocols rather than base classes: core.datasource.DataSource, the
regression QR backend and the exhaustive selection backend satisfy them
without inheriting from anything.
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class DataSource(Protocol):
    """Anything a Design can be built from."""

    @property
    def n_observations(self) -> int:
        ...

    @property
    def metadata(self) -> dict[str, Any]:
        """Origin details, e.g. {'source': 'dataframe', 'columns': [...]}."""
        ...

    def supports(self, capability: str) -> bool:
        """Unknown capabilities return False, never raise."""
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Turns a validated design into a Result[P].

    Search settings (max_size, best_per_size) are fixed at construction;
    solve() takes nothing but the design.

    Type Parameters:
        D: Design type accepted (RegressionDesign, SubsetDesign)
        P: Payload type produced (LinearParams, SubsetParams)
    """

    @property
    def name(self) -> str:
        """'{device}_{algorithm}', e.g. 'cpu_qr', 'cpu_exhaustive'."""
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Raises:
            SingularMatrixError: If the design matrix is rank-deficient
            DomainError: If the sample size leaves a statistic undefined
        """
        ...
