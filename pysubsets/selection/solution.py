"""
User-facing best-subsets solution.

Wraps a Result[SubsetParams] and provides the result table, the
inclusion matrix, criterion-based model choice, coefficient refits
and an R-style summary.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pysubsets.core.result import Result
from pysubsets.selection._common import FitStatistics, SubsetParams
from pysubsets.selection._criteria import CRITERIA
from pysubsets.selection._enumerate import with_intercept

if TYPE_CHECKING:
    import pandas as pd
    from pysubsets.regression.solution import LinearSolution
    from pysubsets.selection.design import SubsetDesign


@dataclass
class SubsetSolution:
    """
    User-facing result of an exhaustive best-subsets search.

    Produced by best_subsets().
    """
    _result: Result[SubsetParams]
    _design: 'SubsetDesign'

    # === Result table ===

    @property
    def records(self) -> tuple[FitStatistics, ...]:
        """All retained subsets, ordered by size then rank within size."""
        return self._result.params.records

    @property
    def best_records(self) -> tuple[FitStatistics, ...]:
        """The smallest-RSS subset of each size, ordered by size."""
        return tuple(r for r in self.records if r.rank_in_size == 1)

    def record(self, size: int, rank: int = 1) -> FitStatistics:
        """
        Statistics of the rank-th best subset with `size` predictors.

        Raises:
            KeyError: If no such subset was retained
        """
        for r in self.records:
            if r.size == size and r.rank_in_size == rank:
                return r
        raise KeyError(
            f"No subset retained for size={size}, rank={rank} "
            f"(max_size={self.max_size}, best_per_size={self.best_per_size})"
        )

    @property
    def which(self) -> NDArray[np.bool_]:
        """
        Inclusion matrix of the best subset per size.

        Row i is the model with i + 1 predictors; column j is predictor j.
        """
        out = np.zeros((self.max_size, self.k_total), dtype=bool)
        for r in self.best_records:
            out[r.size - 1, list(r.predictors)] = True
        return out

    # === Payload pass-through ===

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def k_total(self) -> int:
        return self._result.params.k_total

    @property
    def max_size(self) -> int:
        return self._result.params.max_size

    @property
    def best_per_size(self) -> int:
        return self._result.params.best_per_size

    @property
    def predictor_names(self) -> tuple[str, ...]:
        return self._result.params.predictor_names

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def rss_full(self) -> float:
        return self._result.params.rss_full

    @property
    def mse_full(self) -> float:
        return self._result.params.mse_full

    @property
    def n_models_evaluated(self) -> int:
        return self._result.params.n_models_evaluated

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # === Model choice ===

    def best(self, criterion: str = 'bic') -> FitStatistics:
        """
        Best model across sizes according to a criterion.

        Args:
            criterion: 'r2' or 'adj_r2' (largest wins), or 'rss', 'cp',
                'aic', 'aicc', 'bic' (smallest wins). Ties go to the
                smaller model.

        Raises:
            ValueError: If criterion is unknown
        """
        if criterion not in CRITERIA:
            raise ValueError(
                f"Unknown criterion: {criterion!r}. Choose from {sorted(CRITERIA)}"
            )
        attr, direction = CRITERIA[criterion]
        candidates = self.best_records
        values = np.array([getattr(r, attr) for r in candidates])
        idx = int(np.argmax(values)) if direction == 'max' else int(np.argmin(values))
        return candidates[idx]

    def refit(self, size: int, rank: int = 1) -> 'LinearSolution':
        """
        Ordinary least squares fit of a retained subset, with standard
        errors and p-values (see LinearSolution.summary()).
        """
        from pysubsets.regression import fit

        r = self.record(size, rank)
        return fit(
            with_intercept(self._design.X, r.predictors),
            self._design.y,
            names=('(Intercept)',) + r.names,
        )

    def coefficients(self, size: int, rank: int = 1) -> dict[str, float]:
        """
        Least squares coefficients of a retained subset.

        Returns:
            Ordered mapping '(Intercept)' then predictor name -> estimate
        """
        solution = self.refit(size, rank)
        return {label: float(b) for label, b in zip(solution.names, solution.coefficients)}

    # === Export ===

    def to_dataframe(self) -> 'pd.DataFrame':
        """One row per retained subset, for plotting or reporting."""
        import pandas as pd

        rows = [
            {
                'size': r.size,
                'rank': r.rank_in_size,
                'predictors': r.predictors,
                'names': ", ".join(r.names),
                'r2': r.r_squared,
                'adj_r2': r.adj_r_squared,
                'rss': r.rss,
                'cp': r.cp,
                'aic': r.aic,
                'aicc': r.aicc,
                'bic': r.bic,
            }
            for r in self.records
        ]
        return pd.DataFrame(rows, columns=[
            'size', 'rank', 'predictors', 'names',
            'r2', 'adj_r2', 'rss', 'cp', 'aic', 'aicc', 'bic',
        ])

    def summary(self) -> str:
        """Generate R-style best-subsets summary."""
        lines = [
            "Best Subsets Regression (exhaustive)",
            "=" * 78,
            f"Observations: {self.n}",
            f"Candidate predictors: {self.k_total}",
            f"Models evaluated: {self.n_models_evaluated}",
            "",
            f"{'Size':>4} {'R-sq':>8} {'Adj R-sq':>9} {'Cp':>9} {'AICc':>10} "
            f"{'BIC':>10}  Predictors",
            "-" * 78,
        ]

        for r in self.records:
            size = f"{r.size:>4}" if r.rank_in_size == 1 else f"{'':>4}"
            lines.append(
                f"{size} {r.r_squared:>8.4f} {r.adj_r_squared:>9.4f} {r.cp:>9.3f} "
                f"{r.aicc:>10.3f} {r.bic:>10.3f}  {', '.join(r.names)}"
            )

        lines.append("-" * 78)
        lines.append("Selected size:")
        for label, criterion in (
            ('Adj R-sq', 'adj_r2'), ('Cp', 'cp'), ('AICc', 'aicc'), ('BIC', 'bic'),
        ):
            lines.append(f"  {label:<9} {self.best(criterion).size}")

        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SubsetSolution(n={self.n}, k_total={self.k_total}, "
            f"max_size={self.max_size}, best_per_size={self.best_per_size})"
        )
