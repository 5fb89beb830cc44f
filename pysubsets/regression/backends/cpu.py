"""
CPU backend for ordinary least squares.

One QR least squares fit through the shared kernel. Used to report
coefficients, standard errors and p-values for a subset chosen by the
best-subsets search; full-rank designs only, like R's lm() without
pivoting.
"""

from typing import Any

import numpy as np

from pysubsets.core.result import Result
from pysubsets.core.compute.timing import Timer
from pysubsets.core.compute.linalg.qr import qr_lstsq
from pysubsets.regression.design import RegressionDesign
from pysubsets.regression.solution import LinearParams


class CPUQRBackend:
    """Backend protocol implementation for RegressionDesign -> LinearParams."""

    @property
    def name(self) -> str:
        return 'cpu_qr'

    def solve(self, design: RegressionDesign) -> Result[LinearParams]:
        """
        Raises:
            SingularMatrixError: If X is rank-deficient
        """
        y = design.y

        with Timer() as timer:
            with timer.section('solve'):
                lsq = qr_lstsq(design.X, y, check_rank=True, name='X')
            with timer.section('statistics'):
                tss = float(np.sum((y - np.mean(y)) ** 2))

        params = LinearParams(
            coefficients=lsq.coefficients,
            residuals=lsq.residuals,
            fitted_values=lsq.fitted_values,
            rss=lsq.rss,
            tss=tss,
            rank=lsq.rank,
            df_residual=design.n - lsq.rank,
        )

        info: dict[str, Any] = {'method': 'qr', 'rank': lsq.rank}

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
        )
