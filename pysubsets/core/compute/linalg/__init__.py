"""
Linear algebra primitives.

Provides the QR factorization and least squares kernel shared by the
regression and selection backends.
"""

from pysubsets.core.compute.linalg.qr import (
    LeastSquaresFit,
    QRFactor,
    qr_factor,
    qr_lstsq,
)

__all__ = [
    "LeastSquaresFit",
    "QRFactor",
    "qr_factor",
    "qr_lstsq",
]
