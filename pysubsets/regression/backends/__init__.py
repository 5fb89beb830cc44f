"""
Regression backends.

    cpu: QR decomposition reference backend (cpu_qr)
"""

from pysubsets.regression.backends.cpu import CPUQRBackend

__all__ = ["CPUQRBackend"]
