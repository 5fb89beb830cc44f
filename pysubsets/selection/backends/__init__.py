"""
Best-subsets backends.

    cpu: exhaustive enumeration with QR least squares (cpu_exhaustive)
"""

from pysubsets.selection.backends.cpu import CPUExhaustiveBackend

__all__ = ["CPUExhaustiveBackend"]
