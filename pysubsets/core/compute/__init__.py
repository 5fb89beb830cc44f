"""
Shared numeric infrastructure.

Domain backends live in {domain}/backends/; this package holds what they
share.

Submodules:
    timing: Section timers reported in Result.timing
    tolerances: Conditioning and exact-fit thresholds
    linalg: QR least squares kernel
"""

from pysubsets.core.compute.timing import Timer

__all__ = [
    "Timer",
]
