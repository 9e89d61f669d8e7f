"""
Shared compute infrastructure for pycurves.

IMPORTANT: This is NOT where the fitters live. Those go in
regression/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: FitConfig, the numerical settings passed to every fitter
    linalg: Linear algebra kernels (Gaussian elimination)
"""

from pycurves.core.compute.timing import Timer, timed
from pycurves.core.compute.tolerances import FitConfig, DEFAULT_CONFIG

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Configuration
    "FitConfig",
    "DEFAULT_CONFIG",
]
