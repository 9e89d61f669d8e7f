"""
Linear algebra kernels for pycurves.

Submodules:
    gauss: Gaussian elimination with partial pivoting
"""

from pycurves.core.compute.linalg.gauss import (
    DEFAULT_PIVOT_TOL,
    GaussResult,
    gauss_solve,
)

__all__ = [
    "DEFAULT_PIVOT_TOL",
    "GaussResult",
    "gauss_solve",
]
