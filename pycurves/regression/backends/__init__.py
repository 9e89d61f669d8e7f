"""
Curve-fitting backends, one per model kind.

Available backends:
    LinearBackend: closed-form least squares (the linear core)
    PolynomialBackend: normal equations solved by Gaussian elimination
    ExponentialBackend, LogarithmicBackend, PowerBackend: linearized fits
    LogisticBackend: gradient descent on the mean log-loss
"""

from pycurves.regression.backends.base import CurveBackend, InsufficientDataError
from pycurves.regression.backends.linear import LinearBackend
from pycurves.regression.backends.polynomial import PolynomialBackend
from pycurves.regression.backends.transformed import (
    ExponentialBackend,
    LogarithmicBackend,
    PowerBackend,
)
from pycurves.regression.backends.logistic import LogisticBackend

__all__ = [
    "CurveBackend",
    "InsufficientDataError",
    "LinearBackend",
    "PolynomialBackend",
    "ExponentialBackend",
    "LogarithmicBackend",
    "PowerBackend",
    "LogisticBackend",
]
