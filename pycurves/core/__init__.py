"""
Core infrastructure for pycurves.

Shared abstractions and utilities used by the regression engine.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    datasource: Named-column container feeding SampleSet
    compute: Timing, configuration, linear algebra primitives
"""

from pycurves.core.result import Result
from pycurves.core.datasource import DataSource
from pycurves.core.exceptions import (
    PyCurvesError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    ConvergenceError,
)

__all__ = [
    # Result
    "Result",
    # Data
    "DataSource",
    # Exceptions
    "PyCurvesError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "ConvergenceError",
]
