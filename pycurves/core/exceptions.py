"""
Exception hierarchy for pycurves.

All exceptions inherit from PyCurvesError so callers can catch any
library-specific error with a single clause.

Fitting failures that stem from the data (too few samples, degenerate x,
singular normal equations) never cross the public ``fit*`` boundary: they are
raised inside the backends and turned into ``None`` by the solvers. What does
escape is misuse: malformed input and invalid configuration.
"""


class PyCurvesError(Exception):
    """Base exception for all pycurves errors."""
    pass


class ValidationError(PyCurvesError):
    """
    Input validation failed.

    Raised when user-provided inputs (samples, degree, configuration)
    fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when x and y have different lengths, when a sample array is not
    two columns wide, or when a linear system is not square.
    """
    pass


class NumericalError(PyCurvesError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during a fit, such as
    a vanishing denominator in the closed-form least squares formulas or
    non-finite coefficients.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised by the Gaussian elimination solver when the best available pivot
    falls below the configured tolerance.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        column: Pivot column at which elimination stopped
        pivot: Magnitude of the rejected pivot
        tolerance: Threshold the pivot failed to reach
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        column: int | None = None,
        pivot: float | None = None,
        tolerance: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.column = column
        self.pivot = pivot
        self.tolerance = tolerance


class ConvergenceError(PyCurvesError):
    """
    Iterative algorithm failed to converge.

    Only raised by the logistic fitter when strict convergence is requested;
    by default a non-converged fit is returned with a warning instead.

    Attributes:
        iterations: Number of iterations completed
        final_change: Largest parameter change in the last iteration
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        threshold: float | None = None,
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.threshold = threshold
