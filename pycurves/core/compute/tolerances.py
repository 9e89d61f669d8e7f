"""
Numerical settings for the fitters.

All thresholds and iteration controls live in one immutable FitConfig that is
passed explicitly to the fitters, so tests can force edge cases such as a
non-converging logistic fit or an overly strict pivot threshold.
"""

from dataclasses import dataclass, replace
from numbers import Integral

from pycurves.core.exceptions import ValidationError
from pycurves.core.validation import check_positive, check_positive_int


@dataclass(frozen=True)
class FitConfig:
    """
    Settings shared by all fitters.

    Attributes:
        learning_rate: Gradient descent step size (logistic)
        max_iter: Gradient descent iteration cap (logistic)
        tol: Early-stop threshold on both parameter deltas (logistic)
        pivot_tol: Smallest acceptable pivot magnitude (Gaussian elimination)
        degenerate_tol: x has no spread (linear core) when its RMS deviation
            from the mean is at most degenerate_tol * max|x|
        precision: Decimal places used in display equations
        strict_convergence: Raise ConvergenceError instead of returning a
            non-converged logistic fit
    """
    learning_rate: float = 0.01
    max_iter: int = 1000
    tol: float = 1e-6
    pivot_tol: float = 1e-10
    degenerate_tol: float = 1e-12
    precision: int = 2
    strict_convergence: bool = False

    def __post_init__(self):
        check_positive(self.learning_rate, 'learning_rate')
        check_positive_int(self.max_iter, 'max_iter')
        check_positive(self.tol, 'tol')
        check_positive(self.pivot_tol, 'pivot_tol')
        check_positive(self.degenerate_tol, 'degenerate_tol')
        if isinstance(self.precision, bool) or not isinstance(self.precision, Integral) \
                or self.precision < 0:
            raise ValidationError(
                f"precision: expected non-negative integer, got {self.precision!r}"
            )

    def replace(self, **changes) -> 'FitConfig':
        """Return a copy with the given fields changed."""
        return replace(self, **changes)


DEFAULT_CONFIG = FitConfig()
