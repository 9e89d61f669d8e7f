"""
Generic result container for pycurves computations.

Every backend returns its parameter payload wrapped in a Result. The envelope
carries the diagnostics a caller may want to inspect after a fit: how the
fit was computed, whether it converged, how long each stage took, and any
non-fatal issues encountered along the way.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (converged, iterations, n_dropped)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a fit cannot be altered after creation
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a single fit.

    Type Parameters:
        P: The parameter payload type, CurveParams for every curve backend

    Attributes:
        params: CurveParams (coefficients, fitted values, residuals, metrics,
            display equation and predictor)
        info: Structured metadata (method, convergence, filtering)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> # Closed-form fit
        >>> Result(
        ...     params=curve_params,
        ...     info={'method': 'closed_form', 'n_dropped': 0},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='linear'
        ... )

        >>> # Iterative fit
        >>> Result(
        ...     params=curve_params,
        ...     info={'method': 'gradient_descent', 'converged': False,
        ...           'iterations': 1000},
        ...     timing=None,
        ...     backend_name='logistic',
        ...     warnings=('gradient descent did not converge ...',),
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
