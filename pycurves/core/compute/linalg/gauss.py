"""
Gaussian elimination with partial pivoting.

Solves the square systems produced by the polynomial normal equations
X'X β = X'y. Singularity is decided by a single, configurable pivot
threshold.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycurves.core.exceptions import SingularMatrixError
from pycurves.core.validation import (
    check_array, check_finite, check_square, check_1d, check_consistent_length,
)

DEFAULT_PIVOT_TOL = 1e-10


@dataclass(frozen=True)
class GaussResult:
    """
    Result of Gaussian elimination.

    Attributes:
        solution: Vector x with A x = b
        permutation: Original row index now at each position after pivoting
        n_swaps: Number of row interchanges performed
        determinant: det(A), the signed product of the pivots
    """
    solution: NDArray[np.floating[Any]]
    permutation: tuple[int, ...]
    n_swaps: int
    determinant: float


def gauss_solve(
    A: ArrayLike,
    b: ArrayLike,
    *,
    pivot_tol: float = DEFAULT_PIVOT_TOL,
) -> GaussResult:
    """
    Solve A x = b by Gaussian elimination with partial pivoting.

    Algorithm:
        1. Augment [A | b] (local copy, inputs are never modified)
        2. For each column k, swap in the row at or below k holding the
           largest |value| in that column
        3. Stop with SingularMatrixError if that pivot is below pivot_tol
        4. Eliminate column k from every row below the pivot
        5. Back-substitute from the last row to the first

    Args:
        A: Square coefficient matrix (m x m)
        b: Right-hand side (m,)
        pivot_tol: Smallest acceptable pivot magnitude

    Returns:
        GaussResult with the solution vector and elimination bookkeeping

    Raises:
        DimensionError: If A is not square or b does not match
        ValidationError: If inputs are non-numeric or non-finite
        SingularMatrixError: If a pivot falls below pivot_tol
    """
    A_arr = check_array(A, 'A')
    b_arr = check_array(b, 'b')
    check_square(A_arr, 'A')
    check_1d(b_arr, 'b')
    check_consistent_length(A_arr, b_arr, names=('A', 'b'))
    check_finite(A_arr, 'A')
    check_finite(b_arr, 'b')

    m = A_arr.shape[0]
    aug = np.hstack([A_arr, b_arr.reshape(-1, 1)])
    perm = list(range(m))
    n_swaps = 0
    det = 1.0

    # Forward elimination
    for k in range(m):
        pivot_row = k + int(np.argmax(np.abs(aug[k:, k])))
        pivot = aug[pivot_row, k]
        if abs(pivot) < pivot_tol:
            raise SingularMatrixError(
                f"Matrix is singular to working precision: pivot {abs(pivot):.3e} "
                f"in column {k} is below tolerance {pivot_tol:.1e}",
                matrix_name='A',
                column=k,
                pivot=float(abs(pivot)),
                tolerance=pivot_tol,
            )

        if pivot_row != k:
            aug[[k, pivot_row]] = aug[[pivot_row, k]]
            perm[k], perm[pivot_row] = perm[pivot_row], perm[k]
            n_swaps += 1
            det = -det
        det *= pivot

        for i in range(k + 1, m):
            factor = aug[i, k] / pivot
            if factor != 0.0:
                aug[i, k:] -= factor * aug[k, k:]

    # Back substitution
    x = np.zeros(m, dtype=np.float64)
    for i in range(m - 1, -1, -1):
        x[i] = (aug[i, m] - aug[i, i + 1:m] @ x[i + 1:]) / aug[i, i]

    return GaussResult(
        solution=x,
        permutation=tuple(perm),
        n_swaps=n_swaps,
        determinant=float(det),
    )
