"""
Sample set for curve fitting.

A SampleSet holds the (x, y) observations one fit works on. It is built once
at the public boundary, validated there, and trusted everywhere else. Model
filters (positive y for exponential, y in [0, 1] for logistic, ...) derive
new SampleSets from it without touching the original.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycurves.core.datasource import DataSource
from pycurves.core.exceptions import DimensionError
from pycurves.core.validation import (
    check_array, check_finite, check_1d, check_consistent_length,
)


@dataclass(frozen=True, eq=False)
class SampleSet:
    """
    Ordered (x, y) observations.

    Immutable after construction: both arrays are read-only float64.

    Construction:
        SampleSet.from_pairs([(0, 2), (1, 5)])
        SampleSet.from_arrays(x, y)
        SampleSet.from_datasource(ds, x='dose', y='response')
        SampleSet.build(anything_above)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> SampleSet:
        """Build from two 1D array-likes of equal length."""
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        check_finite(x_arr, 'x')
        check_finite(y_arr, 'y')
        return cls._freeze(x_arr, y_arr)

    @classmethod
    def from_pairs(cls, pairs: Sequence[Sequence[float]] | ArrayLike) -> SampleSet:
        """Build from a sequence of (x, y) pairs or an (n, 2) array."""
        arr = check_array(pairs, 'samples')
        if arr.size == 0:
            arr = arr.reshape(0, 2)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise DimensionError(
                f"samples: expected (n, 2) array of (x, y) pairs, got shape {arr.shape}"
            )
        return cls.from_arrays(arr[:, 0], arr[:, 1])

    @classmethod
    def from_datasource(
        cls,
        source: DataSource,
        *,
        x: str,
        y: str,
        drop_nonfinite: bool = False,
    ) -> SampleSet:
        """
        Pick two columns of a DataSource as the x and y variables.

        Args:
            source: The DataSource
            x: Name of the predictor column
            y: Name of the response column
            drop_nonfinite: Drop rows where either value is NaN/Inf (empty
                cells in a spreadsheet) instead of raising

        Raises:
            KeyError: If a column is missing
            ValidationError: If non-finite values remain and
                drop_nonfinite is False
        """
        x_arr = np.asarray(source[x], dtype=np.float64)
        y_arr = np.asarray(source[y], dtype=np.float64)
        if drop_nonfinite:
            keep = np.isfinite(x_arr) & np.isfinite(y_arr)
            x_arr, y_arr = x_arr[keep], y_arr[keep]
        return cls.from_arrays(x_arr, y_arr)

    @classmethod
    def build(cls, samples: Any) -> SampleSet:
        """Accept a SampleSet as-is, otherwise treat the input as pairs."""
        if isinstance(samples, SampleSet):
            return samples
        return cls.from_pairs(samples)

    @classmethod
    def _freeze(cls, x: NDArray, y: NDArray) -> SampleSet:
        x = np.array(x, dtype=np.float64, copy=True)
        y = np.array(y, dtype=np.float64, copy=True)
        x.setflags(write=False)
        y.setflags(write=False)
        return cls(_x=x, _y=y)

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor values (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response values (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of samples."""
        return int(self._x.shape[0])

    def __len__(self) -> int:
        return self.n

    def __iter__(self) -> Iterator[tuple[float, float]]:
        return iter(self.pairs())

    def pairs(self) -> list[tuple[float, float]]:
        """Samples as a list of (x, y) tuples, in input order."""
        return [(float(a), float(b)) for a, b in zip(self._x, self._y)]

    def filter(self, mask: NDArray[np.bool_]) -> SampleSet:
        """Keep the samples where mask is True, preserving order."""
        mask = np.asarray(mask, dtype=bool)
        return self._freeze(self._x[mask], self._y[mask])

    def __repr__(self) -> str:
        return f"SampleSet(n={self.n})"
