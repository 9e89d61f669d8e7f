"""
Column container for pycurves.

DataSource is the "I have data" abstraction: named numeric columns of equal
length. It doesn't know it will feed a regression. SampleSet picks two of
its columns as x and y.

Usage:
    from pycurves import DataSource

    ds = DataSource.from_arrays(time=t, load=load)
    ds = DataSource.from_dataframe(df)

    ds.keys()  # frozenset({'time', 'load'})
    samples = SampleSet.from_datasource(ds, x='time', y='load')

Reading files is left to the caller (pandas.read_csv, json, ...).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike

from pycurves.core.exceptions import ValidationError
from pycurves.core.validation import check_array, check_1d, check_consistent_length

if TYPE_CHECKING:
    import pandas as pd


@dataclass(frozen=True)
class DataSource:
    """
    Named numeric columns. Construct via the factory classmethods.
    """
    _data: dict[str, Any]
    _metadata: dict[str, Any] = field(default_factory=dict)

    def keys(self) -> frozenset[str]:
        """Return the names of all available columns."""
        return frozenset(self._data.keys())

    def __getitem__(self, key: str) -> Any:
        """
        Access a named column.

        Raises:
            KeyError: If key not found, with a message listing available keys
        """
        if key not in self._data:
            available = sorted(self.keys())
            raise KeyError(
                f"DataSource has no column '{key}'. Available: {available}"
            )
        return self._data[key]

    def __contains__(self, key: str) -> bool:
        return key in self._data

    @property
    def n_observations(self) -> int:
        """Number of rows."""
        return self._metadata.get('n_observations', 0)

    @property
    def metadata(self) -> dict[str, Any]:
        return self._metadata.copy()

    @classmethod
    def from_arrays(cls, **named_arrays: ArrayLike) -> DataSource:
        """Construct from 1D array-likes given as keyword arguments."""
        if not named_arrays:
            raise ValidationError("DataSource.from_arrays: at least one column required")

        storage: dict[str, Any] = {}
        for name, arr in named_arrays.items():
            column = check_array(arr, name)
            check_1d(column, name)
            column.setflags(write=False)
            storage[name] = column

        columns = list(storage.values())
        check_consistent_length(*columns, names=tuple(storage.keys()))

        return cls(
            _data=storage,
            _metadata={'n_observations': columns[0].shape[0], 'source': 'arrays'},
        )

    @classmethod
    def from_dataframe(cls, df: 'pd.DataFrame') -> DataSource:
        """
        Construct from a pandas DataFrame.

        Only numeric columns are kept; text columns such as labels or dates
        are skipped since they cannot act as a regression variable.
        """
        import pandas as pd

        storage: dict[str, Any] = {}
        skipped: list[str] = []
        for col in df.columns:
            if pd.api.types.is_numeric_dtype(df[col]) and not pd.api.types.is_bool_dtype(df[col]):
                column = df[col].to_numpy(dtype=np.float64)
                column.setflags(write=False)
                storage[str(col)] = column
            else:
                skipped.append(str(col))

        return cls(
            _data=storage,
            _metadata={
                'n_observations': len(df),
                'source': 'dataframe',
                'columns': list(storage.keys()),
                'skipped_columns': skipped,
            },
        )
