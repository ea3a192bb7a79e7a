"""
Universal DataSource for corrboot.

DataSource is the "I have data" abstraction: named numeric columns held
in memory, all of the same length. It does not know which analysis will
consume it. Reading files is the caller's job; DataSource only wraps data
that is already loaded.

Usage:
    from corrboot import DataSource

    ds = DataSource.from_arrays(age=age, progressivism=prog)
    ds = DataSource.from_dataframe(df)
    ds = DataSource.from_records([{'age': 31, 'progressivism': 4.2}, ...])
    ds = DataSource.build(df, columns=["age", "progressivism"])

    # Access columns
    ds.keys()  # frozenset({'age', 'progressivism'})
    age = ds['age']
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from corrboot.core.exceptions import (
    DimensionError,
    UnknownColumnError,
    ValidationError,
)
from corrboot.core.validation import check_array

if TYPE_CHECKING:
    import pandas as pd


@dataclass
class DataSource:
    """
    Universal data container. Domain-agnostic.

    Construct via factory classmethods, not directly. Column order is the
    order in which columns were supplied.
    """
    _data: dict[str, NDArray[np.floating[Any]]]
    _metadata: dict[str, Any] = field(default_factory=dict)

    # === Column Access ===

    def keys(self) -> frozenset[str]:
        """Return the names of all available columns."""
        return frozenset(self._data.keys())

    @property
    def columns(self) -> tuple[str, ...]:
        """Column names in insertion order."""
        return tuple(self._data.keys())

    def __getitem__(self, key: str) -> NDArray[np.floating[Any]]:
        """
        Access a named column.

        Raises:
            UnknownColumnError: If key not found, listing available columns

        Example:
            >>> ds = DataSource.from_arrays(age=age)
            >>> ds['income']  # UnknownColumnError: "DataSource has no column 'income'. ..."
        """
        if key not in self._data:
            available = self.columns
            raise UnknownColumnError(
                f"DataSource has no column {key!r}. Available: {list(available)}",
                column=key,
                available=available,
            )
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        """Check if a column exists."""
        return key in self._data

    def __len__(self) -> int:
        return self.n_observations

    def select(self, columns: Sequence[str]) -> DataSource:
        """
        New DataSource holding only ``columns``, in the order given.

        Raises:
            UnknownColumnError: If a name is not a column
        """
        storage = {col: self[col] for col in _unique(columns)}
        return type(self)(
            _data=storage,
            _metadata={**self._metadata, 'columns': list(storage.keys())},
        )

    # === Properties ===

    @property
    def n_observations(self) -> int:
        """Number of statistical units (rows)."""
        return self._metadata.get('n_observations', 0)

    @property
    def metadata(self) -> dict[str, Any]:
        """Domain-agnostic metadata."""
        return self._metadata.copy()

    def __repr__(self) -> str:
        return (
            f"DataSource(n={self.n_observations}, "
            f"columns={list(self.columns)})"
        )

    # === Factory Methods ===

    @classmethod
    def from_arrays(cls, **named_arrays) -> DataSource:
        """Construct from named 1D array-likes of equal length."""
        return cls._build(named_arrays, source='arrays')

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Any],
        *,
        columns: Sequence[str] | None = None,
    ) -> DataSource:
        """
        Construct from a mapping of column name to values.

        With ``columns``, only those keys are read; other entries (text
        labels, flags) are never converted.
        """
        if columns is None:
            return cls._build(dict(mapping), source='mapping')
        available = tuple(str(k) for k in mapping.keys())
        storage = {}
        for col in _unique(columns):
            if col not in mapping:
                raise UnknownColumnError(
                    f"Mapping has no column {col!r}. Available: {list(available)}",
                    column=col,
                    available=available,
                )
            storage[col] = mapping[col]
        return cls._build(storage, source='mapping')

    @classmethod
    def from_records(
        cls,
        records: Sequence[Mapping[str, Any]],
        *,
        columns: Sequence[str] | None = None,
    ) -> DataSource:
        """
        Construct from a sequence of row mappings.

        Without ``columns`` every row must provide the same set of keys and
        the first row fixes the column order. With ``columns`` only those
        keys are read, and every row must provide them.
        """
        if len(records) == 0:
            raise ValidationError("records: need at least one row")

        if columns is None:
            selected = list(records[0].keys())
            expected = set(selected)
            for i, row in enumerate(records):
                if set(row.keys()) != expected:
                    missing = sorted(expected - set(row.keys()))
                    extra = sorted(set(row.keys()) - expected)
                    raise DimensionError(
                        f"records: row {i} has inconsistent columns "
                        f"(missing={missing}, extra={extra})"
                    )
        else:
            selected = _unique(columns)
            first = records[0]
            for col in selected:
                if col not in first:
                    available = tuple(str(k) for k in first.keys())
                    raise UnknownColumnError(
                        f"records have no column {col!r}. Available: {list(available)}",
                        column=col,
                        available=available,
                    )
            for i, row in enumerate(records):
                missing = [col for col in selected if col not in row]
                if missing:
                    raise DimensionError(
                        f"records: row {i} has inconsistent columns "
                        f"(missing={missing})"
                    )

        storage = {col: [row[col] for row in records] for col in selected}
        return cls._build(storage, source='records')

    @classmethod
    def from_dataframe(
        cls,
        df: 'pd.DataFrame',
        *,
        columns: Sequence[str] | None = None,
        source_path: str | None = None,
    ) -> DataSource:
        """
        Construct from pandas DataFrame.

        Pass ``columns`` to keep only the numeric columns of interest when
        the frame also holds text or categorical fields.
        """
        storage: dict[str, Any] = {}

        selected = df.columns if columns is None else _unique(columns)
        for col in selected:
            if col not in df.columns:
                raise UnknownColumnError(
                    f"DataFrame has no column {col!r}. Available: {list(df.columns)}",
                    column=str(col),
                    available=tuple(str(c) for c in df.columns),
                )
            storage[str(col)] = df[col].to_numpy()

        ds = cls._build(storage, source='dataframe')
        if source_path:
            ds._metadata['source_path'] = source_path
        return ds

    @classmethod
    def build(cls, data: Any, *, columns: Sequence[str] | None = None) -> DataSource:
        """
        Convenience factory that dispatches on the type of ``data``.

        ``columns`` restricts intake to the named columns, so a dataset may
        carry non-numeric fields that the analysis never reads. A missing
        name raises UnknownColumnError before anything is computed.

        Examples:
            DataSource.build(ds)                        # returned unchanged
            DataSource.build(df, columns=['age', 'x'])  # from_dataframe
            DataSource.build({'a': [...]})              # from_mapping
            DataSource.build([{...}, ...])              # from_records
        """
        if isinstance(data, DataSource):
            return data if columns is None else data.select(columns)
        if hasattr(data, 'columns') and hasattr(data, 'to_numpy'):
            return cls.from_dataframe(data, columns=columns)
        if isinstance(data, Mapping):
            return cls.from_mapping(data, columns=columns)
        if isinstance(data, Sequence) and not isinstance(data, (str, bytes)):
            if len(data) > 0 and isinstance(data[0], Mapping):
                return cls.from_records(data, columns=columns)
        raise ValidationError(
            f"Cannot build a DataSource from {type(data).__name__}. "
            f"Pass a DataFrame, a mapping of columns, or a sequence of row mappings."
        )

    @classmethod
    def _build(cls, columns: dict[str, Any], *, source: str) -> DataSource:
        """Internal builder with validation."""
        if not columns:
            raise ValidationError("DataSource needs at least one column")

        storage: dict[str, NDArray] = {}
        n_obs: int | None = None
        for name, values in columns.items():
            arr = check_array(values, str(name))
            if arr.ndim != 1:
                raise DimensionError(
                    f"{name}: expected 1D column, got {arr.ndim}D with shape {arr.shape}"
                )
            if n_obs is None:
                n_obs = arr.shape[0]
            elif arr.shape[0] != n_obs:
                raise DimensionError(
                    f"Inconsistent column lengths: {name}={arr.shape[0]}, "
                    f"expected {n_obs}"
                )
            storage[str(name)] = arr

        return cls(
            _data=storage,
            _metadata={
                'n_observations': n_obs,
                'source': source,
                'columns': list(storage.keys()),
            },
        )


def _unique(columns: Sequence[str]) -> list[str]:
    """Column names in first-seen order, duplicates dropped."""
    return list(dict.fromkeys(columns))
