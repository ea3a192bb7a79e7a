"""
Design class for bootstrap resampling.

BootstrapDesign encapsulates every input the backend needs: the two
analysed columns, the estimator, the replicate count and the seed.
Immutable, validated at construction so that no invalid run ever starts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from corrboot.core.datasource import DataSource
from corrboot.core.exceptions import InvalidInputError
from corrboot.core.validation import check_paired_sample, check_positive_int


@dataclass(frozen=True)
class BootstrapDesign:
    """
    Frozen design for paired-variable bootstrap resampling.

    Attributes:
        x: First variable, shape (n,), read-only copy.
        y: Second variable, shape (n,), read-only copy.
        col_x: Column name of x in the source dataset.
        col_y: Column name of y in the source dataset.
        estimator: fn(x, y) -> float, applied to original and resampled data.
        n_sim: Number of bootstrap replicates.
        seed: Seed of the run's random generator, or None for OS entropy.
    """
    x: NDArray[np.floating[Any]]
    y: NDArray[np.floating[Any]]
    col_x: str
    col_y: str
    estimator: Callable
    n_sim: int
    seed: int | None

    @property
    def n(self) -> int:
        """Number of observations (rows) per resample."""
        return self.x.shape[0]

    @classmethod
    def for_bootstrap(
        cls,
        data,
        col_x: str,
        col_y: str,
        estimator: Callable,
        n_sim: int = 1000,
        *,
        seed: int | None = None,
    ) -> BootstrapDesign:
        """
        Create a bootstrap design with validation.

        Args:
            data: DataSource, pandas DataFrame, mapping of columns, or
                sequence of row mappings.
            col_x: Name of the first column.
            col_y: Name of the second column.
            estimator: Function of two equal-length float64 arrays.
            n_sim: Number of bootstrap replicates. Must be >= 1.
            seed: Random seed.

        Returns:
            Validated BootstrapDesign.

        Raises:
            UnknownColumnError: If a column is absent from ``data``.
            InvalidInputError: If sizes, values or n_sim are invalid.
        """
        source = DataSource.build(data, columns=(col_x, col_y))
        n_sim = check_positive_int(n_sim, 'n_sim')

        if not callable(estimator):
            raise InvalidInputError(
                f"estimator must be callable, got {type(estimator).__name__}"
            )

        if seed is not None:
            if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
                raise InvalidInputError(
                    f"seed must be an integer or None, got {type(seed).__name__}"
                )
            if seed < 0:
                raise InvalidInputError(f"seed must be non-negative, got {seed}")
            seed = int(seed)

        # Column lookup raises UnknownColumnError with the available names
        x_arr, y_arr = check_paired_sample(
            source[col_x], source[col_y], names=(col_x, col_y),
        )

        x_arr = x_arr.copy()
        y_arr = y_arr.copy()
        x_arr.flags.writeable = False
        y_arr.flags.writeable = False

        return cls(
            x=x_arr,
            y=y_arr,
            col_x=col_x,
            col_y=col_y,
            estimator=estimator,
            n_sim=n_sim,
            seed=seed,
        )
