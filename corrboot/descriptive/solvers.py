"""
Solver functions for descriptive statistics.

Provides correlation() (the hand-rolled Pearson estimator used by the
bootstrap engine) and quantile() (Hyndman & Fan types 1-9).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from corrboot.core.exceptions import InvalidInputError
from corrboot.core.validation import check_array, check_1d, check_finite, check_paired_sample
from corrboot.descriptive._pearson import pearson_r
from corrboot.descriptive._quantile_types import sample_quantile


def correlation(x: ArrayLike, y: ArrayLike) -> float:
    """
    Pearson product-moment correlation of two variables.

    Computed directly from sums of centered products; see
    ``corrboot.descriptive._pearson``. Matches R ``cor(x, y)``.

    Parameters
    ----------
    x, y : array-like
        Equal-length 1D numeric sequences with at least 2 finite values.

    Returns
    -------
    float
        Coefficient in [-1, 1].

    Raises
    ------
    DimensionError
        If x and y differ in length or are not 1D.
    InvalidInputError
        If fewer than 2 observations or non-finite values are given.
    DegenerateInputError
        If x or y has zero variance.
    """
    x_arr, y_arr = check_paired_sample(x, y)
    return pearson_r(x_arr, y_arr)


def quantile(
    x: ArrayLike,
    probs: ArrayLike = (0.0, 0.25, 0.5, 0.75, 1.0),
    *,
    type: int = 7,
) -> NDArray[np.float64]:
    """
    Sample quantiles. Matches R quantile() for all 9 types.

    Parameters
    ----------
    x : array-like
        1D finite numeric data.
    probs : array-like
        Probabilities in [0, 1].
    type : int
        Hyndman & Fan type 1-9. Default 7 (R and NumPy default).

    Returns
    -------
    NDArray
        One value per probability.
    """
    x_arr = check_array(x, 'x')
    check_1d(x_arr, 'x')
    check_finite(x_arr, 'x')

    q_probs = np.atleast_1d(np.asarray(probs, dtype=np.float64))
    if np.any((q_probs < 0.0) | (q_probs > 1.0)) or np.any(np.isnan(q_probs)):
        raise InvalidInputError(
            f"probs must lie in [0, 1], got {q_probs.tolist()}"
        )

    return sample_quantile(np.sort(x_arr), q_probs, type)
