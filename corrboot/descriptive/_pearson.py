"""
Product-moment (Pearson) correlation computed from centered sums.

No covariance, standard deviation or correlation primitive is used: the
coefficient is assembled from the two passes of the textbook formula

    r = sum((x - x_bar) * (y - y_bar))
        / sqrt(sum((x - x_bar)^2) * sum((y - y_bar)^2))

in float64. Each vector is first divided by its largest magnitude; r is
scale invariant, and the rescaling keeps the sums of squares finite and
nonzero for any finite input, however large or small its magnitude.
Agrees with numpy.corrcoef and R cor() to rounding error.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from corrboot.core.exceptions import DegenerateInputError


def pearson_r(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
) -> float:
    """
    Pearson correlation of two validated float64 vectors.

    Callers are responsible for validation (equal length, n >= 2, finite).
    The result is exactly symmetric in x and y.

    Raises:
        DegenerateInputError: If either vector has zero variance.
    """
    n = x.shape[0]

    # A constant column can leave rounding residue in sxx when its mean is
    # not exactly representable, so constancy is checked directly too.
    x_flat = bool(np.all(x == x[0]))
    y_flat = bool(np.all(y == y[0]))

    if not x_flat:
        x = x / np.max(np.abs(x))
    if not y_flat:
        y = y / np.max(np.abs(y))

    # Pass 1: means
    x_bar = np.sum(x) / n
    y_bar = np.sum(y) / n

    # Pass 2: centered sums
    x_c = x - x_bar
    y_c = y - y_bar
    sxx = np.sum(x_c * x_c)
    syy = np.sum(y_c * y_c)
    sxy = np.sum(x_c * y_c)

    x_flat = x_flat or sxx == 0.0
    y_flat = y_flat or syy == 0.0

    if x_flat or y_flat:
        if x_flat and y_flat:
            variable = 'x and y'
        elif x_flat:
            variable = 'x'
        else:
            variable = 'y'
        raise DegenerateInputError(
            f"Correlation undefined: {variable} has zero variance "
            f"across {n} observations",
            variable=variable,
            n=n,
        )

    return float(sxy / np.sqrt(sxx * syy))
