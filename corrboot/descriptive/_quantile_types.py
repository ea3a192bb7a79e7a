"""
Sample quantile definitions 1-9 (Hyndman & Fan, 1996).

Type 7 is the default of R's quantile() and of numpy.quantile: linear
interpolation between order statistics with plotting position
p(k) = (k - 1) / (n - 1). Percentile bootstrap intervals use it.

Types 1-3 are discontinuous (step functions).
Types 4-9 are continuous and differ only in the plotting-position
constants (a, b) of  m = a + p * (n + 1 - a - b).

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import NDArray

from corrboot.core.exceptions import InvalidInputError

# R's fuzz factor: 4 * machine epsilon
_FUZZ = 4.0 * np.finfo(np.float64).eps

_CONTINUOUS_AB: dict[int, tuple[float, float]] = {
    4: (0.0, 1.0),
    5: (0.5, 0.5),
    6: (0.0, 0.0),
    7: (1.0, 1.0),
    8: (1.0 / 3.0, 1.0 / 3.0),
    9: (3.0 / 8.0, 3.0 / 8.0),
}


def sample_quantile(x_sorted: NDArray, probs: NDArray, qtype: int = 7) -> NDArray:
    """
    Quantiles of a sorted, NaN-free 1D array.

    Parameters
    ----------
    x_sorted : NDArray
        1D array sorted ascending.
    probs : NDArray
        Probabilities in [0, 1].
    qtype : int
        Hyndman & Fan type 1-9.

    Returns
    -------
    NDArray
        One quantile per probability.
    """
    if qtype not in range(1, 10):
        raise InvalidInputError(f"Quantile type must be 1-9, got {qtype}")

    probs = np.asarray(probs, dtype=np.float64)
    n = len(x_sorted)
    if n == 0:
        return np.full(len(probs), np.nan)
    if n == 1:
        return np.full(len(probs), x_sorted[0])

    if qtype <= 3:
        return np.array([_discontinuous(x_sorted, p, qtype) for p in probs])

    a, b = _CONTINUOUS_AB[qtype]
    out = np.empty(len(probs), dtype=np.float64)
    for i, p in enumerate(probs):
        # 1-indexed position of the quantile among the order statistics
        m = a + p * (n + 1.0 - a - b)
        j = int(math.floor(m + _FUZZ))
        h = m - j
        if abs(h) < _FUZZ:
            h = 0.0
        elif abs(h - 1.0) < _FUZZ:
            h = 1.0

        if j < 1:
            out[i] = x_sorted[0]
        elif j >= n:
            out[i] = x_sorted[n - 1]
        elif h == 0.0:
            out[i] = x_sorted[j - 1]
        else:
            out[i] = (1.0 - h) * x_sorted[j - 1] + h * x_sorted[j]
    return out


def _discontinuous(x_sorted: NDArray, p: float, qtype: int) -> float:
    """Step-function quantile types 1 (inverse ECDF), 2 (averaged), 3 (nearest even)."""
    n = len(x_sorted)
    np_ = n * p - 0.5 if qtype == 3 else n * p
    j = int(math.floor(np_ + _FUZZ))
    on_boundary = abs(np_ - j) < _FUZZ

    if qtype == 1:
        h = 0.0 if on_boundary else 1.0
    elif qtype == 2:
        h = 0.5 if on_boundary else 1.0
    else:
        h = 0.0 if (on_boundary and j % 2 == 0) else 1.0

    # Order statistic j (1-indexed) and its successor, clamped to the sample
    lo = x_sorted[min(max(j - 1, 0), n - 1)]
    hi = x_sorted[min(max(j, 0), n - 1)]
    return float((1.0 - h) * lo + h * hi)
