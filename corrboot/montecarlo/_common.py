"""
Common data structures for bootstrap results.

BootParams is the payload wrapped by Result[P] and exposed through
BootstrapSolution. ConfidenceSummary is the read-only view derived from
it on demand.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class BootParams:
    """
    Parameter payload for bootstrap results.

    Mirrors R's boot object for a single statistic:
    - point_estimate: statistic on the original, unresampled data (t0)
    - samples: replicates in draw order (t), read-only
    - bias: mean(samples) - point_estimate
    - se: sd(samples), NaN when n_sim == 1
    """
    point_estimate: float
    samples: NDArray[np.floating[Any]]         # shape (n_sim,)
    n_sim: int
    bias: float
    se: float


@dataclass(frozen=True)
class ConfidenceSummary:
    """
    Derived, read-only summary of one bootstrap run.

    The percentile interval and ``prob_below`` are the nonparametric
    quantities. ``normal_*`` fields assume the replicates are normal and
    are approximations kept for comparison only. ``n_equal`` is a raw
    count of replicates exactly equal to the threshold; for a continuous
    statistic it is expected to be ~0 and carries no confidence meaning.
    """
    point_estimate: float
    lower: float
    upper: float
    conf_level: float
    threshold: float
    prob_below: float
    normal_prob_below: float
    normal_lower: float
    normal_upper: float
    n_equal: int
    n_sim: int

    @property
    def prob_above(self) -> float:
        """Fraction of replicates at or above the threshold."""
        return 1.0 - self.prob_below

    def __str__(self) -> str:
        pct = f"{self.conf_level * 100:g}%"
        return (
            f"estimate = {self.point_estimate:.5f}, "
            f"{pct} percentile CI = ({self.lower:.5f}, {self.upper:.5f}), "
            f"P(stat < {self.threshold:g}) = {self.prob_below:.4f} "
            f"[n_sim = {self.n_sim}]"
        )
