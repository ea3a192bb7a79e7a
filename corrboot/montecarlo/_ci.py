"""
Summaries of a bootstrap replicate vector.

Nonparametric:
- percentile interval: Q(alpha/2), Q(1 - alpha/2), type-7 quantiles
- probability below: count(samples < threshold) / n_sim

Normal approximation (comparison only, assumes normal replicates):
- mean +/- z * sd interval
- Phi((threshold - mean) / sd)

All functions here are pure and take a 1D float64 array; argument
validation lives in montecarlo.solvers.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from corrboot.descriptive._quantile_types import sample_quantile


def percentile_interval(
    samples: NDArray,
    alpha: float,
    qtype: int = 7,
) -> tuple[float, float]:
    """
    Percentile bootstrap CI.

    CI = [Q(alpha/2), Q(1-alpha/2)]
    """
    q = sample_quantile(
        np.sort(samples),
        np.array([alpha / 2.0, 1.0 - alpha / 2.0]),
        qtype,
    )
    return float(q[0]), float(q[1])


def fraction_below(samples: NDArray, threshold: float) -> float:
    """Empirical P(stat < threshold). Strict inequality."""
    return float(np.count_nonzero(samples < threshold)) / float(len(samples))


def exact_matches(samples: NDArray, value: float) -> int:
    """Raw number of replicates exactly equal to ``value``."""
    return int(np.count_nonzero(samples == value))


def _normal_moments(samples: NDArray) -> tuple[float, float]:
    mean = float(np.mean(samples))
    sd = float(np.std(samples, ddof=1)) if len(samples) > 1 else float('nan')
    return mean, sd


def normal_approx_below(samples: NDArray, threshold: float) -> float:
    """
    Normal-approximation P(stat < threshold).

    Phi((threshold - mean) / sd). With sd == 0 this degenerates to a step
    at the mean; with a single replicate (sd undefined) it is NaN.
    """
    mean, sd = _normal_moments(samples)
    if np.isnan(sd):
        return float('nan')
    if sd == 0.0:
        return 1.0 if threshold > mean else 0.0
    return float(sp_stats.norm.cdf(threshold, loc=mean, scale=sd))


def normal_approx_interval(samples: NDArray, alpha: float) -> tuple[float, float]:
    """
    Normal-approximation CI centered on the replicate mean.

    CI = [mean + z_{alpha/2} * sd, mean + z_{1-alpha/2} * sd]
    """
    mean, sd = _normal_moments(samples)
    z_lo = sp_stats.norm.ppf(alpha / 2.0)
    z_hi = sp_stats.norm.ppf(1.0 - alpha / 2.0)
    return float(mean + z_lo * sd), float(mean + z_hi * sd)
