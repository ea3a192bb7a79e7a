"""
Solver dispatch for bootstrap methods.

Provides bootstrap() to produce the empirical sampling distribution and
pure summary functions over it: confidence_interval(), probability_below(),
summarize(), plus labelled normal-approximation counterparts and the raw
count_equal().
"""

from __future__ import annotations

import warnings
from typing import Any, Callable, Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray

from corrboot.core.exceptions import InvalidInputError, ValidationError
from corrboot.core.validation import (
    check_1d,
    check_array,
    check_finite,
    check_min_samples,
    check_probability,
)
from corrboot.descriptive.solvers import correlation
from corrboot.montecarlo import _ci
from corrboot.montecarlo._common import ConfidenceSummary
from corrboot.montecarlo.backends.cpu import CPUBootstrapBackend
from corrboot.montecarlo.design import BootstrapDesign
from corrboot.montecarlo.solution import BootstrapSolution


BackendChoice = Literal['cpu']


def _get_backend(backend: str = 'cpu'):
    """Select backend. The resampling loop is sequential, CPU only."""
    if backend in ('cpu', 'auto'):
        return CPUBootstrapBackend()
    raise ValidationError(f"Unknown backend: {backend!r}. Use 'cpu'.")


def _as_samples(samples: ArrayLike | BootstrapSolution) -> NDArray[np.floating[Any]]:
    """Extract and validate a replicate vector."""
    if isinstance(samples, BootstrapSolution):
        return samples.samples
    arr = check_array(samples, 'samples')
    check_1d(arr, 'samples')
    check_min_samples(arr, 1, 'samples')
    check_finite(arr, 'samples')
    return arr


def _check_threshold(threshold: Any) -> float:
    try:
        value = float(threshold)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"threshold must be a real number: {e}") from e
    if np.isnan(value):
        raise InvalidInputError("threshold must not be NaN")
    return value


def bootstrap(
    data,
    col_x: str,
    col_y: str,
    estimator: Callable = correlation,
    n_sim: int = 1000,
    *,
    seed: int | None = None,
    backend: BackendChoice = 'cpu',
) -> BootstrapSolution:
    """
    Nonparametric bootstrap of a two-variable statistic.

    Applies ``estimator`` once to the original data (point estimate),
    then ``n_sim`` times to datasets of the same size whose rows are drawn
    uniformly with replacement. One generator, seeded from ``seed``, drives
    every draw in loop order, so identical arguments reproduce identical
    samples.

    Parameters
    ----------
    data : DataSource, DataFrame, mapping or sequence of row mappings
        Dataset holding both columns.
    col_x, col_y : str
        Column names of the two variables.
    estimator : callable
        fn(x, y) -> float. Default: Pearson correlation.
    n_sim : int
        Number of bootstrap replicates (>= 1).
    seed : int or None
        Random seed. None draws fresh OS entropy (not reproducible).
    backend : str
        'cpu'.

    Returns
    -------
    BootstrapSolution

    Raises
    ------
    UnknownColumnError
        If a column is missing.
    InvalidInputError
        If n_sim < 1, fewer than 2 rows, mismatched or non-finite columns.
    DegenerateInputError
        If the estimator finds zero variance, either on the original data
        or on any replicate (``err.replicate`` gives its index). Degenerate
        replicates are never skipped or redrawn.
    """
    design = BootstrapDesign.for_bootstrap(
        data, col_x, col_y, estimator, n_sim, seed=seed,
    )
    be = _get_backend(backend)
    result = be.solve(design)
    return BootstrapSolution(_result=result, _design=design)


def confidence_interval(
    samples: ArrayLike | BootstrapSolution,
    alpha: float = 0.05,
    *,
    type: int = 7,
) -> tuple[float, float]:
    """
    Two-sided (1 - alpha) percentile confidence interval.

    The alpha/2 and 1 - alpha/2 sample quantiles of the replicates, using
    linear interpolation between order statistics (type 7, as R and NumPy).

    Warns (RuntimeWarning) when fewer than one replicate falls in each
    tail, i.e. n_sim * alpha / 2 < 1: the bounds are then interpolations
    of the extreme order statistics.
    """
    arr = _as_samples(samples)
    alpha = check_probability(alpha, 'alpha')

    if len(arr) * alpha / 2.0 < 1.0:
        warnings.warn(
            f"Only {len(arr)} replicates for alpha={alpha}: fewer than one "
            f"replicate per tail, interval bounds are extreme order statistics",
            RuntimeWarning,
            stacklevel=2,
        )

    return _ci.percentile_interval(arr, alpha, type)


def probability_below(
    samples: ArrayLike | BootstrapSolution,
    threshold: float = 0.0,
) -> float:
    """
    Empirical probability that the statistic lies below ``threshold``.

    count(samples < threshold) / n_sim, in [0, 1]. No distributional
    assumption is made.
    """
    arr = _as_samples(samples)
    return _ci.fraction_below(arr, _check_threshold(threshold))


def normal_probability_below(
    samples: ArrayLike | BootstrapSolution,
    threshold: float = 0.0,
) -> float:
    """
    Normal APPROXIMATION of P(statistic < threshold).

    Fits a normal distribution to the replicates (mean, sd with ddof=1)
    and evaluates its CDF at ``threshold``. For comparison with
    probability_below() only; it assumes the normality the bootstrap
    exists to avoid.
    """
    arr = _as_samples(samples)
    return _ci.normal_approx_below(arr, _check_threshold(threshold))


def normal_interval(
    samples: ArrayLike | BootstrapSolution,
    alpha: float = 0.05,
) -> tuple[float, float]:
    """
    Normal APPROXIMATION interval: mean +/- z_{1-alpha/2} * sd of replicates.

    For comparison with confidence_interval() only.
    """
    arr = _as_samples(samples)
    alpha = check_probability(alpha, 'alpha')
    return _ci.normal_approx_interval(arr, alpha)


def count_equal(
    samples: ArrayLike | BootstrapSolution,
    value: float = 0.0,
) -> int:
    """
    Raw number of replicates exactly equal to ``value``.

    For a continuous statistic this is expected to be ~0 and is NOT a
    confidence measure. Exposed as a count only, never as a probability.
    """
    arr = _as_samples(samples)
    return _ci.exact_matches(arr, _check_threshold(value))


def summarize(
    solution: BootstrapSolution,
    alpha: float = 0.05,
    threshold: float = 0.0,
) -> ConfidenceSummary:
    """
    Build the ConfidenceSummary of a bootstrap run.

    The point estimate comes from the original data, not from the mean
    of the replicates.
    """
    if not isinstance(solution, BootstrapSolution):
        raise ValidationError(
            f"summarize() expects a BootstrapSolution, got {type(solution).__name__}"
        )

    alpha = check_probability(alpha, 'alpha')
    threshold = _check_threshold(threshold)
    arr = solution.samples

    lower, upper = confidence_interval(arr, alpha)
    normal_lower, normal_upper = _ci.normal_approx_interval(arr, alpha)

    return ConfidenceSummary(
        point_estimate=solution.point_estimate,
        lower=lower,
        upper=upper,
        conf_level=1.0 - alpha,
        threshold=threshold,
        prob_below=_ci.fraction_below(arr, threshold),
        normal_prob_below=_ci.normal_approx_below(arr, threshold),
        normal_lower=normal_lower,
        normal_upper=normal_upper,
        n_equal=_ci.exact_matches(arr, threshold),
        n_sim=solution.n_sim,
    )
