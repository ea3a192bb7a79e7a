"""
corrboot Monte Carlo methods.

Provides nonparametric bootstrap resampling of a two-variable statistic
(matching R's boot package for ordinary simulation) and pure summaries
of the resulting replicate vector.

Usage:
    from corrboot.montecarlo import bootstrap, confidence_interval, probability_below

    result = bootstrap(df, 'age', 'progressivism', n_sim=1000, seed=314159)
    lower, upper = confidence_interval(result, alpha=0.10)
    p_neg = probability_below(result, 0.0)
"""

from corrboot.montecarlo._common import BootParams, ConfidenceSummary
from corrboot.montecarlo.design import BootstrapDesign
from corrboot.montecarlo.solution import BootstrapSolution
from corrboot.montecarlo.solvers import (
    bootstrap,
    confidence_interval,
    probability_below,
    normal_probability_below,
    normal_interval,
    count_equal,
    summarize,
)

__all__ = [
    "bootstrap",
    "confidence_interval",
    "probability_below",
    "normal_probability_below",
    "normal_interval",
    "count_equal",
    "summarize",
    "BootParams",
    "BootstrapDesign",
    "BootstrapSolution",
    "ConfidenceSummary",
]
