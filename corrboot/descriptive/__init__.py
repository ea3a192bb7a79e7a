"""
Descriptive statistics module.

Public API:
    correlation(x, y)  - Pearson correlation from centered sums
    quantile(x)        - Quantiles (all 9 Hyndman & Fan / R types)
"""

from corrboot.descriptive.solvers import correlation, quantile

__all__ = [
    "correlation",
    "quantile",
]
