"""
corrboot: Pearson correlation with nonparametric bootstrap uncertainty.

Computes the product-moment correlation from centered sums and estimates
its sampling distribution by resampling rows with replacement, giving
percentile confidence intervals and directional confidence statements.

Submodules:
    core: DataSource, Result envelope, exceptions, validation
    descriptive: correlation() and quantile()
    montecarlo: bootstrap() and summaries of its replicates
    survey: analyze_pairs() over the survey variable pairs
"""

__version__ = "0.1.0"

from corrboot.core import (
    DataSource,
    Result,
    CorrbootError,
    ValidationError,
    InvalidInputError,
    DimensionError,
    UnknownColumnError,
    NumericalError,
    DegenerateInputError,
)
from corrboot.descriptive import correlation, quantile
from corrboot.montecarlo import (
    BootstrapSolution,
    ConfidenceSummary,
    bootstrap,
    confidence_interval,
    probability_below,
    normal_probability_below,
    normal_interval,
    count_equal,
    summarize,
)
from corrboot.survey import SURVEY_PAIRS, PairAnalysis, analyze_pairs, format_report

__all__ = [
    "__version__",
    # Data and results
    "DataSource",
    "Result",
    "BootstrapSolution",
    "ConfidenceSummary",
    "PairAnalysis",
    # Estimation
    "correlation",
    "quantile",
    "bootstrap",
    "confidence_interval",
    "probability_below",
    "normal_probability_below",
    "normal_interval",
    "count_equal",
    "summarize",
    "analyze_pairs",
    "format_report",
    "SURVEY_PAIRS",
    # Exceptions
    "CorrbootError",
    "ValidationError",
    "InvalidInputError",
    "DimensionError",
    "UnknownColumnError",
    "NumericalError",
    "DegenerateInputError",
]
