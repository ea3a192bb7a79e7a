"""
Bootstrap analysis of the survey variable pairs.

One parameterised routine runs the same engine over every pair; each call
to bootstrap() owns its generator, so pairs sharing a seed do not share a
random stream and the order of the pairs does not affect any result.
No multiple-comparison correction is applied across pairs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from corrboot.core.datasource import DataSource
from corrboot.core.exceptions import InvalidInputError
from corrboot.core.validation import check_finite
from corrboot.descriptive.solvers import correlation
from corrboot.montecarlo._common import ConfidenceSummary
from corrboot.montecarlo.solution import BootstrapSolution
from corrboot.montecarlo.solvers import bootstrap, summarize


SURVEY_PAIRS: tuple[tuple[str, str], ...] = (
    ('age', 'progressivism'),
    ('sustainability', 'localism'),
    ('sustainability', 'progressivism'),
)


@dataclass(frozen=True)
class PairAnalysis:
    """Bootstrap run and its summary for one column pair."""
    solution: BootstrapSolution
    summary: ConfidenceSummary

    @property
    def columns(self) -> tuple[str, str]:
        return self.solution.columns


def analyze_pairs(
    data,
    pairs: Iterable[tuple[str, str]] = SURVEY_PAIRS,
    *,
    estimator: Callable = correlation,
    n_sim: int = 1000,
    seed: int | None = 314159,
    alpha: float = 0.10,
    threshold: float = 0.0,
) -> dict[tuple[str, str], PairAnalysis]:
    """
    Bootstrap every column pair with identical engine parameters.

    Parameters
    ----------
    data : DataSource, DataFrame, mapping or sequence of row mappings
        Dataset holding every column named in ``pairs``.
    pairs : iterable of (col_x, col_y)
        Column pairs to analyse. Default: the three survey pairs.
    estimator, n_sim, seed
        Passed to bootstrap() unchanged for each pair.
    alpha, threshold
        Passed to summarize() for each pair.

    Returns
    -------
    dict
        Maps (col_x, col_y) to PairAnalysis, in the order given.

    Raises
    ------
    InvalidInputError
        If no pairs are given, a pair is repeated, or a column holds
        NaN or Inf.
    UnknownColumnError
        If any pair names a missing column; raised before any resampling.
    Any error from bootstrap() propagates unchanged for the first
    failing pair.
    """
    pair_list = [tuple(p) for p in pairs]
    if not pair_list:
        raise InvalidInputError("pairs: need at least one column pair")
    for p in pair_list:
        if len(p) != 2:
            raise InvalidInputError(f"pairs: expected (col_x, col_y), got {p!r}")
    if len(set(pair_list)) != len(pair_list):
        raise InvalidInputError(f"pairs: duplicate column pairs in {pair_list}")

    # Every column of every pair is read and checked before the first
    # resample, so a missing name fails without partial work
    needed = [col for pair in pair_list for col in pair]
    source = DataSource.build(data, columns=needed)
    for col in source.columns:
        check_finite(source[col], col)

    results: dict[tuple[str, str], PairAnalysis] = {}
    for col_x, col_y in pair_list:
        solution = bootstrap(
            source, col_x, col_y, estimator, n_sim, seed=seed,
        )
        results[(col_x, col_y)] = PairAnalysis(
            solution=solution,
            summary=summarize(solution, alpha=alpha, threshold=threshold),
        )
    return results


def format_report(results: dict[tuple[str, str], PairAnalysis]) -> str:
    """Plain-text table of pair summaries, one line per pair."""
    lines = []
    for (col_x, col_y), analysis in results.items():
        s = analysis.summary
        lines.append(
            f"{col_x} ~ {col_y}: r = {s.point_estimate:.4f}, "
            f"{s.conf_level * 100:g}% CI ({s.lower:.4f}, {s.upper:.4f}), "
            f"P(r < {s.threshold:g}) = {s.prob_below:.3f}"
        )
    return "\n".join(lines)
