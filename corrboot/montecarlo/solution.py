"""
Solution wrapper for bootstrap results.

BootstrapSolution wraps Result[BootParams] and provides convenient
accessors, summary helpers and R-style printed output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from corrboot.core.result import Result
from corrboot.montecarlo._common import BootParams, ConfidenceSummary

if TYPE_CHECKING:
    from corrboot.montecarlo.design import BootstrapDesign


@dataclass
class BootstrapSolution:
    """
    User-facing bootstrap results.

    Holds the point estimate (statistic on the original data) and the
    read-only vector of replicates. Interval and directional summaries
    are computed on demand and never cached on the object.
    """
    _result: Result[BootParams]
    _design: 'BootstrapDesign'

    # --- Core fields ---

    @property
    def point_estimate(self) -> float:
        """Statistic on the original, unresampled data."""
        return self._result.params.point_estimate

    @property
    def samples(self) -> NDArray[np.floating[Any]]:
        """Bootstrap replicates in draw order, shape (n_sim,). Read-only."""
        return self._result.params.samples

    @property
    def n_sim(self) -> int:
        """Number of bootstrap replicates."""
        return self._result.params.n_sim

    @property
    def bias(self) -> float:
        """Bootstrap bias estimate: mean(samples) - point_estimate."""
        return self._result.params.bias

    @property
    def se(self) -> float:
        """Bootstrap standard error: sd(samples)."""
        return self._result.params.se

    # --- Metadata ---

    @property
    def columns(self) -> tuple[str, str]:
        """Names of the analysed column pair."""
        return (self._design.col_x, self._design.col_y)

    @property
    def n(self) -> int:
        """Observations per resample."""
        return self._design.n

    @property
    def seed(self) -> int | None:
        """Random seed used."""
        return self._design.seed

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, str]:
        return self._result.provenance

    # --- Derived summaries ---

    def confidence_interval(self, alpha: float = 0.05) -> tuple[float, float]:
        """Two-sided (1 - alpha) percentile interval."""
        from corrboot.montecarlo.solvers import confidence_interval
        return confidence_interval(self, alpha)

    def probability_below(self, threshold: float = 0.0) -> float:
        """Fraction of replicates strictly below ``threshold``."""
        from corrboot.montecarlo.solvers import probability_below
        return probability_below(self, threshold)

    def summarize(self, alpha: float = 0.05, threshold: float = 0.0) -> ConfidenceSummary:
        """Point estimate, percentile interval and directional confidence."""
        from corrboot.montecarlo.solvers import summarize
        return summarize(self, alpha=alpha, threshold=threshold)

    # --- Display ---

    def summary(self, alpha: float = 0.05) -> str:
        """
        R-style print.boot output.

        Produces:
            ORDINARY NONPARAMETRIC BOOTSTRAP

            Call: bootstrap(data, 'age', 'progressivism', n_sim=1000, seed=314159)

            Bootstrap Statistics :
                         original           bias     std. error
                 t1*     -0.04180        0.00012        0.02031

            95% perc CI: (-0.08101, -0.00198)
        """
        col_x, col_y = self.columns
        lower, upper = self.confidence_interval(alpha)
        conf_pct = f"{(1.0 - alpha) * 100:g}%"

        lines = [
            "\nORDINARY NONPARAMETRIC BOOTSTRAP\n",
            f"Call: bootstrap(data, {col_x!r}, {col_y!r}, "
            f"n_sim={self.n_sim}, seed={self.seed})",
            "",
            "Bootstrap Statistics :",
            f"{'':>8s} {'original':>14s} {'bias':>14s} {'std. error':>14s}",
            f"{'t1*':>8s} {self.point_estimate:14.5f} {self.bias:14.5f} "
            f"{self.se:14.5f}",
            "",
            f"{conf_pct} perc CI: ({lower:.5f}, {upper:.5f})",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        col_x, col_y = self.columns
        return (
            f"BootstrapSolution({col_x!r} ~ {col_y!r}, n={self.n}, "
            f"n_sim={self.n_sim}, estimate={self.point_estimate:.4g}, "
            f"backend={self.backend_name!r})"
        )
